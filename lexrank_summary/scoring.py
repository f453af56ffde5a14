from __future__ import annotations
import logging
import re

import numpy as np

from .config import LEXRANK_PARAMS

logger = logging.getLogger(__name__)

RE_FRAGMENT_START = re.compile(r'^(Until|And|But|Or)\s+', re.I)
RE_REPEATED_WORD  = re.compile(r'\b(\w+)\b.*\b\1\b', re.I)
RE_COMPLETE       = re.compile(r'^[A-Z].*[.!?]$')
RE_GENERIC_OPENER = re.compile(r'^This\s+(method|technique|approach)\s', re.I)

AWKWARD_PHRASES = ("'ve tried so many",)
SIGNAL_WORDS = ('technique', 'method', 'approach')
FILLER_PHRASES = ('might be for you',)

def transition_matrix(similarity: np.ndarray) -> np.ndarray:
    """Row-normalize; rows with no edges stay all-zero."""
    sums = similarity.sum(axis=1, keepdims=True)
    T = np.zeros_like(similarity, dtype=np.float64)
    np.divide(similarity, sums, out=T, where=sums > 0)
    return T

def lexrank(similarity: np.ndarray,
            damping: float = LEXRANK_PARAMS.damping_factor,
            max_iter: int = LEXRANK_PARAMS.max_iterations,
            tolerance: float = LEXRANK_PARAMS.convergence_threshold) -> np.ndarray:
    """
    Damped centrality over the sentence similarity graph.

    Formula: S(i) = (1-d)/N + d * sum_j T[j][i] * S(j)

    Each sentence passes its current score to its neighbours in proportion to
    the normalized edge weight. Scores start at 1.0 and are not renormalized,
    only their relative order is meaningful.

    Args:
        similarity: square n x n matrix with a zero diagonal
        damping: probability of following an edge rather than teleporting
        max_iter: iteration cap
        tolerance: stop once the L1 change between iterations falls below it

    Returns:
        One score per row of `similarity`
    """
    if similarity.ndim != 2 or similarity.shape[0] != similarity.shape[1]:
        raise ValueError(f"similarity matrix must be square, got shape {similarity.shape}")
    n = similarity.shape[0]
    if n == 0:
        return np.zeros(0, dtype=np.float64)

    T = transition_matrix(similarity)
    np.fill_diagonal(T, 0.0)
    scores = np.ones(n, dtype=np.float64)
    diff = 0.0

    for iteration in range(max_iter):
        new_scores = (1.0 - damping) / n + damping * (T.T @ scores)
        diff = float(np.abs(new_scores - scores).sum())
        scores = new_scores
        if diff < tolerance:
            logger.debug("lexrank: converged after %d iterations", iteration + 1)
            break
    else:
        logger.debug("lexrank: stopped at cap of %d iterations (diff=%.6f)", max_iter, diff)

    return scores

def sentence_quality(sentence: str) -> float:
    quality = 1.0

    # very short sentences
    if len(sentence) < 30:
        quality *= 0.5
    if len(sentence) < 15:
        quality *= 0.3

    # poor grammar indicators
    if any(p in sentence for p in AWKWARD_PHRASES):
        quality *= 0.2
    if RE_FRAGMENT_START.search(sentence):
        quality *= 0.6
    if len(sentence.split(' ')) < 5:
        quality *= 0.4

    if RE_REPEATED_WORD.search(sentence):
        quality *= 0.7

    # complete thoughts
    if RE_COMPLETE.match(sentence):
        quality *= 1.2
    if any(w in sentence for w in SIGNAL_WORDS):
        quality *= 1.1

    # generic filler
    if any(p in sentence for p in FILLER_PHRASES):
        quality *= 0.3
    if RE_GENERIC_OPENER.match(sentence):
        quality *= 0.5

    return max(0.0, min(1.0, quality))
