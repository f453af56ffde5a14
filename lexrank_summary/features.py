from __future__ import annotations
import logging
import math
from collections import Counter
from typing import Dict, List, Tuple

import numpy as np

from .datatypes import Sentence
from .preprocessing import tokenize

logger = logging.getLogger(__name__)

def build_vocabulary(tokenized: List[List[str]]) -> Dict[str, int]:
    """Ordered token -> column mapping, in first-seen order."""
    vocab: Dict[str, int] = {}
    for toks in tokenized:
        for t in toks:
            if t not in vocab:
                vocab[t] = len(vocab)
    return vocab

def _compute_tf(tokens: List[str], vocab: Dict[str, int]) -> np.ndarray:
    """TF(t, s) = count(t in s) / |s|, per sentence."""
    tf = np.zeros(len(vocab), dtype=np.float64)
    if not tokens:
        return tf
    total = len(tokens)
    for t, c in Counter(tokens).items():
        tf[vocab[t]] = c / total
    return tf

def _compute_idf(tokenized: List[List[str]], vocab: Dict[str, int]) -> np.ndarray:
    """
    IDF(t) = ln(N / (DF(t) + 1))
    Each sentence is one 'document'. The +1 keeps the value finite for every
    term; a term found in all N sentences gets ln(N / (N+1)), slightly below zero.
    """
    n = len(tokenized)
    df = np.zeros(len(vocab), dtype=np.float64)
    for toks in tokenized:
        for t in set(toks):
            df[vocab[t]] += 1
    if n == 0:
        return df
    return np.array([math.log(n / (d + 1.0)) for d in df], dtype=np.float64)

def compute_tfidf_vectors(sentences: List[Sentence]) -> Tuple[List[str], np.ndarray, np.ndarray]:
    """
    Returns (vocabulary, idf, tfidf) where tfidf has one row per sentence,
    aligned with the vocabulary columns.
    """
    tokenized = [tokenize(s.text) for s in sentences]
    vocab = build_vocabulary(tokenized)
    idf = _compute_idf(tokenized, vocab)
    if not sentences:
        return list(vocab), idf, np.zeros((0, len(vocab)), dtype=np.float64)

    tf = np.vstack([_compute_tf(toks, vocab) for toks in tokenized])
    tfidf = tf * idf
    logger.debug("vectorize: sentences=%d vocab=%d", len(sentences), len(vocab))
    return list(vocab), idf, tfidf
