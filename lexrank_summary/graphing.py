from __future__ import annotations
import logging
import math
from typing import List, Optional

import networkx as nx
import numpy as np

from .config import LEXRANK_PARAMS
from .datatypes import Sentence

logger = logging.getLogger(__name__)

def cosine_similarity(v1: np.ndarray, v2: np.ndarray) -> float:
    """Cosine of the angle between two dense vectors; 0.0 if either norm is zero."""
    n1 = math.sqrt(float(np.dot(v1, v1)))
    n2 = math.sqrt(float(np.dot(v2, v2)))
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    return float(np.dot(v1, v2)) / (n1 * n2)

def build_similarity_matrix(vectors: np.ndarray,
                            threshold: float = LEXRANK_PARAMS.similarity_threshold) -> np.ndarray:
    n = vectors.shape[0]
    M = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i+1, n):
            sim = cosine_similarity(vectors[i], vectors[j])
            if sim > threshold:
                M[i, j] = M[j, i] = sim

    logger.debug("graph: nodes=%d edges=%d (thr=%.2f)", n, int(np.count_nonzero(M)) // 2, threshold)
    return M

def to_networkx(matrix: np.ndarray, sentences: Optional[List[Sentence]] = None) -> nx.Graph:
    """Undirected weighted graph with one node per row and an edge per non-zero entry."""
    G = nx.Graph()
    n = matrix.shape[0]
    for i in range(n):
        if sentences is not None:
            G.add_node(i, index=sentences[i].index, text=sentences[i].text)
        else:
            G.add_node(i)
    for i in range(n):
        for j in range(i+1, n):
            if matrix[i, j] > 0:
                G.add_edge(i, j, weight=float(matrix[i, j]))
    return G
