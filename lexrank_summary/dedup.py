from __future__ import annotations
import logging
from typing import List

from .config import QUALITY_THRESHOLDS
from .datatypes import Sentence
from .preprocessing import normalize

logger = logging.getLogger(__name__)

def levenshtein(a: str, b: str) -> int:
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur.append(prev[j-1])
            else:
                cur.append(1 + min(prev[j-1], cur[j-1], prev[j]))
        prev = cur
    return prev[-1]

def string_similarity(a: str, b: str) -> float:
    """
    Edit-distance similarity in [0, 1]:
      1 - levenshtein(a, b) / max(len(a), len(b))
    Two empty strings are identical (1.0); one empty string matches nothing (0.0).
    Callers pass already-normalized text.
    """
    if not a:
        return 1.0 if not b else 0.0
    if not b:
        return 0.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))

def remove_duplicates(sentences: List[Sentence],
                      threshold: float = QUALITY_THRESHOLDS.duplicate_threshold) -> List[Sentence]:
    """
    Drop exact and near-duplicate sentences, keeping the earliest phrasing.
    Each sentence is compared only against those already kept, so the
    result depends on input order.
    """
    unique: List[Sentence] = []
    kept_keys: List[str] = []
    seen = set()
    for s in sentences:
        key = normalize(s.text)
        if key in seen:
            continue
        if any(string_similarity(key, other) > threshold for other in kept_keys):
            continue
        unique.append(s)
        kept_keys.append(key)
        seen.add(key)

    logger.debug("dedup: kept=%d from=%d", len(unique), len(sentences))
    return unique
