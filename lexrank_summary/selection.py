from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from .config import QUALITY_THRESHOLDS
from .datatypes import Candidate, Sentence
from .dedup import string_similarity
from .preprocessing import normalize
from .scoring import sentence_quality

logger = logging.getLogger(__name__)

def build_candidates(sentences: List[Sentence], scores: Sequence[float]) -> List[Candidate]:
    if len(sentences) != len(scores):
        raise ValueError(f"sentences/scores length mismatch: {len(sentences)} != {len(scores)}")
    return [Candidate(sentence=s, rank_score=float(scores[i]), quality_score=sentence_quality(s.text))
            for i, s in enumerate(sentences)]

def select_diverse_sentences(sentences: List[Sentence],
                             scores: Sequence[float],
                             max_sentences: int,
                             min_quality: float = QUALITY_THRESHOLDS.min_similarity,
                             diversity_threshold: float = QUALITY_THRESHOLDS.high_quality
                             ) -> Tuple[List[Sentence], List[Candidate]]:
    """
    Pick up to `max_sentences` sentences by rank x quality, skipping any that
    read too much like one already picked. Returns (selected in document
    order, all scored candidates).
    """
    candidates = build_candidates(sentences, scores)
    ranked = [c for c in candidates if c.quality_score > min_quality]
    # stable: equal scores keep document order
    ranked.sort(key=lambda c: c.combined, reverse=True)

    selected: List[Candidate] = []
    selected_keys: List[str] = []
    for c in ranked:
        if len(selected) >= max_sentences:
            break
        key = normalize(c.sentence.text)
        if any(string_similarity(key, other) > diversity_threshold for other in selected_keys):
            continue
        selected.append(c)
        selected_keys.append(key)

    logger.debug("select: picked=%d eligible=%d total=%d", len(selected), len(ranked), len(candidates))
    selected.sort(key=lambda c: c.sentence.index)
    return [c.sentence for c in selected], candidates
