from __future__ import annotations
import logging
import math
from typing import List

from .config import SUMMARY_LIMITS
from .datatypes import PipelineTrace, RawDocument, Section, Sentence, SummaryResult
from .dedup import remove_duplicates
from .features import compute_tfidf_vectors
from .graphing import build_similarity_matrix
from .preprocessing import segment
from .scoring import lexrank
from .selection import select_diverse_sentences

logger = logging.getLogger(__name__)

def adaptive_max_sentences(requested: int, unique_count: int) -> int:
    """Cap the requested sentence count by document size: 2, 4 or 7."""
    if unique_count <= 4:
        cap = 2
    elif unique_count <= 8:
        cap = 4
    else:
        cap = 7
    return max(0, min(requested, cap))

def _ratio(selected: int, total: int) -> float:
    if total <= 0:
        return 0.0
    # half-up to two decimals
    return math.floor(selected / total * 100 + 0.5) / 100

def format_result(selected: List[Sentence], all_sentences: List[Sentence], title: str) -> SummaryResult:
    """
    Shape the selection by document size:
      - short (<= 5 sentences): 1-3 key points
      - long (>= 12 sentences, >= 4 selected): 2-4 key points + a "Main Content" paragraph
      - medium: 1-4 key points
    """
    texts = [s.text for s in selected]
    k = len(texts)
    total = len(all_sentences)
    sections: List[Section] = []

    if total <= SUMMARY_LIMITS.short_content_sentences:
        bullets = min(max(1, math.ceil(k * 0.8)), 3)
        key_points = texts[:bullets]
    elif total >= SUMMARY_LIMITS.long_content_sentences and k >= 4:
        bullets = min(max(2, math.floor(k * 0.6)), 4)
        key_points = texts[:bullets]
        rest = texts[bullets:bullets + SUMMARY_LIMITS.main_content_sentences]
        if rest:
            sections.append(Section(heading=SUMMARY_LIMITS.main_content_heading,
                                    heading_level=SUMMARY_LIMITS.main_content_heading_level,
                                    content=' '.join(rest)))
    else:
        bullets = min(max(1, math.ceil(k * 0.7)), 4)
        key_points = texts[:bullets]

    return SummaryResult(title=title or SUMMARY_LIMITS.default_title,
                         sections=sections,
                         key_points=key_points,
                         total_sentences=total,
                         summary_ratio=_ratio(k, total))

def run_pipeline(text: str, title: str = "", max_sentences: int = 5) -> PipelineTrace:
    """Run every stage once and keep the intermediate artifacts."""
    doc = RawDocument(text=text or "", title=title or "")
    trace = PipelineTrace(document=doc, max_sentences=max_sentences)

    if len(doc.text) < SUMMARY_LIMITS.min_text_length:
        logger.debug("summarize: input too short (%d chars)", len(doc.text))
        trace.early_exit = "short_text"
        trace.result = SummaryResult(title=doc.title or SUMMARY_LIMITS.default_title)
        return trace

    trace.sentences = segment(doc.text)
    unique = remove_duplicates(trace.sentences)
    trace.unique_sentences = unique

    if len(unique) <= 2:
        logger.debug("summarize: only %d unique sentences, skipping ranking", len(unique))
        trace.early_exit = "few_sentences"
        trace.selected = unique[:3]
        trace.result = format_result(trace.selected, unique, doc.title)
        return trace

    trace.max_sentences = adaptive_max_sentences(max_sentences, len(unique))

    trace.vocabulary, trace.idf, trace.tfidf = compute_tfidf_vectors(unique)
    trace.similarity = build_similarity_matrix(trace.tfidf)
    trace.scores = lexrank(trace.similarity)
    trace.selected, trace.candidates = select_diverse_sentences(unique, trace.scores, trace.max_sentences)
    trace.result = format_result(trace.selected, unique, doc.title)

    logger.debug("summarize: sentences=%d unique=%d selected=%d ratio=%.2f",
                 len(trace.sentences), len(unique), len(trace.selected), trace.result.summary_ratio)
    return trace

def summarize(text: str, title: str = "", max_sentences: int = 5) -> SummaryResult:
    # Pipeline glue
    return run_pipeline(text, title=title, max_sentences=max_sentences).result
