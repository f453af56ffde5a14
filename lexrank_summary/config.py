from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class LexRankParams:
    damping_factor: float = 0.85
    convergence_threshold: float = 0.0001
    similarity_threshold: float = 0.1  # minimum cosine for a graph edge
    max_iterations: int = 50

@dataclass(frozen=True)
class QualityThresholds:
    min_similarity: float = 0.3        # also used as the sentence quality floor
    high_quality: float = 0.6          # diversity guard during selection
    duplicate_threshold: float = 0.85  # near-duplicate detection

@dataclass(frozen=True)
class BufferLimits:
    summarization_sentences: int = 30

@dataclass(frozen=True)
class SummaryLimits:
    min_text_length: int = 300
    min_sentence_length: int = 20
    short_content_sentences: int = 5
    long_content_sentences: int = 12
    main_content_sentences: int = 3
    main_content_heading: str = "Main Content"
    main_content_heading_level: int = 3
    default_title: str = "Text Summary"

LEXRANK_PARAMS = LexRankParams()
QUALITY_THRESHOLDS = QualityThresholds()
BUFFER_LIMITS = BufferLimits()
SUMMARY_LIMITS = SummaryLimits()
