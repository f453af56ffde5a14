from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

@dataclass(frozen=True)
class RawDocument:
    text: str
    title: str = ""

@dataclass(frozen=True)
class Sentence:
    index: int  # position in document order
    text: str

@dataclass(frozen=True)
class Candidate:
    sentence: Sentence
    rank_score: float
    quality_score: float

    @property
    def combined(self) -> float:
        return self.rank_score * self.quality_score

@dataclass
class Section:
    heading: str
    heading_level: Optional[int] = None
    points: Optional[List[str]] = None
    content: Optional[str] = None  # paragraph-style body

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"heading": self.heading}
        if self.heading_level is not None:
            out["headingLevel"] = self.heading_level
        if self.points is not None:
            out["points"] = list(self.points)
        if self.content is not None:
            out["content"] = self.content
        return out

@dataclass
class SummaryResult:
    title: str
    sections: List[Section] = field(default_factory=list)
    key_points: List[str] = field(default_factory=list)
    total_sentences: int = 0
    summary_ratio: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form with the camelCase keys callers persist and render."""
        return {
            "title": self.title,
            "sections": [s.to_dict() for s in self.sections],
            "keyPoints": list(self.key_points),
            "totalSentences": self.total_sentences,
            "summaryRatio": self.summary_ratio,
        }

@dataclass
class PipelineTrace:
    """Intermediate artifacts of one summarization call, for inspection."""
    document: RawDocument
    max_sentences: int
    result: Optional[SummaryResult] = None
    early_exit: Optional[str] = None
    sentences: List[Sentence] = field(default_factory=list)
    unique_sentences: List[Sentence] = field(default_factory=list)
    vocabulary: List[str] = field(default_factory=list)
    idf: Optional[np.ndarray] = None
    tfidf: Optional[np.ndarray] = None          # n x |V|
    similarity: Optional[np.ndarray] = None     # n x n
    scores: Optional[np.ndarray] = None         # n
    candidates: List[Candidate] = field(default_factory=list)
    selected: List[Sentence] = field(default_factory=list)
