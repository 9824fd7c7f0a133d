from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List


class IssueType(str, Enum):
    GRAMMAR = "grammar"
    STYLE = "style"
    CLARITY = "clarity"
    TONE = "tone"
    STRUCTURE = "structure"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(slots=True)
class TextStats:
    """Counts derived from a single text snapshot."""

    total_chars: int = 0
    total_chars_no_spaces: int = 0
    total_words: int = 0
    total_sentences: int = 0
    total_paragraphs: int = 0
    unique_words: int = 0

    def to_dict(self) -> dict[str, int]:
        return dict(asdict(self))


@dataclass(slots=True)
class ReadabilityResult:
    """Flesch scores plus the grade/audience band they fall into."""

    flesch_kincaid: float
    flesch_reading: float
    grade_level: str
    avg_word_length: float
    avg_sentence_length: float
    complex_word_percent: int
    audience_level: str

    @property
    def is_available(self) -> bool:
        return self.grade_level != "N/A"

    def to_dict(self) -> dict[str, Any]:
        return dict(asdict(self))


@dataclass(slots=True)
class EmotionalWord:
    word: str
    type: str


@dataclass(slots=True)
class SentimentResult:
    """Lexicon-based polarity for a text."""

    score: int = 0
    label: str = "Neutral"
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    emotional_words: List[EmotionalWord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return dict(asdict(self))


@dataclass(slots=True)
class Keyword:
    word: str
    count: int


@dataclass(frozen=True, slots=True)
class Issue:
    """A positioned text problem, optionally carrying an automatic fix.

    ``start``/``end`` are character offsets into the exact text the issue was
    detected on; they are stale as soon as that text changes.
    """

    id: str
    type: IssueType
    severity: Severity
    title: str
    description: str
    original: str | None = None
    suggested: str | None = None
    start: int | None = None
    end: int | None = None
    auto_apply: bool = True

    @property
    def fixable(self) -> bool:
        return (
            self.auto_apply
            and self.start is not None
            and self.end is not None
            and self.suggested is not None
        )

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["type"] = self.type.value
        payload["severity"] = self.severity.value
        payload["fixable"] = self.fixable
        return payload


@dataclass(slots=True)
class ToneVector:
    """Continuous tone estimate; each dimension sits in [0, 4]."""

    formality: float = 2.0
    emotion: float = 1.0
    style: float = 1.0
    confidence: float = 0.0

    def level(self, category: str) -> int:
        """Nearest discrete level for a dimension."""
        value = getattr(self, category, 2.0)
        return int(value + 0.5)

    def to_dict(self) -> dict[str, float]:
        return dict(asdict(self))


@dataclass(slots=True)
class ScoreBreakdown:
    readability: float = 0.0
    structure: float = 0.0
    vocabulary: float = 0.0
    clarity: float = 0.0
    depth: float = 0.0
    bonus: float = 0.0

    def total(self) -> float:
        return (
            self.readability
            + self.structure
            + self.vocabulary
            + self.clarity
            + self.depth
            + self.bonus
        )


@dataclass(slots=True)
class OverallScore:
    score: int
    breakdown: ScoreBreakdown
    label: str

    def to_dict(self) -> dict[str, Any]:
        return dict(asdict(self))


@dataclass(slots=True)
class SentenceLength:
    index: int
    words: int
    preview: str
    status: str


@dataclass(slots=True)
class SentenceProfile:
    sentences: List[SentenceLength]
    average: int
    long_sentences: int
    short_sentences: int
    variation: int


@dataclass(slots=True)
class FlowChunk:
    index: int
    text: str
    complexity: int
    label: str


@dataclass(slots=True)
class ParagraphInfo:
    index: int
    words: int
    sentences: int
    status: str


@dataclass(slots=True)
class AnalysisResult:
    """Everything computed for one text snapshot."""

    stats: TextStats
    word_frequency: Dict[str, int]
    readability: ReadabilityResult | None
    sentiment: SentimentResult | None
    keywords: List[Keyword]
    suggestions: List[Issue]
    overall: OverallScore
    reading_time: int = 0
    speaking_time: int = 0
    writing_style: str = "casual"
    language: str = "en"

    @property
    def overall_score(self) -> int:
        return self.overall.score
