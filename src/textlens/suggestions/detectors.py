from __future__ import annotations

import re
from functools import partial
from typing import Callable, Dict, List, Sequence, Tuple

from ..models import Issue, IssueType, Severity, TextStats
from ..stats import analyze_text
from ..textutils import capitalize_first
from ..tokenization import split_whitespace

Detector = Callable[[str], List[Issue]]

DEFAULT_SUGGESTION_LIMIT = 20
LONG_SENTENCE_WORDS = 25
BREAK_SEARCH_RADIUS = 5
REPEAT_WINDOW_CHARS = 200

SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "very": ("extremely", "highly", "remarkably", "particularly"),
    "really": ("truly", "genuinely", "certainly", "definitely"),
    "just": ("simply", "merely", "only", ""),
    "actually": ("in fact", "indeed", "truly", ""),
    "basically": ("essentially", "fundamentally", "primarily", ""),
    "literally": ("actually", "truly", "precisely", ""),
    "thing": ("item", "object", "matter", "aspect"),
    "things": ("items", "aspects", "elements", "factors"),
    "good": ("excellent", "great", "effective", "beneficial"),
    "bad": ("poor", "negative", "harmful", "detrimental"),
    "big": ("large", "significant", "substantial", "considerable"),
    "small": ("minor", "slight", "modest", "limited"),
    "get": ("obtain", "acquire", "receive", "achieve"),
    "got": ("obtained", "acquired", "received", "achieved"),
    "make": ("create", "produce", "develop", "establish"),
    "made": ("created", "produced", "developed", "established"),
}

BREAK_WORDS = frozenset(
    ["and", "but", "or", "so", "because", "which", "that", "while", "although"]
)
FILLER_WORDS = ("very", "really", "just", "actually", "basically", "literally")
WEAK_WORDS = ("thing", "things", "good", "bad", "big", "small", "get", "got", "make", "made")

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
TRAILING_COMMA_RE = re.compile(r",?\s*$")
PASSIVE_PATTERNS = (
    re.compile(r"\b(was|were)\s+(\w+ed)\b", re.IGNORECASE),
    re.compile(r"\b(is|are)\s+being\s+(\w+ed)\b", re.IGNORECASE),
    re.compile(r"\b(has|have)\s+been\s+(\w+ed)\b", re.IGNORECASE),
)
LONG_WORD_RE = re.compile(r"\b\w{5,}\b")
MULTI_SPACE_RE = re.compile(r"  +")
MISSING_SPACE_RE = re.compile(r"[.!?,;:][A-Za-z]")


def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


FILLER_PATTERNS = tuple((word, _word_pattern(word)) for word in FILLER_WORDS)
WEAK_PATTERNS = tuple((word, _word_pattern(word)) for word in WEAK_WORDS)


def _split_long_sentence(words: Sequence[str]) -> str:
    midpoint = len(words) // 2
    break_index = midpoint
    low = midpoint - BREAK_SEARCH_RADIUS
    high = min(midpoint + BREAK_SEARCH_RADIUS + 1, len(words))
    for idx in range(low, high):
        if idx > 0 and words[idx].lower().replace(",", "") in BREAK_WORDS:
            break_index = idx
            break

    first = " ".join(words[:break_index]).strip()
    second = " ".join(words[break_index:]).strip()
    return TRAILING_COMMA_RE.sub(".", first, count=1) + " " + capitalize_first(second)


def check_long_sentences(text: str, max_words: int = LONG_SENTENCE_WORDS) -> List[Issue]:
    """Offer a two-sentence rewrite for every sentence over ``max_words`` words."""
    if not text:
        return []
    issues: List[Issue] = []
    for match in SENTENCE_RE.finditer(text):
        sentence = match.group(0)
        words = split_whitespace(sentence)
        if len(words) <= max_words:
            continue
        # Offsets bound the trimmed sentence so the slice equals ``original``.
        start = match.start() + (len(sentence) - len(sentence.lstrip()))
        end = match.end() - (len(sentence) - len(sentence.rstrip()))
        issues.append(
            Issue(
                id=f"long-{start}",
                type=IssueType.CLARITY,
                severity=Severity.MEDIUM,
                title="Long sentence detected",
                description=(
                    f"This sentence has {len(words)} words. "
                    "Click to split into shorter sentences."
                ),
                original=text[start:end],
                suggested=_split_long_sentence(words),
                start=start,
                end=end,
            )
        )
    return issues


def check_passive_voice(text: str) -> List[Issue]:
    """Flag likely passive constructions. These are advisory only."""
    if not text:
        return []
    issues: List[Issue] = []
    for pattern in PASSIVE_PATTERNS:
        for match in pattern.finditer(text):
            phrase = match.group(0)
            issues.append(
                Issue(
                    id=f"passive-{match.start()}",
                    type=IssueType.STYLE,
                    severity=Severity.LOW,
                    title="Possible passive voice",
                    description="Active voice is often clearer. Click to see suggestion.",
                    original=phrase,
                    suggested=f'[active form of "{phrase}"]',
                    start=match.start(),
                    end=match.end(),
                    auto_apply=False,
                )
            )
    return issues


def check_filler_words(text: str) -> List[Issue]:
    if not text:
        return []
    issues: List[Issue] = []
    for filler, pattern in FILLER_PATTERNS:
        suggested = SYNONYMS.get(filler, ("",))[0]
        if suggested:
            description = f'Replace with "{suggested}" for stronger writing.'
        else:
            description = "This word weakens your writing. Click to remove it."
        for match in pattern.finditer(text):
            issues.append(
                Issue(
                    id=f"filler-{match.start()}",
                    type=IssueType.STYLE,
                    severity=Severity.LOW,
                    title=f'Filler word: "{filler}"',
                    description=description,
                    original=match.group(0),
                    suggested=suggested,
                    start=match.start(),
                    end=match.end(),
                )
            )
    return issues


def check_weak_words(text: str) -> List[Issue]:
    """Suggest a stronger synonym, mirroring the match's leading capital."""
    if not text:
        return []
    issues: List[Issue] = []
    for word, pattern in WEAK_PATTERNS:
        synonyms = SYNONYMS.get(word)
        if not synonyms:
            continue
        for match in pattern.finditer(text):
            found = match.group(0)
            suggested = synonyms[0]
            if found[0].isupper():
                suggested = capitalize_first(suggested)
            issues.append(
                Issue(
                    id=f"weak-{match.start()}",
                    type=IssueType.STYLE,
                    severity=Severity.LOW,
                    title=f'Weak word: "{found}"',
                    description=f'Consider using "{suggested}" for more precise writing.',
                    original=found,
                    suggested=suggested,
                    start=match.start(),
                    end=match.end(),
                )
            )
    return issues


def check_repeated_words(text: str) -> List[Issue]:
    """Flag the first close recurrence of a long word used three to six times."""
    if not text:
        return []
    positions: Dict[str, List[Tuple[int, int]]] = {}
    for match in LONG_WORD_RE.finditer(text):
        positions.setdefault(match.group(0).lower(), []).append(
            (match.start(), match.end())
        )

    issues: List[Issue] = []
    for word, spans in positions.items():
        if not 3 <= len(spans) <= 6:
            continue
        for previous, current in zip(spans, spans[1:]):
            if current[0] - previous[0] >= REPEAT_WINDOW_CHARS:
                continue
            synonyms = SYNONYMS.get(word)
            if synonyms:
                start, end = current
                issues.append(
                    Issue(
                        id=f"repeated-{start}",
                        type=IssueType.STYLE,
                        severity=Severity.LOW,
                        title=f'Repeated word: "{word}"',
                        description=(
                            "This word appears multiple times nearby. "
                            f'Try "{synonyms[0]}".'
                        ),
                        original=text[start:end],
                        suggested=synonyms[0],
                        start=start,
                        end=end,
                    )
                )
            break
    return issues


def check_spacing(text: str) -> List[Issue]:
    if not text:
        return []
    issues: List[Issue] = []
    for match in MULTI_SPACE_RE.finditer(text):
        issues.append(
            Issue(
                id=f"space-{match.start()}",
                type=IssueType.GRAMMAR,
                severity=Severity.LOW,
                title="Extra spaces",
                description="Multiple spaces detected. Click to fix.",
                original=match.group(0),
                suggested=" ",
                start=match.start(),
                end=match.end(),
            )
        )
    for match in MISSING_SPACE_RE.finditer(text):
        found = match.group(0)
        issues.append(
            Issue(
                id=f"mspace-{match.start()}",
                type=IssueType.GRAMMAR,
                severity=Severity.MEDIUM,
                title="Missing space after punctuation",
                description="Add a space after punctuation marks.",
                original=found,
                suggested=f"{found[0]} {found[1]}",
                start=match.start(),
                end=match.end(),
            )
        )
    return issues


DETECTORS: Tuple[Tuple[str, Detector], ...] = (
    ("long_sentence", check_long_sentences),
    ("passive_voice", check_passive_voice),
    ("filler_words", check_filler_words),
    ("weak_words", check_weak_words),
    ("repeated_words", check_repeated_words),
    ("spacing", check_spacing),
)


def generate_local_suggestions(
    text: str,
    stats: TextStats | None = None,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
    long_sentence_words: int = LONG_SENTENCE_WORDS,
) -> List[Issue]:
    """Run every detector and keep the first ``limit`` issues by position.

    The cap is positional, not a ranking: issues later in the text are dropped
    first.
    """
    if not text:
        return []
    if stats is None:
        stats = analyze_text(text)
    if stats.total_words == 0:
        return []

    issues: List[Issue] = []
    for name, detector in DETECTORS:
        if name == "long_sentence":
            detector = partial(check_long_sentences, max_words=long_sentence_words)
        issues.extend(detector(text))

    issues.sort(key=lambda issue: issue.start or 0)
    return issues[: max(0, limit)]
