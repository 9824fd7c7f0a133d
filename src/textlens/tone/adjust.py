"""Rewrite text toward a target tone level.

Every adjustment is resolved to an ordered plan of word tables and sentence
transforms, then run through the shared application routines in
``textlens.tone.rules``.
"""

from __future__ import annotations

import logging
import math
from re import Match
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from ..models import ToneVector
from .detection import detect_domain, detect_tone
from .rules import (
    SentenceTransform,
    WordTable,
    apply_sentence_transform,
    apply_word_table,
    keep_case,
    rule,
)
from .tables import (
    ADVISORY_SUGGESTIONS,
    CASUAL_TO_FORMAL,
    CONCISE_TO_ELABORATE,
    DOMAIN_TRANSFORMS,
    ELABORATE_TO_CONCISE,
    ENTHUSIASTIC_TO_RESERVED,
    FORMAL_TO_CASUAL,
    LEVEL_DESCRIPTIONS,
    MAX_LEVEL,
    MIN_LEVEL,
    NEUTRAL_TO_INSPIRATIONAL,
    NEUTRAL_TO_PASSIONATE,
    NEUTRAL_TO_PERSUASIVE,
    NEUTRAL_TO_URGENT,
    RESERVED_TO_ENTHUSIASTIC,
    TONE_LEVELS,
    VERY_CASUAL_ADDITIONS,
    VERY_FORMAL_ADDITIONS,
    Domain,
    ToneCategory,
)

logger = logging.getLogger(__name__)

Step = Union[WordTable, SentenceTransform]

MAX_ADVISORY_SUGGESTIONS = 4
_TRANSITIONS = r"(?!(?:Furthermore|Additionally|Moreover)\b)"

# -- compiled word tables --------------------------------------------------

WORD_TABLES: Dict[str, WordTable] = {
    name: WordTable(name, entries)
    for name, entries in (
        ("casual_to_formal", CASUAL_TO_FORMAL),
        ("formal_to_casual", FORMAL_TO_CASUAL),
        ("very_casual_additions", VERY_CASUAL_ADDITIONS),
        ("very_formal_additions", VERY_FORMAL_ADDITIONS),
        ("reserved_to_enthusiastic", RESERVED_TO_ENTHUSIASTIC),
        ("enthusiastic_to_reserved", ENTHUSIASTIC_TO_RESERVED),
        ("neutral_to_passionate", NEUTRAL_TO_PASSIONATE),
        ("neutral_to_urgent", NEUTRAL_TO_URGENT),
        ("concise_to_elaborate", CONCISE_TO_ELABORATE),
        ("elaborate_to_concise", ELABORATE_TO_CONCISE),
        ("neutral_to_persuasive", NEUTRAL_TO_PERSUASIVE),
        ("neutral_to_inspirational", NEUTRAL_TO_INSPIRATIONAL),
    )
}

DOMAIN_TABLES: Dict[Domain, WordTable] = {
    domain: WordTable(domain.value, entries) for domain, entries in DOMAIN_TRANSFORMS.items()
}


# -- sentence transforms ---------------------------------------------------


def _lower_first_word(value: str) -> str:
    word = value.split(" ", 1)[0]
    if word == "I" or word.startswith("I'") or (len(word) > 1 and word[1].isupper()):
        return value
    return value[:1].lower() + value[1:]


def _join(separator: str, transition: str):
    def _replace(match: Match[str]) -> str:
        return f"{match.group(1)}{separator} {transition}, {_lower_first_word(match.group(2))}."

    return _replace


def _lookup(options: Mapping[str, str]):
    def _replace(match: Match[str]) -> str:
        found = match.group(0)
        replacement = options.get(found.lower(), found)
        if found[:1].isupper():
            return replacement[:1].upper() + replacement[1:]
        return replacement

    return _replace


SENTENCE_TRANSFORMS: Dict[str, SentenceTransform] = {
    "casual_to_formal": SentenceTransform(
        name="casual_to_formal",
        rules=(
            rule(rf"^(.+)\. {_TRANSITIONS}(.+)\.$", _join(".", "Furthermore"), flags=0),
            rule(rf"^(.+), {_TRANSITIONS}(.+)\.$", _join(".", "Additionally"), flags=0),
            rule(rf"^(.+)\? {_TRANSITIONS}(.+)\.$", _join("?", "Moreover"), flags=0),
        ),
        first_match_only=True,
        capitalize=True,
    ),
    "formal_to_casual": SentenceTransform(
        name="formal_to_casual",
        rules=(
            rule(r"\b(?:nevertheless|however|notwithstanding)\b", keep_case("but")),
            rule(r"\b(?:therefore|consequently|hence|thus|accordingly)\b", keep_case("so")),
            rule(r"\b(?:moreover|furthermore|additionally)\b", keep_case("also")),
        ),
    ),
    "neutral_to_enthusiastic": SentenceTransform(
        name="neutral_to_enthusiastic",
        rules=(
            rule(r"\b(?:good|nice|fine)\b", _lookup({"good": "amazing", "nice": "fantastic", "fine": "wonderful"})),
            rule(r"\bI (?:think|believe|feel)\b", "I'm excited that"),
            rule(r"\binterested in\b", "passionate about"),
        ),
        add_exclamation=True,
    ),
    "neutral_to_passionate": SentenceTransform(
        name="neutral_to_passionate",
        rules=(
            rule(r"\bI (?:think|believe)\b(?! passionately)", "I passionately believe"),
            rule(r"\b(important|significant)\b(?! beyond measure)", r"\1 beyond measure"),
            rule(r"\b(?:care about|value)\b", "cherish deeply"),
        ),
        add_exclamation=True,
        intensify=True,
    ),
    "neutral_to_urgent": SentenceTransform(
        name="neutral_to_urgent",
        rules=(
            rule(r"\b(?:soon|later|eventually)\b", keep_case("immediately")),
            rule(r"\b(?:need to|have to)\b", keep_case("absolutely must")),
        ),
        add_exclamation=True,
        add_urgency=True,
    ),
    "neutral_to_persuasive": SentenceTransform(
        name="neutral_to_persuasive",
        rules=(
            rule(r"\b(?:good|better|best)\b", _lookup({"good": "powerful", "better": "superior", "best": "ultimate"})),
            rule(r"\b(?:think|believe)\b", keep_case("know from experience")),
            rule(r"\b(?:helps|helped|help)\b", keep_case("empowers")),
        ),
        persuasive_opening=True,
    ),
    "neutral_to_inspirational": SentenceTransform(
        name="neutral_to_inspirational",
        rules=(
            rule(r"\b(?:change|improve)\b", keep_case("transform")),
            rule(r"\b(?:dream|hope|want)\b", keep_case("aspire")),
            rule(r"\b(?:can|could)\b", keep_case("dare to")),
        ),
        inspirational=True,
    ),
}

# emotion / style target level -> (word table, sentence transform)
EMOTION_BANDS: Dict[int, Tuple[str, str]] = {
    2: ("reserved_to_enthusiastic", "neutral_to_enthusiastic"),
    3: ("neutral_to_passionate", "neutral_to_passionate"),
    4: ("neutral_to_urgent", "neutral_to_urgent"),
}
STYLE_BANDS: Dict[int, Tuple[str, str | None]] = {
    0: ("elaborate_to_concise", None),
    2: ("concise_to_elaborate", None),
    3: ("neutral_to_persuasive", "neutral_to_persuasive"),
    4: ("neutral_to_inspirational", "neutral_to_inspirational"),
}


def clamp_level(value: Any) -> int | None:
    """Integer level in [0, 4], or ``None`` when ``value`` is not a number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    except OverflowError:
        return MAX_LEVEL if value > 0 else MIN_LEVEL
    if math.isnan(number):
        return None
    if math.isinf(number):
        return MAX_LEVEL if number > 0 else MIN_LEVEL
    level = int(round(number))
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def _band(bands: Mapping[int, Tuple[str, str | None]], level: int) -> List[Step]:
    table_name, transform_name = bands[level]
    steps: List[Step] = [WORD_TABLES[table_name]]
    if transform_name is not None:
        steps.append(SENTENCE_TRANSFORMS[transform_name])
    return steps


def plan_adjustment(category: ToneCategory, from_level: int, to_level: int) -> List[Step]:
    """Ordered steps that move ``category`` from one level to another."""
    steps: List[Step] = []
    if from_level == to_level:
        return steps

    if category is ToneCategory.FORMALITY:
        if to_level > from_level:
            if from_level <= 1 and to_level >= 2:
                steps.append(WORD_TABLES["casual_to_formal"])
                steps.append(SENTENCE_TRANSFORMS["casual_to_formal"])
            if to_level >= 4:
                steps.append(WORD_TABLES["very_formal_additions"])
        else:
            if from_level >= 3 and to_level <= 2:
                steps.append(WORD_TABLES["formal_to_casual"])
                steps.append(SENTENCE_TRANSFORMS["formal_to_casual"])
            if to_level <= 0:
                steps.append(WORD_TABLES["very_casual_additions"])
    elif category is ToneCategory.EMOTION:
        if to_level in EMOTION_BANDS:
            steps.extend(_band(EMOTION_BANDS, to_level))
        elif to_level < from_level:
            steps.append(WORD_TABLES["enthusiastic_to_reserved"])
    elif category is ToneCategory.STYLE:
        if to_level in STYLE_BANDS:
            steps.extend(_band(STYLE_BANDS, to_level))
        elif to_level < from_level:
            steps.append(WORD_TABLES["elaborate_to_concise"])
    return steps


def _run(text: str, steps: Sequence[Step], level: int) -> str:
    result = text
    for step in steps:
        if isinstance(step, WordTable):
            result = apply_word_table(result, step)
        else:
            result = apply_sentence_transform(result, step, level)
    return result


def adjust_tone_by_category(text: str, category: Any, from_level: Any, to_level: Any) -> str:
    """Move one tone dimension of ``text`` from ``from_level`` to ``to_level``.

    Unknown categories and non-numeric levels leave the text unchanged; levels
    outside 0-4 are clamped.
    """
    if not text or not text.strip():
        return text
    parsed = ToneCategory.parse(category)
    start = clamp_level(from_level)
    target = clamp_level(to_level)
    if parsed is None or start is None or target is None or start == target:
        return text

    result = text
    domain = detect_domain(text)
    if domain is not None:
        result = apply_word_table(result, DOMAIN_TABLES[domain])

    steps = plan_adjustment(parsed, start, target)
    logger.debug(
        "Adjusting %s %d -> %d (domain=%s): %s",
        parsed.value,
        start,
        target,
        domain.value if domain else None,
        [getattr(step, "name", "?") for step in steps],
    )
    return _run(result, steps, target)


def adjust_tone(text: str, target_level: Any, category: Any = "formality") -> str:
    """Detect the current level of ``category`` and adjust it to ``target_level``."""
    if not text or not text.strip():
        return text
    parsed = ToneCategory.parse(category)
    if parsed is None:
        return text
    current = detect_tone(text).level(parsed.value)
    return adjust_tone_by_category(text, parsed, current, target_level)


def adjust_tone_advanced(text: str, adjustments: Mapping[str, Any]) -> str:
    """Apply several dimensions (and optionally a domain) in one call.

    The tone is detected once on the original text; every dimension moves from
    that detected level, even after earlier dimensions have rewritten the text.
    """
    if not text or not text.strip() or not adjustments:
        return text

    detected = detect_tone(text)
    result = text
    for category in ToneCategory:
        if category.value not in adjustments:
            continue
        result = adjust_tone_by_category(
            result, category, detected.level(category.value), adjustments[category.value]
        )

    domain = Domain.parse(adjustments.get("domain"))
    if domain is not None:
        result = apply_word_table(result, DOMAIN_TABLES[domain])
    return result


def _relevant_example(
    text: str, examples: Sequence[Tuple[str, str]]
) -> Tuple[str, str] | None:
    words = text.lower().split()
    for source, target in examples:
        for example_word in source.lower().split():
            if any(example_word in word for word in words):
                return source, target
    return None


def generate_ai_suggestions(
    text: str,
    category: Any,
    target_level: Any,
    current_tone: ToneVector | None = None,
) -> List[str]:
    """Advisory hints for reaching ``target_level``; the text is never changed."""
    suggestions: List[str] = []
    parsed = ToneCategory.parse(category)
    level = clamp_level(target_level)
    if not text or parsed is None or level is None:
        return suggestions

    tone = current_tone or detect_tone(text)
    band = TONE_LEVELS[parsed][level]
    entry = ADVISORY_SUGGESTIONS.get(parsed, {}).get(band)
    if entry is not None:
        hints, examples = entry
        suggestions.extend(hints[:2])
        example = _relevant_example(text, examples)
        if example is not None:
            suggestions.append(f'Example transformation: "{example[0]}" → "{example[1]}"')

    if parsed is ToneCategory.FORMALITY:
        if level >= 3 and tone.formality < 2:
            suggestions.append(
                "Consider using more sophisticated vocabulary and complex sentence structures"
            )
        if level <= 1 and tone.formality > 2:
            suggestions.append(
                "Try using contractions and simpler language to create a more conversational tone"
            )
    elif parsed is ToneCategory.EMOTION and level >= 3:
        suggestions.append("Use sensory language and vivid descriptions to heighten emotional impact")
        suggestions.append("Consider the emotional journey of your reader")
    elif parsed is ToneCategory.STYLE and level >= 3:
        suggestions.append("Focus on benefits and outcomes rather than features")
        suggestions.append("Use storytelling techniques to engage your audience")

    domain = detect_domain(text)
    if domain is not None:
        suggestions.append(
            f"Detected {domain.value} context - consider using domain-specific terminology"
        )
    return suggestions[:MAX_ADVISORY_SUGGESTIONS]


def get_tone_options() -> Dict[str, Any]:
    return {
        "categories": {
            category.value: {
                "name": category.value.capitalize(),
                "levels": list(TONE_LEVELS[category]),
                "descriptions": dict(enumerate(LEVEL_DESCRIPTIONS[category])),
            }
            for category in ToneCategory
        },
        "domains": [domain.value for domain in Domain],
    }
