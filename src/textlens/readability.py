from __future__ import annotations

import re
from typing import List, Tuple

from .models import ReadabilityResult, TextStats
from .textutils import round_half_up
from .tokenization import tokenize_words

SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
LEADING_Y_RE = re.compile(r"^y")
VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")

# (minimum reading ease, grade level, audience)
READING_EASE_BANDS: List[Tuple[float, str, str]] = [
    (90.0, "5th Grade", "Very Easy"),
    (80.0, "6th Grade", "Easy"),
    (70.0, "7th Grade", "Fairly Easy"),
    (60.0, "8-9th Grade", "Standard"),
    (50.0, "10-12th Grade", "Fairly Difficult"),
    (30.0, "College", "Difficult"),
]
FLOOR_BAND = ("Graduate", "Very Difficult")


def not_available() -> ReadabilityResult:
    """Fresh "N/A" result for text without words."""
    return ReadabilityResult(
        flesch_kincaid=0.0,
        flesch_reading=0.0,
        grade_level="N/A",
        avg_word_length=0.0,
        avg_sentence_length=0.0,
        complex_word_percent=0,
        audience_level="N/A",
    )


def count_syllables(word: str) -> int:
    """Estimate syllables from vowel groups after dropping silent endings."""
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = SILENT_SUFFIX_RE.sub("", word, count=1)
    word = LEADING_Y_RE.sub("", word, count=1)
    groups = VOWEL_GROUP_RE.findall(word)
    return len(groups) if groups else 1


def classify_reading_ease(flesch_reading: float) -> Tuple[str, str]:
    """Return the (grade level, audience) band for a reading-ease score."""
    for minimum, grade, audience in READING_EASE_BANDS:
        if flesch_reading >= minimum:
            return grade, audience
    return FLOOR_BAND


def score_readability(text: str, stats: TextStats) -> ReadabilityResult:
    """Flesch Reading Ease and Flesch-Kincaid grade for ``text``.

    ``stats`` must come from the same text; it supplies the word, sentence and
    character counts so they are not recomputed here.
    """
    if not text or stats.total_words == 0:
        return not_available()

    words = tokenize_words(text, lowercase=True)
    syllables = [count_syllables(word) for word in words]

    avg_word_length = stats.total_chars_no_spaces / stats.total_words
    avg_sentence_length = stats.total_words / max(1, stats.total_sentences)
    avg_syllables_per_word = sum(syllables) / stats.total_words
    complex_words = sum(1 for count in syllables if count >= 3)
    complex_word_percent = complex_words / stats.total_words * 100

    flesch_reading = 206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables_per_word
    flesch_reading = max(0.0, min(100.0, flesch_reading))
    flesch_kincaid = max(
        0.0, 0.39 * avg_sentence_length + 11.8 * avg_syllables_per_word - 15.59
    )
    grade_level, audience_level = classify_reading_ease(flesch_reading)

    return ReadabilityResult(
        flesch_kincaid=round_half_up(flesch_kincaid, 1),
        flesch_reading=round_half_up(flesch_reading),
        grade_level=grade_level,
        avg_word_length=round_half_up(avg_word_length, 1),
        avg_sentence_length=round_half_up(avg_sentence_length, 1),
        complex_word_percent=int(round_half_up(complex_word_percent)),
        audience_level=audience_level,
    )
