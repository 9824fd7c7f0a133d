from __future__ import annotations

import math
import re
from typing import Dict

from .models import TextStats
from .tokenization import split_paragraphs, split_sentences, tokenize_words

WHITESPACE_CHAR_RE = re.compile(r"\s")

DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_SPEAKING_WORDS_PER_MINUTE = 130


def word_frequency(text: str) -> Dict[str, int]:
    """Map each lowercased, punctuation-stripped token to its count."""
    frequency: Dict[str, int] = {}
    for word in tokenize_words(text, lowercase=True):
        frequency[word] = frequency.get(word, 0) + 1
    return frequency


def count_paragraphs(text: str) -> int:
    if not text or not text.strip():
        return 0
    return max(len(split_paragraphs(text)), 1)


def analyze_text(text: str) -> TextStats:
    """Compute the full statistics block for ``text``; never raises."""
    if not text:
        return TextStats()
    if not text.strip():
        return TextStats(
            total_chars=len(text),
            total_chars_no_spaces=len(WHITESPACE_CHAR_RE.sub("", text)),
        )
    return TextStats(
        total_chars=len(text),
        total_chars_no_spaces=len(WHITESPACE_CHAR_RE.sub("", text)),
        total_words=len(tokenize_words(text)),
        total_sentences=len(split_sentences(text)),
        total_paragraphs=count_paragraphs(text),
        unique_words=len(word_frequency(text)),
    )


def reading_time(word_count: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Whole minutes needed to read ``word_count`` words (at least one)."""
    return max(1, math.ceil(word_count / max(1, words_per_minute)))


def speaking_time(
    word_count: int, words_per_minute: int = DEFAULT_SPEAKING_WORDS_PER_MINUTE
) -> int:
    return reading_time(word_count, words_per_minute)
