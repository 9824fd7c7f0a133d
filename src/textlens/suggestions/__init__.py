from __future__ import annotations

from .detectors import (
    DETECTORS,
    SYNONYMS,
    check_filler_words,
    check_long_sentences,
    check_passive_voice,
    check_repeated_words,
    check_spacing,
    check_weak_words,
    generate_local_suggestions,
)
from .fixes import apply_fix, apply_fixes, apply_suggestion, locate_issue

__all__ = [
    "DETECTORS",
    "SYNONYMS",
    "check_filler_words",
    "check_long_sentences",
    "check_passive_voice",
    "check_repeated_words",
    "check_spacing",
    "check_weak_words",
    "generate_local_suggestions",
    "apply_fix",
    "apply_fixes",
    "apply_suggestion",
    "locate_issue",
]
