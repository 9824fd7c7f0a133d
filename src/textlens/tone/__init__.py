from __future__ import annotations

from .adjust import (
    adjust_tone,
    adjust_tone_advanced,
    adjust_tone_by_category,
    generate_ai_suggestions,
    get_tone_options,
    plan_adjustment,
)
from .detection import detect_domain, detect_tone
from .rules import PatternRule, SentenceTransform, WordTable, apply_sentence_transform, apply_word_table
from .tables import TONE_LEVELS, Domain, ToneCategory

__all__ = [
    "Domain",
    "PatternRule",
    "SentenceTransform",
    "TONE_LEVELS",
    "ToneCategory",
    "WordTable",
    "adjust_tone",
    "adjust_tone_advanced",
    "adjust_tone_by_category",
    "apply_sentence_transform",
    "apply_word_table",
    "detect_domain",
    "detect_tone",
    "generate_ai_suggestions",
    "get_tone_options",
    "plan_adjustment",
]
