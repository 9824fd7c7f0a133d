from __future__ import annotations

import re
from typing import List

# Punctuation stripped before whitespace tokenisation. Apostrophes and hyphens
# are removed rather than treated as separators, so "don't" counts as "dont".
PUNCTUATION_RE = re.compile(r"""[.,!?;:'"()\-\[\]{}]""")
WHITESPACE_RE = re.compile(r"\s+")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def tokenize_words(text: str, lowercase: bool = False) -> List[str]:
    """Strip punctuation and split on whitespace runs, dropping empty tokens."""
    if not text or not text.strip():
        return []
    if lowercase:
        text = text.lower()
    stripped = PUNCTUATION_RE.sub("", text)
    return [word for word in WHITESPACE_RE.split(stripped) if word]


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence punctuation and keep the non-blank segments.

    Abbreviations, decimals and quoted dialogue are not special-cased; every
    component that counts sentences shares this segmentation.
    """
    if not text or not text.strip():
        return []
    return [segment.strip() for segment in SENTENCE_SPLIT_RE.split(text) if segment.strip()]


def split_paragraphs(text: str) -> List[str]:
    """Split on blank-line separated blocks."""
    if not text or not text.strip():
        return []
    return [block.strip() for block in PARAGRAPH_SPLIT_RE.split(text) if block.strip()]


def split_whitespace(text: str) -> List[str]:
    """Whitespace tokens with punctuation left attached."""
    return [word for word in WHITESPACE_RE.split(text) if word]
