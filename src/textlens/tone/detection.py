from __future__ import annotations

import re
from typing import Dict, List

from ..models import ToneVector
from ..tokenization import split_sentences, split_whitespace
from .tables import (
    CASUAL_INDICATORS,
    CONTRACTION_INDICATORS,
    DOMAIN_KEYWORDS,
    ENTHUSIASTIC_INDICATORS,
    FORMAL_INDICATORS,
    INSPIRATIONAL_INDICATORS,
    MAX_LEVEL,
    PERSUASIVE_INDICATORS,
    RESERVED_INDICATORS,
    URGENT_INDICATORS,
    Domain,
)

TONE_TOKEN_RE = re.compile(r"\w+(?:'\w+)?")
CONCISE_SENTENCE_WORDS = 8

# Normalisation divisors, as a fraction of the token count.
FORMALITY_SCALE = 0.1
EMOTION_SCALE = 0.05
STYLE_SCALE = 0.03


def tone_tokens(text: str) -> List[str]:
    return TONE_TOKEN_RE.findall(text.replace("’", "'").lower())


def _count(tokens: List[str], lexicon: frozenset[str]) -> int:
    return sum(1 for token in tokens if token in lexicon)


def _normalize(score: float, scale: float) -> float:
    return min(float(MAX_LEVEL), max(0.0, 2 + (score / max(scale, 1)) * 2))


def _confidence(token_count: int) -> float:
    if token_count > 50:
        return 0.8
    if token_count > 20:
        return 0.6
    return 0.4


def detect_tone(text: str) -> ToneVector:
    """Score formality, emotion and style from small indicator lexicons.

    Each dimension accumulates a signed raw score that is scaled by the token
    count and centred on 2, then clamped to [0, 4].
    """
    if not text or not text.strip():
        return ToneVector(formality=2.0, emotion=1.0, style=1.0, confidence=0.0)

    tokens = tone_tokens(text)
    n = len(tokens)

    formality = (
        _count(tokens, FORMAL_INDICATORS) * 2
        - _count(tokens, CASUAL_INDICATORS) * 1.5
        - _count(tokens, CONTRACTION_INDICATORS) * 0.5
    )
    emotion = (
        _count(tokens, ENTHUSIASTIC_INDICATORS) * 2
        + _count(tokens, URGENT_INDICATORS) * 1.5
        - _count(tokens, RESERVED_INDICATORS) * 0.5
    )
    concise = sum(
        1
        for sentence in split_sentences(text)
        if len(split_whitespace(sentence)) <= CONCISE_SENTENCE_WORDS
    )
    style = (
        _count(tokens, PERSUASIVE_INDICATORS) * 1.5
        + _count(tokens, INSPIRATIONAL_INDICATORS) * 1.5
        - concise * 0.3
    )

    return ToneVector(
        formality=_normalize(formality, n * FORMALITY_SCALE),
        emotion=_normalize(emotion, n * EMOTION_SCALE),
        style=_normalize(style, n * STYLE_SCALE),
        confidence=_confidence(n),
    )


def domain_scores(text: str) -> Dict[Domain, int]:
    """Number of distinct keywords per domain that some token starts with."""
    if not text:
        return {}
    tokens = set(tone_tokens(text))
    scores: Dict[Domain, int] = {}
    for domain, keywords in DOMAIN_KEYWORDS.items():
        matches = sum(
            1 for keyword in keywords if any(token.startswith(keyword) for token in tokens)
        )
        if matches:
            scores[domain] = matches
    return scores


def detect_domain(text: str) -> Domain | None:
    scores = domain_scores(text)
    if not scores:
        return None
    # max() keeps the first maximum, so ties go to declaration order.
    return max(scores, key=lambda domain: scores[domain])
