from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 100_000
CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

WRITING_STYLES = ("academic", "business", "casual", "creative", "technical")
LANGUAGES = ("en", "es", "fr", "de", "it", "pt")


def sanitize_text(value: object, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Drop control characters and cap the length of user supplied text."""
    if not isinstance(value, str):
        return ""
    sanitized = CONTROL_CHARS_RE.sub("", value)
    if max_length > 0 and len(sanitized) > max_length:
        logger.warning(
            "Text input truncated from %d to %d characters", len(sanitized), max_length
        )
        sanitized = sanitized[:max_length]
    return sanitized


def normalize_writing_style(value: object) -> str:
    if isinstance(value, str) and value in WRITING_STYLES:
        return value
    return "academic"


def normalize_language(value: object) -> str:
    """Whitelist the language code; it does not change tokenisation."""
    if isinstance(value, str) and value in LANGUAGES:
        return value
    return "en"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with .5 going up, matching the scores users see elsewhere."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def capitalize_first(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]
