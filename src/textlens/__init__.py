"""
textlens package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import TextLensConfig, config_from_dict, config_from_yaml, load_config
from .pipeline import analyze_document, build_report, fix_document
from .suggestions import apply_fixes, generate_local_suggestions
from .tone import adjust_tone, adjust_tone_advanced, adjust_tone_by_category, detect_tone

__all__ = [
    "TextLensConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze_document",
    "build_report",
    "fix_document",
    "apply_fixes",
    "generate_local_suggestions",
    "adjust_tone",
    "adjust_tone_advanced",
    "adjust_tone_by_category",
    "detect_tone",
]

__version__ = "0.1.0"
