from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Sequence

from .config import TextLensConfig
from .keywords import extract_keywords
from .models import AnalysisResult, Issue, OverallScore, ScoreBreakdown, TextStats
from .readability import score_readability
from .scoring import compute_overall_score, score_label
from .sentiment import analyze_sentiment
from .stats import analyze_text, reading_time, speaking_time, word_frequency
from .structure import paragraph_structure, reading_flow, sentence_profile
from .suggestions import apply_fixes, generate_local_suggestions
from .textutils import normalize_language, normalize_writing_style, sanitize_text

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


def _empty_result(stats: TextStats, cfg: TextLensConfig) -> AnalysisResult:
    return AnalysisResult(
        stats=stats,
        word_frequency={},
        readability=None,
        sentiment=None,
        keywords=[],
        suggestions=[],
        overall=OverallScore(score=0, breakdown=ScoreBreakdown(), label=score_label(0)),
        writing_style=normalize_writing_style(cfg.writing_style),
        language=normalize_language(cfg.language),
    )


def analyze_document(
    text: str,
    config: TextLensConfig | None = None,
    extra_issues: Iterable[Issue] = (),
) -> AnalysisResult:
    """Run every analysis over one text snapshot."""
    cfg = config or TextLensConfig()
    clean = sanitize_text(text, cfg.max_text_length)
    stats = analyze_text(clean)
    if stats.total_words == 0:
        return _empty_result(stats, cfg)

    frequency = word_frequency(clean)
    readability = score_readability(clean, stats)
    sentiment = analyze_sentiment(clean)
    keywords = extract_keywords(clean, frequency, cfg.keyword_limit)
    suggestions = generate_local_suggestions(
        clean,
        stats,
        limit=cfg.max_suggestions,
        long_sentence_words=cfg.long_sentence_words,
    )
    suggestions.extend(extra_issues)
    overall = compute_overall_score(stats, readability, sentiment, suggestions)
    logger.debug(
        "Analyzed %d words: score=%d issues=%d keywords=%d",
        stats.total_words,
        overall.score,
        len(suggestions),
        len(keywords),
    )
    return AnalysisResult(
        stats=stats,
        word_frequency=frequency,
        readability=readability,
        sentiment=sentiment,
        keywords=keywords,
        suggestions=suggestions,
        overall=overall,
        reading_time=reading_time(stats.total_words, cfg.words_per_minute),
        speaking_time=speaking_time(stats.total_words, cfg.speaking_words_per_minute),
        writing_style=normalize_writing_style(cfg.writing_style),
        language=normalize_language(cfg.language),
    )


def fix_document(
    text: str, config: TextLensConfig | None = None
) -> tuple[str, List[Issue]]:
    """Apply every auto-fixable local issue; returns the new text and the fixable issues."""
    cfg = config or TextLensConfig()
    clean = sanitize_text(text, cfg.max_text_length)
    issues = generate_local_suggestions(
        clean, limit=cfg.max_suggestions, long_sentence_words=cfg.long_sentence_words
    )
    applied = [issue for issue in issues if issue.fixable]
    return apply_fixes(clean, applied), applied


def top_words(frequency: Dict[str, int], limit: int) -> List[Dict[str, Any]]:
    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    return [{"word": word, "count": count} for word, count in ranked[: max(0, limit)]]


def build_report(
    text: str, result: AnalysisResult, top_words_limit: int = 10
) -> Dict[str, Any]:
    """JSON-ready summary of an analysis."""
    preview = text[:PREVIEW_CHARS] + ("..." if len(text) > PREVIEW_CHARS else "")
    statistics: Dict[str, Any] = result.stats.to_dict()
    statistics["reading_time_minutes"] = result.reading_time
    statistics["speaking_time_minutes"] = result.speaking_time
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "text_preview": preview,
        "settings": {"writing_style": result.writing_style, "language": result.language},
        "statistics": statistics,
        "readability": result.readability.to_dict() if result.readability else None,
        "sentiment": result.sentiment.to_dict() if result.sentiment else None,
        "keywords": [keyword.word for keyword in result.keywords],
        "top_words": top_words(result.word_frequency, top_words_limit),
        "suggestions": issues_to_dicts(result.suggestions),
        "structure": structure_report(text),
        "overall": result.overall.to_dict(),
    }


def structure_report(text: str) -> Dict[str, Any]:
    """Sentence lengths, per-sentence reading flow and paragraph sizes."""
    return {
        "sentences": asdict(sentence_profile(text)),
        "flow": [asdict(chunk) for chunk in reading_flow(text)],
        "paragraphs": [asdict(info) for info in paragraph_structure(text)],
    }


def issues_to_dicts(issues: Sequence[Issue]) -> List[Dict[str, Any]]:
    return [issue.to_dict() for issue in issues]
