from __future__ import annotations

import math
from typing import Sequence

from .models import (
    Issue,
    OverallScore,
    ReadabilityResult,
    ScoreBreakdown,
    SentimentResult,
    TextStats,
)
from .textutils import round_half_up

# (minimum score, label)
SCORE_LABELS = (
    (90, "Outstanding"),
    (80, "Excellent"),
    (70, "Very Good"),
    (60, "Good"),
    (50, "Fair"),
    (40, "Needs Improvement"),
)
MAX_BONUS = 5.0
MAX_DEPTH = 15.0


def score_label(score: int) -> str:
    for minimum, label in SCORE_LABELS:
        if score >= minimum:
            return label
    return "Needs Work"


def readability_points(readability: ReadabilityResult | None) -> float:
    """Up to 25 points; reading ease of 50-70 suits a general audience."""
    if readability is None or not readability.is_available:
        return 15.0
    flesch = readability.flesch_reading
    if 50 <= flesch <= 70:
        return 25.0
    if 40 <= flesch <= 80:
        return 22.0
    if 30 <= flesch <= 90:
        return 18.0
    if flesch > 90:
        return 15.0
    return max(10.0, 25.0 - abs(50 - flesch) * 0.3)


def structure_points(stats: TextStats, readability: ReadabilityResult | None) -> float:
    if readability is None or not readability.avg_sentence_length or stats.total_sentences == 0:
        return 15.0
    avg_len = readability.avg_sentence_length
    if 12 <= avg_len <= 22:
        return 20.0
    if 8 <= avg_len <= 28:
        return 16.0
    if avg_len < 8:
        return 12.0
    return 10.0


def vocabulary_points(stats: TextStats) -> float:
    """Type-token ratio, judged against expectations for the text length."""
    if stats.total_words == 0 or stats.unique_words == 0:
        return 10.0
    ttr = stats.unique_words / stats.total_words
    if stats.total_words < 50:
        return 20.0 if ttr >= 0.7 else 16.0 if ttr >= 0.5 else 12.0
    if stats.total_words < 200:
        if ttr >= 0.5:
            return 20.0
        if ttr >= 0.4:
            return 17.0
        return 14.0 if ttr >= 0.3 else 10.0
    adjusted = ttr * math.sqrt(stats.total_words / 100)
    if adjusted >= 0.6:
        return 20.0
    if adjusted >= 0.45:
        return 17.0
    return 14.0 if adjusted >= 0.3 else 10.0


def clarity_points(stats: TextStats, issue_count: int) -> float:
    """Non-increasing in ``issue_count`` for a fixed word count."""
    if issue_count <= 0:
        return 20.0
    words_per_issue = stats.total_words / issue_count
    if words_per_issue >= 100:
        return 18.0
    if words_per_issue >= 50:
        return 15.0
    if words_per_issue >= 25:
        return 12.0
    if words_per_issue >= 15:
        return 9.0
    return 6.0


def depth_points(stats: TextStats) -> float:
    points = 0.0
    if stats.total_words >= 100:
        points += 5
    if stats.total_words >= 200:
        points += 3
    if stats.total_words >= 300:
        points += 2
    if stats.total_paragraphs >= 2:
        points += 2
    if stats.total_paragraphs >= 3:
        points += 2
    if stats.total_sentences >= 5:
        points += 1
    # Texts under 100 words top out at five points.
    if stats.total_words < 100:
        points = min(points, 5.0)
    return min(MAX_DEPTH, points)


def bonus_points(
    stats: TextStats,
    readability: ReadabilityResult | None,
    sentiment: SentimentResult | None,
) -> float:
    bonus = 0.0
    if sentiment is not None and -20 <= sentiment.score <= 30:
        bonus += 2
    if stats.unique_words >= 20:
        bonus += 1
    if readability is not None and 10 <= readability.complex_word_percent <= 30:
        bonus += 2
    return min(MAX_BONUS, bonus)


def compute_overall_score(
    stats: TextStats,
    readability: ReadabilityResult | None,
    sentiment: SentimentResult | None,
    issues: Sequence[Issue],
) -> OverallScore:
    """Combine the five weighted buckets (plus a small bonus) into 0-100."""
    if stats.total_words == 0:
        return OverallScore(score=0, breakdown=ScoreBreakdown(), label=score_label(0))

    breakdown = ScoreBreakdown(
        readability=readability_points(readability),
        structure=structure_points(stats, readability),
        vocabulary=vocabulary_points(stats),
        clarity=clarity_points(stats, len(issues)),
        depth=depth_points(stats),
        bonus=bonus_points(stats, readability, sentiment),
    )
    score = int(min(100, max(0, round_half_up(breakdown.total()))))
    return OverallScore(score=score, breakdown=breakdown, label=score_label(score))
