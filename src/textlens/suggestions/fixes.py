from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List

from ..models import Issue

logger = logging.getLogger(__name__)


def splice(text: str, start: int, end: int, replacement: str) -> str:
    return text[:start] + replacement + text[end:]


def apply_fix(text: str, issue: Issue) -> str:
    """Apply one issue to the text it was detected on.

    Positioned issues are spliced in place. Issues without offsets fall back to
    replacing the first occurrence of ``original``.
    """
    if issue.fixable and issue.start is not None and issue.end is not None:
        return splice(text, issue.start, issue.end, issue.suggested or "")
    if issue.auto_apply and issue.start is None and issue.original and issue.suggested:
        return apply_suggestion(text, issue.original, issue.suggested)
    return text


def apply_fixes(text: str, issues: Iterable[Issue]) -> str:
    """Apply every fixable issue, last offset first.

    Working from the end keeps the offsets of the not-yet-applied issues valid.
    An issue whose span overlaps one already applied is skipped.
    """
    ordered: List[Issue] = sorted(
        (issue for issue in issues if issue.fixable),
        key=lambda issue: issue.start or 0,
        reverse=True,
    )
    result = text
    boundary = len(text)
    skipped = 0
    for issue in ordered:
        if issue.start is None or issue.end is None or issue.end > boundary:
            skipped += 1
            continue
        result = splice(result, issue.start, issue.end, issue.suggested or "")
        boundary = issue.start
    if skipped:
        logger.debug("Skipped %d overlapping fixes", skipped)
    return result


def apply_suggestion(text: str, original: str, suggested: str) -> str:
    """Replace the first occurrence of ``original``; no-op when it is absent."""
    if not original:
        return text
    position = text.find(original)
    if position == -1:
        return text
    return splice(text, position, position + len(original), suggested)


def locate_issue(text: str, issue: Issue) -> Issue:
    """Fill in offsets for an issue that only knows its ``original`` text."""
    if issue.start is not None or not issue.original:
        return issue
    position = text.find(issue.original)
    if position == -1:
        return issue
    return replace(issue, start=position, end=position + len(issue.original))
