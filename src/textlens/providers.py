from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence

from .llm.openai_client import OpenAISuggestionClient, SuggestionMetadata, extract_json_array
from .models import Issue, IssueType, Severity
from .suggestions.fixes import locate_issue

logger = logging.getLogger(__name__)

MIN_REMOTE_TEXT_CHARS = 20

SYSTEM_PROMPT = (
    "You are an expert grammar checker for {style} writing. Analyze the text and "
    "identify grammar errors, spelling mistakes, punctuation issues, and style problems. "
    "Return your response as a JSON array of objects with this structure:\n"
    "[\n"
    "  {{\n"
    '    "original": "the exact text with the error",\n'
    '    "suggested": "the corrected text",\n'
    '    "title": "brief title of the error type",\n'
    '    "severity": "high|medium|low",\n'
    '    "explanation": "why this is an error and how to fix it"\n'
    "  }}\n"
    "]\n"
    "\n"
    "Focus on:\n"
    "- Subject-verb agreement\n"
    "- Tense consistency\n"
    "- Punctuation errors\n"
    "- Spelling mistakes\n"
    "- Run-on sentences\n"
    "- Fragment sentences\n"
    "- Pronoun agreement\n"
    "- Misplaced modifiers\n"
    "\n"
    "Only return the JSON array, nothing else."
)


@dataclass(slots=True)
class SuggestionRequest:
    """Text to be checked by a remote collaborator."""

    text: str
    writing_style: str = "casual"
    source: str = "<text>"
    metadata: Dict[str, Any] = field(default_factory=dict)


class SuggestionProvider(ABC):
    """Abstract source of extra issues beyond the local detectors."""

    @abstractmethod
    def suggest(self, request: SuggestionRequest) -> List[Issue]:
        """Return issues positioned against ``request.text`` where possible."""
        raise NotImplementedError


class NoOpSuggestionProvider(SuggestionProvider):
    """Never suggests anything."""

    def suggest(self, request: SuggestionRequest) -> List[Issue]:
        return []


class CallableSuggestionProvider(SuggestionProvider):
    """Adapt an arbitrary callable into the SuggestionProvider interface."""

    def __init__(self, func: Callable[[SuggestionRequest], List[Issue]]) -> None:
        self._func = func

    def suggest(self, request: SuggestionRequest) -> List[Issue]:
        return list(self._func(request))


def _severity(value: Any) -> Severity:
    try:
        return Severity(str(value).lower())
    except ValueError:
        return Severity.MEDIUM


def issues_from_entries(entries: Sequence[Mapping[str, Any]], text: str) -> List[Issue]:
    """Build grammar issues from decoded reply entries, positioned against ``text``."""
    issues: List[Issue] = []
    for index, entry in enumerate(entries):
        original = str(entry.get("original") or "")
        suggested = entry.get("suggested")
        issue = Issue(
            id=f"ai-{index}",
            type=IssueType.GRAMMAR,
            severity=_severity(entry.get("severity", "medium")),
            title=str(entry.get("title") or "Grammar Error"),
            description=str(
                entry.get("explanation") or "This appears to be a grammar error."
            ),
            original=original or None,
            suggested=str(suggested) if suggested is not None else None,
        )
        issues.append(locate_issue(text, issue))
    return issues


def parse_issue_payload(content: str, text: str) -> List[Issue]:
    """Turn a raw model reply into grammar issues; see ``extract_json_array``."""
    return issues_from_entries(extract_json_array(content), text)


class OpenAISuggestionProvider(SuggestionProvider):
    """Grammar suggestions backed by the OpenAI Responses API."""

    def __init__(
        self,
        client: OpenAISuggestionClient,
        *,
        system_prompt_template: str = SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._system_prompt_template = system_prompt_template

    def suggest(self, request: SuggestionRequest) -> List[Issue]:
        text = request.text
        if len(text.strip()) < MIN_REMOTE_TEXT_CHARS:
            return []
        metadata = SuggestionMetadata(
            source=request.source,
            char_count=len(text),
            writing_style=request.writing_style,
        )
        logger.info(
            "Requesting AI suggestions for %s (%d chars, style=%s)",
            request.source,
            len(text),
            request.writing_style,
        )
        entries = self._client.review(
            system_prompt=self._system_prompt_template.format(style=request.writing_style),
            text=text,
            metadata=metadata,
        )
        return issues_from_entries(entries, text)
