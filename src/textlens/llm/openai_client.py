from __future__ import annotations

import importlib
import json
import logging
import re
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, cast

from ..config import OpenAISettings

logger = logging.getLogger(__name__)

OpenAI: Callable[..., Any] | None = None

CODE_FENCE_RE = re.compile(r"```(?:json)?\s*\n?")


@dataclass(slots=True)
class SuggestionMetadata:
    """What is being checked, used for logging."""

    source: str
    char_count: int
    writing_style: str | None = None


class OpenAISuggestionClient:
    """Thin wrapper around the OpenAI Responses API with retries and throttling."""

    def __init__(self, settings: OpenAISettings, api_key: str) -> None:
        if not api_key:
            raise ValueError("OpenAI API key is required when AI suggestions are enabled.")
        self._settings = settings
        self._api_key = api_key
        self._client_factory: Callable[..., Any] = _load_openai_factory()
        self._client: Any | None = None
        self._semaphore: threading.BoundedSemaphore | None = None
        if settings.parallel_requests > 0:
            self._semaphore = threading.BoundedSemaphore(settings.parallel_requests)
        self._max_attempts = 3

    @property
    def settings(self) -> OpenAISettings:
        return self._settings

    def complete(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        metadata: SuggestionMetadata,
    ) -> str:
        """Send the prompt pair and return the raw model output."""
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            try:
                with self._acquire_slot():
                    client = self._ensure_client()
                    response: Any = client.responses.create(
                        model=self._settings.model,
                        input=[
                            {"role": "system", "content": system_prompt},
                            {"role": "user", "content": user_prompt},
                        ],
                        temperature=self._settings.temperature,
                        max_output_tokens=self._settings.max_output_tokens,
                        top_p=self._settings.top_p,
                        timeout=self._settings.request_timeout,
                    )
                text = self._extract_text(response)
                logger.debug(
                    "OpenAI suggestions succeeded for source=%s chars=%s",
                    metadata.source,
                    metadata.char_count,
                )
                return text
            except Exception as exc:  # pragma: no cover - network-related
                last_error = exc
                logger.warning(
                    "OpenAI suggestions failed for source=%s (attempt %s/%s): %s",
                    metadata.source,
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(min(2 ** (attempt - 1), 5))
        raise RuntimeError("OpenAI suggestion request failed after retries.") from last_error

    def review(
        self,
        *,
        system_prompt: str,
        text: str,
        metadata: SuggestionMetadata,
    ) -> list[dict[str, Any]]:
        """Ask for grammar findings on ``text`` and decode the JSON array reply."""
        entries = extract_json_array(
            self.complete(system_prompt=system_prompt, user_prompt=text, metadata=metadata)
        )
        logger.info(
            "OpenAI returned %d findings for source=%s (style=%s)",
            len(entries),
            metadata.source,
            metadata.writing_style,
        )
        return entries

    def _ensure_client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory(
                api_key=self._api_key,
                base_url=self._settings.base_url,
                organization=self._settings.organization,
            )
        return self._client

    @contextmanager
    def _acquire_slot(self) -> Iterator[None]:
        if self._semaphore is None:
            yield
            return
        with self._semaphore:
            yield

    @staticmethod
    def _extract_text(response: Any) -> str:
        direct = getattr(response, "output_text", None)
        if isinstance(direct, str) and direct:
            return direct
        output = getattr(response, "output", None)
        if not output:
            raise RuntimeError("OpenAI response is missing output content.")
        first = _materialize_item(output[0])
        content = first.get("content")
        if not content:
            raise RuntimeError("OpenAI response has no content segments.")
        text = _materialize_item(content[0]).get("text")
        if not text:
            raise RuntimeError("OpenAI response segment missing text.")
        return text


def extract_json_array(content: str) -> list[dict[str, Any]]:
    """Decode the JSON array of finding objects in a model reply.

    Markdown code fences are ignored and non-object items are dropped. A reply
    that is not a JSON array yields an empty list.
    """
    cleaned = CODE_FENCE_RE.sub("", content or "").strip()
    if not cleaned:
        return []
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning("Could not parse suggestion response as JSON: %s", exc)
        return []
    if not isinstance(payload, list):
        logger.warning("Suggestion response was %s, expected a list", type(payload).__name__)
        return []
    return [entry for entry in payload if isinstance(entry, dict)]


def _materialize_item(item: Any) -> dict[str, Any]:
    if isinstance(item, dict):
        return cast(dict[str, Any], item)
    if hasattr(item, "model_dump"):
        return cast(dict[str, Any], item.model_dump())
    if hasattr(item, "__dict__"):
        return dict(vars(item))
    raise RuntimeError("Unexpected OpenAI response format.")


def _load_openai_factory() -> Callable[..., Any]:
    """Import the OpenAI client class on first use so the package stays optional."""
    global OpenAI
    if OpenAI is not None:
        return OpenAI
    try:  # pragma: no cover - import guard
        module = importlib.import_module("openai")
    except ImportError as exc:  # pragma: no cover - handled at runtime
        raise RuntimeError(
            "openai package is not installed. Install extras via 'pip install .[llm-openai]'."
        ) from exc
    openai_cls = getattr(module, "OpenAI", None)
    if openai_cls is None:  # pragma: no cover
        raise RuntimeError("openai.OpenAI client class is unavailable in this environment.")
    OpenAI = cast(Callable[..., Any], openai_cls)
    return OpenAI
