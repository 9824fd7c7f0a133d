from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .textutils import MAX_TEXT_LENGTH


@dataclass(slots=True)
class OpenAISettings:
    """Configuration block for OpenAI-powered grammar suggestions."""

    enabled: bool = False
    model: str = "gpt-4o-mini"
    api_key: str | None = None
    api_key_env: str = "OPENAI_API_KEY"
    base_url: str | None = None
    organization: str | None = None
    temperature: float = 0.3
    max_output_tokens: int = 2000
    top_p: float = 0.95
    request_timeout: float = 60.0
    parallel_requests: int = 1


@dataclass(slots=True)
class TextLensConfig:
    """Configuration options for document analysis."""

    writing_style: str = "casual"
    language: str = "en"
    keyword_limit: int = 15
    max_suggestions: int = 20
    long_sentence_words: int = 25
    max_text_length: int = MAX_TEXT_LENGTH
    words_per_minute: int = 200
    speaking_words_per_minute: int = 130
    openai: OpenAISettings = field(default_factory=OpenAISettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(TextLensConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "openai" in data:
        openai_value = data["openai"]
        if isinstance(openai_value, OpenAISettings):
            kwargs["openai"] = openai_value
        elif isinstance(openai_value, Mapping):
            kwargs["openai"] = _build_openai_settings(openai_value)
        else:
            kwargs.pop("openai", None)
    return kwargs


def _build_openai_settings(data: Mapping[str, Any]) -> OpenAISettings:
    openai_allowed = {item.name for item in fields(OpenAISettings)}
    filtered = {key: data[key] for key in data if key in openai_allowed}
    return OpenAISettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> TextLensConfig:
    """Build a TextLensConfig from a dictionary-like input."""
    if data is None:
        return TextLensConfig()
    return TextLensConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TextLensConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TextLensConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TextLensConfig()
    return config_from_yaml(path)
