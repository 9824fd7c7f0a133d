from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, List

import typer
import yaml

from .config import OpenAISettings, TextLensConfig, load_config
from .llm import OpenAISuggestionClient
from .models import Issue
from .pipeline import analyze_document, build_report, fix_document, issues_to_dicts
from .providers import (
    NoOpSuggestionProvider,
    OpenAISuggestionProvider,
    SuggestionProvider,
    SuggestionRequest,
)
from .suggestions import generate_local_suggestions
from .textutils import normalize_language, normalize_writing_style, sanitize_text
from .tone import Domain, ToneCategory, adjust_tone_advanced, adjust_tone_by_category, detect_tone

app = typer.Typer(help="TextLens writing analysis CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    writing_style: str | None = typer.Option(
        None, "--writing-style", "-s", help="academic, business, casual, creative or technical."
    ),
    keyword_limit: int | None = typer.Option(
        None, "--keyword-limit", help="Override the number of keywords reported."
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="en, es, fr, de, it or pt; recorded in the report."
    ),
    top_words: int = typer.Option(10, "--top-words", help="Most frequent words to include."),
    ai_suggestions: bool | None = typer.Option(
        None,
        "--ai-suggestions/--no-ai-suggestions",
        help="Toggle OpenAI-backed grammar suggestions.",
    ),
    openai_model: str | None = typer.Option(
        None, "--openai-model", help="OpenAI model identifier (e.g., gpt-4o-mini)."
    ),
    openai_api_key_env: str | None = typer.Option(
        None,
        "--openai-api-key-env",
        help="Environment variable to read the OpenAI API key from.",
    ),
) -> None:
    """Analyze a text file and emit a JSON report."""
    cfg = load_config(config)
    _apply_overrides(cfg, writing_style, keyword_limit, ai_suggestions, openai_model, openai_api_key_env)
    if language:
        cfg.language = normalize_language(language)
    text = _load_text(input_path, cfg)
    extra = _remote_suggestions(text, cfg, input_path.name)
    result = analyze_document(text, cfg, extra_issues=extra)
    typer.echo(json.dumps(build_report(text, result, top_words), indent=2))


@app.command()
def suggest(
    input_path: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    max_suggestions: int | None = typer.Option(
        None, "--max-suggestions", help="Cap on the number of local issues."
    ),
    ai_suggestions: bool | None = typer.Option(
        None,
        "--ai-suggestions/--no-ai-suggestions",
        help="Toggle OpenAI-backed grammar suggestions.",
    ),
) -> None:
    """Print detected issues as JSON."""
    cfg = load_config(config)
    if max_suggestions is not None:
        cfg.max_suggestions = max_suggestions
    _apply_overrides(cfg, None, None, ai_suggestions, None, None)
    text = _load_text(input_path, cfg)
    issues: List[Issue] = generate_local_suggestions(
        text, limit=cfg.max_suggestions, long_sentence_words=cfg.long_sentence_words
    )
    issues.extend(_remote_suggestions(text, cfg, input_path.name))
    typer.echo(json.dumps({"suggestions": issues_to_dicts(issues)}, indent=2))


@app.command()
def fix(
    input_path: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    output_path: Path = typer.Option(..., dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Apply every automatic fix and write the corrected text."""
    cfg = load_config(config)
    text = _load_text(input_path, cfg)
    fixed, applied = fix_document(text, cfg)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(fixed, encoding="utf-8")
    typer.echo(f"Applied {len(applied)} fixes; wrote {output_path}")


@app.command()
def tone(
    input_path: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    category: str = typer.Option("formality", "--category", help="formality, emotion or style."),
    target: int = typer.Option(..., "--target", min=0, max=4, help="Target level 0-4."),
    from_level: int | None = typer.Option(
        None, "--from-level", min=0, max=4, help="Current level; detected when omitted."
    ),
    domain: str | None = typer.Option(
        None, "--domain", help="Also apply a domain vocabulary (business, academic, ...)."
    ),
) -> None:
    """Rewrite the text toward a target tone level and print it."""
    text = _load_text(input_path, TextLensConfig())
    parsed = ToneCategory.parse(category)
    if parsed is None:
        raise typer.BadParameter(f"Unknown tone category: {category}")
    if domain is not None and Domain.parse(domain) is None:
        raise typer.BadParameter(f"Unknown domain: {domain}")
    if from_level is None:
        adjustments: dict[str, Any] = {parsed.value: target}
        if domain:
            adjustments["domain"] = domain
        typer.echo(adjust_tone_advanced(text, adjustments))
        return
    rewritten = adjust_tone_by_category(text, parsed, from_level, target)
    if domain:
        rewritten = adjust_tone_advanced(rewritten, {"domain": domain})
    typer.echo(rewritten)


@app.command("detect-tone")
def detect_tone_command(
    input_path: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
) -> None:
    """Print the detected tone vector as JSON."""
    text = _load_text(input_path, TextLensConfig())
    typer.echo(json.dumps(detect_tone(text).to_dict(), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TextLensConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: TextLensConfig,
    writing_style: str | None,
    keyword_limit: int | None,
    ai_suggestions: bool | None,
    openai_model: str | None,
    openai_api_key_env: str | None,
) -> None:
    """Override analysis and OpenAI settings from CLI flags."""
    if writing_style:
        config.writing_style = normalize_writing_style(writing_style)
    if keyword_limit is not None:
        config.keyword_limit = keyword_limit
    settings = config.openai
    if ai_suggestions is not None:
        settings.enabled = ai_suggestions
    if openai_model:
        settings.model = openai_model
    if openai_api_key_env:
        settings.api_key_env = openai_api_key_env


def _load_text(path: Path, config: TextLensConfig) -> str:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Could not read {path}: {exc}") from exc
    return sanitize_text(raw, config.max_text_length)


def _build_provider(config: TextLensConfig) -> SuggestionProvider:
    """Instantiate the configured suggestion provider for the current run."""
    if not config.openai.enabled:
        return NoOpSuggestionProvider()
    api_key = _resolve_openai_api_key(config.openai)
    client = OpenAISuggestionClient(config.openai, api_key=api_key)
    return OpenAISuggestionProvider(client)


def _remote_suggestions(text: str, config: TextLensConfig, source: str) -> List[Issue]:
    request = SuggestionRequest(
        text=text, writing_style=normalize_writing_style(config.writing_style), source=source
    )
    try:
        return _build_provider(config).suggest(request)
    except RuntimeError as exc:
        typer.echo(f"AI suggestions unavailable: {exc}", err=True)
        return []


def _resolve_openai_api_key(settings: OpenAISettings) -> str:
    """Resolve the API key from explicit config or the configured environment variable."""
    if settings.api_key:
        return settings.api_key
    env_name = settings.api_key_env or "OPENAI_API_KEY"
    value = os.environ.get(env_name)
    if value:
        return value
    raise typer.BadParameter(
        f"OpenAI API key not provided. Set {env_name} or openai.api_key in the config."
    )


if __name__ == "__main__":
    main()
