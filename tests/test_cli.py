import json
from pathlib import Path
from typing import Any

from pytest import MonkeyPatch
from typer.testing import CliRunner

from textlens.cli import app

runner = CliRunner()

ESSAY = (
    "Clear writing helps readers understand complex ideas quickly. "
    "Good editors trim needless words and keep sentences focused."
)


def _write(tmp_path: Path, text: str, name: str = "input.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_analyze_outputs_report(tmp_path: Path):
    """analyze prints a JSON report with statistics and an overall score."""
    path = _write(tmp_path, ESSAY)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(path), "--keyword-limit", "3", "--language", "fr"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["settings"]["language"] == "fr"
    assert payload["statistics"]["total_words"] == 17
    assert len(payload["keywords"]) <= 3
    assert 0 <= payload["overall"]["score"] <= 100


def test_cli_suggest_lists_issues(tmp_path: Path):
    """suggest prints positioned issues as JSON."""
    path = _write(tmp_path, "This is very  good.")
    result = runner.invoke(app, ["suggest", "--input-path", str(path)])
    assert result.exit_code == 0
    suggestions = json.loads(result.stdout)["suggestions"]
    assert [item["original"] for item in suggestions] == ["very", "  ", "good"]
    assert all(item["fixable"] for item in suggestions)


def test_cli_fix_writes_output(tmp_path: Path):
    """fix applies automatic fixes and writes the result to disk."""
    path = _write(tmp_path, "This is very  good.")
    output = tmp_path / "out" / "fixed.txt"
    result = runner.invoke(
        app, ["fix", "--input-path", str(path), "--output-path", str(output)]
    )
    assert result.exit_code == 0
    assert "Applied 3 fixes" in result.stdout
    assert output.read_text(encoding="utf-8") == "This is extremely excellent."


def test_cli_tone_rewrites_text(tmp_path: Path):
    """tone prints the rewritten text."""
    path = _write(tmp_path, "We should review this later.")
    result = runner.invoke(
        app,
        [
            "tone",
            "--input-path",
            str(path),
            "--category",
            "emotion",
            "--from-level",
            "1",
            "--target",
            "4",
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "We must immediately review this right now!"


def test_cli_tone_with_domain(tmp_path: Path):
    """A domain option layers its vocabulary onto the adjustment."""
    path = _write(tmp_path, "We fix the slow code.")
    result = runner.invoke(
        app,
        ["tone", "--input-path", str(path), "--target", "2", "--domain", "technical"],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "We debug the inefficient code."


def test_cli_tone_rejects_unknown_category(tmp_path: Path):
    """Unknown categories are usage errors."""
    path = _write(tmp_path, "Some text.")
    result = runner.invoke(
        app, ["tone", "--input-path", str(path), "--category", "mood", "--target", "2"]
    )
    assert result.exit_code != 0


def test_cli_detect_tone(tmp_path: Path):
    """detect-tone prints the tone vector as JSON."""
    path = _write(tmp_path, "gonna wanna kinda")
    result = runner.invoke(app, ["detect-tone", "--input-path", str(path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert set(payload) == {"formality", "emotion", "style", "confidence"}
    assert payload["formality"] == 0.0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "keyword_limit" in result.stdout
    assert "gpt-4o-mini" in result.stdout


def test_cli_analyze_with_ai_suggestions(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """analyze wires OpenAI settings into the suggestion client when enabled."""
    path = _write(tmp_path, "I saw teh cat sitting on the mat today.")
    calls: dict[str, Any] = {}

    class DummyClient:
        def __init__(self, settings: Any, api_key: str) -> None:
            calls["settings"] = settings
            calls["api_key"] = api_key

        def review(self, *, system_prompt: str, text: str, metadata: Any) -> list[dict[str, Any]]:
            calls["metadata"] = metadata
            return [{"original": "teh", "suggested": "the", "severity": "high"}]

    monkeypatch.setattr("textlens.cli.OpenAISuggestionClient", DummyClient)

    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(path),
            "--ai-suggestions",
            "--openai-model",
            "gpt-4.1-mini",
        ],
        env={"OPENAI_API_KEY": "dummy-key"},
    )
    assert result.exit_code == 0
    suggestions = json.loads(result.stdout)["suggestions"]
    remote = [item for item in suggestions if item["id"] == "ai-0"]
    assert remote and remote[0]["start"] == 6
    assert calls["settings"].model == "gpt-4.1-mini"
    assert calls["api_key"] == "dummy-key"
    assert calls["metadata"].source == "input.txt"


def test_cli_ai_suggestions_require_key(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Enabling AI suggestions without a key is a usage error."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    path = _write(tmp_path, "I saw teh cat sitting on the mat today.")
    result = runner.invoke(app, ["suggest", "--input-path", str(path), "--ai-suggestions"])
    assert result.exit_code != 0
