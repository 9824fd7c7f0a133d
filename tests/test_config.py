from pathlib import Path

import pytest

from textlens.config import (
    OpenAISettings,
    TextLensConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    """Default configuration matches the documented limits."""
    config = load_config(None)
    assert config == TextLensConfig()
    assert config.keyword_limit == 15
    assert config.max_suggestions == 20
    assert config.long_sentence_words == 25
    assert config.openai.enabled is False


def test_config_from_dict_ignores_unknown_keys():
    """Unknown keys are dropped and nested OpenAI settings are built."""
    config = config_from_dict(
        {"keyword_limit": 5, "colour": "blue", "openai": {"model": "gpt-4.1-mini", "bogus": 1}}
    )
    assert config.keyword_limit == 5
    assert config.openai == OpenAISettings(model="gpt-4.1-mini")


def test_config_from_yaml(tmp_path: Path):
    """YAML files are loaded into the configuration dataclasses."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "writing_style: academic\nmax_suggestions: 8\nopenai:\n  enabled: true\n  temperature: 0.1\n",
        encoding="utf-8",
    )
    config = config_from_yaml(path)
    assert config.writing_style == "academic"
    assert config.max_suggestions == 8
    assert config.openai.enabled is True
    assert config.openai.temperature == 0.1


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    """A YAML document that is not a mapping is rejected."""
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_empty_yaml_gives_defaults(tmp_path: Path):
    """An empty file is equivalent to no configuration."""
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == TextLensConfig()


def test_to_dict_round_trips():
    """to_dict output can rebuild an equal configuration."""
    config = TextLensConfig(keyword_limit=3)
    assert config_from_dict(config.to_dict()) == config
