import re

import pytest

from textlens.models import ToneVector
from textlens.tone import (
    Domain,
    ToneCategory,
    WordTable,
    adjust_tone,
    adjust_tone_advanced,
    adjust_tone_by_category,
    detect_domain,
    detect_tone,
    generate_ai_suggestions,
    get_tone_options,
    plan_adjustment,
)
from textlens.tone import adjust as adjust_module
from textlens.tone.adjust import clamp_level

EXAMPLE = "I think this is good. We need to fix this."
CONTRACTION_RE = re.compile(r"\w['’]\w")


def test_very_formal_rewrite_of_example():
    result = adjust_tone_by_category(EXAMPLE, "formality", 1, 4)
    assert not CONTRACTION_RE.search(result)
    assert "contemplate" in result
    assert "satisfactory" in result
    assert "think" not in result
    assert result.startswith("One ")


def test_formality_round_trip_moves_detected_score():
    original = detect_tone(EXAMPLE).formality
    formal = adjust_tone_by_category(EXAMPLE, "formality", 1, 4)
    raised = detect_tone(formal).formality
    casual = adjust_tone_by_category(formal, "formality", 4, 1)
    lowered = detect_tone(casual).formality
    assert raised > original
    assert lowered <= raised
    assert "Furthermore" not in casual


def test_contractions_are_expanded_when_leaving_casual():
    result = adjust_tone_by_category("I can’t go, it's late.", "formality", 1, 2)
    assert not CONTRACTION_RE.search(result)
    assert "cannot" in result
    assert "it is" in result


def test_very_casual_additions():
    result = adjust_tone_by_category("Thank you for the great help.", "formality", 3, 0)
    assert "4" in result
    assert "gr8" in result


@pytest.mark.parametrize(
    ("category", "start", "target"),
    [
        ("formality", 2, 2),
        ("unknown", 1, 4),
        ("formality", "high", 3),
    ],
)
def test_no_op_adjustments(category, start, target):
    assert adjust_tone_by_category(EXAMPLE, category, start, target) == EXAMPLE


def test_blank_text_is_returned_unchanged():
    assert adjust_tone_by_category("   ", "emotion", 0, 4) == "   "
    assert adjust_tone("", 4) == ""
    assert adjust_tone_advanced("", {"formality": 4}) == ""


def test_levels_are_clamped():
    assert adjust_tone_by_category(EXAMPLE, "formality", -3, 99) == adjust_tone_by_category(
        EXAMPLE, "formality", 0, 4
    )


@pytest.mark.parametrize(
    ("level", "expected"),
    [(float("inf"), 4), (float("-inf"), 0), ("1e400", 4), (10**400, 4), (float("nan"), None)],
)
def test_clamp_level_handles_extreme_numbers(level, expected):
    assert clamp_level(level) == expected


def test_infinite_levels_adjust_like_the_bounds():
    assert adjust_tone_by_category(EXAMPLE, "formality", 1, float("inf")) == adjust_tone_by_category(
        EXAMPLE, "formality", 1, 4
    )
    assert adjust_tone_advanced(EXAMPLE, {"formality": float("inf")}) == adjust_tone(EXAMPLE, 4)


def test_word_tables_tolerate_unicode_case_folding():
    assert adjust_tone_by_category("The ſtuff is here.", "formality", 1, 4) == "The things is here."
    for text in ("ı think so.", "İ think so."):
        result = adjust_tone_by_category(text, "formality", 1, 4)
        assert result.startswith(text[0])
        assert "contemplate" in result


def test_passionate_emotion_adds_exclamation():
    result = adjust_tone_by_category("The results were good.", "emotion", 1, 3)
    assert result.endswith("!")


def test_urgent_emotion():
    result = adjust_tone_by_category("We should review this later.", "emotion", 1, 4)
    assert result == "We must immediately review this right now!"


def test_reserved_emotion_tones_down():
    result = adjust_tone_by_category("This is amazing and I love it.", "emotion", 3, 0)
    assert result == "This is good and I like it."


def test_persuasive_style_is_deterministic():
    first = adjust_tone_by_category("This tool is good.", "style", 1, 3)
    second = adjust_tone_by_category("This tool is good.", "style", 1, 3)
    assert first == second
    assert first.startswith("Consider this: ")
    assert "powerful" in first


def test_concise_style():
    assert adjust_tone_by_category("It represents progress.", "style", 2, 0) == "It is progress."


def test_domain_vocabulary_applied_first():
    text = "The algorithm framework is slow and we must fix it."
    result = adjust_tone_by_category(text, "emotion", 2, 0)
    assert "inefficient" in result
    assert "debug" in result


def test_word_table_longest_match_and_case():
    table = WordTable("demo", {"find": "locate", "find out": "discover"})
    assert table.apply("Find out more and find it.") == "Discover more and locate it."


def test_word_table_single_pass_and_whole_words():
    assert WordTable("swap", {"a": "b", "b": "c"}).apply("so a b") == "so b c"
    assert WordTable("do", {"do": "perform"}).apply("don't do doing") == "don't perform doing"


def test_detect_tone_empty_text():
    assert detect_tone("") == ToneVector(formality=2.0, emotion=1.0, style=1.0, confidence=0.0)


def test_detect_tone_casual_and_formal():
    casual = detect_tone("gonna wanna kinda")
    assert casual.formality == 0.0
    assert casual.confidence == 0.4
    formal = detect_tone("Therefore the plan holds. Moreover it is sound.")
    assert formal.formality > 2.0


def test_detect_tone_confidence_steps():
    assert detect_tone("word " * 21).confidence == 0.6
    assert detect_tone("word " * 51).confidence == 0.8


def test_detect_tone_stays_in_range():
    for text in [EXAMPLE, "amazing " * 30, "dunno ain't gonna", "Imagine a powerful vision."]:
        tone = detect_tone(text)
        for value in (tone.formality, tone.emotion, tone.style):
            assert 0.0 <= value <= 4.0


def test_detect_domain():
    text = "Our revenue strategy targets new market segments and client profit."
    assert detect_domain(text) is Domain.BUSINESS
    assert detect_domain(EXAMPLE) is None
    assert detect_domain("") is None


def test_adjust_tone_detects_current_level():
    assert adjust_tone(EXAMPLE, 4) == adjust_tone_by_category(EXAMPLE, "formality", 2, 4)


def test_adjust_tone_advanced_detects_once(monkeypatch):
    calls = {"count": 0}
    real = adjust_module.detect_tone

    def counting(text: str) -> ToneVector:
        calls["count"] += 1
        return real(text)

    monkeypatch.setattr(adjust_module, "detect_tone", counting)
    result = adjust_tone_advanced(EXAMPLE, {"formality": 4, "emotion": 3})
    assert calls["count"] == 1
    assert "contemplate" in result
    assert result.endswith("!")


def test_adjust_tone_advanced_domain_only():
    result = adjust_tone_advanced("We fix the slow code.", {"domain": "technical"})
    assert result == "We debug the inefficient code."
    assert adjust_tone_advanced("We fix it.", {"domain": "nonsense"}) == "We fix it."


def test_plan_adjustment_steps():
    steps = plan_adjustment(ToneCategory.FORMALITY, 1, 4)
    assert [step.name for step in steps] == [
        "casual_to_formal",
        "casual_to_formal",
        "very_formal_additions",
    ]
    assert plan_adjustment(ToneCategory.STYLE, 0, 1) == []


def test_ai_suggestions_for_very_casual_target():
    suggestions = generate_ai_suggestions("u gonna b there?", "formality", 0)
    assert suggestions[:2] == [
        "Consider using full words instead of abbreviations",
        "Expand contractions for a more professional tone",
    ]
    assert suggestions[2].startswith("Example transformation:")
    assert len(suggestions) <= 4


def test_ai_suggestions_are_capped():
    text = "Our revenue strategy needs a new market vision for every client."
    suggestions = generate_ai_suggestions(text, "style", 4)
    assert len(suggestions) == 4
    assert generate_ai_suggestions(text, "colour", 2) == []


def test_get_tone_options():
    options = get_tone_options()
    assert set(options["categories"]) == {"formality", "emotion", "style"}
    for category in options["categories"].values():
        assert len(category["levels"]) == 5
        assert len(category["descriptions"]) == 5
    assert options["domains"] == ["business", "academic", "marketing", "creative", "technical"]
