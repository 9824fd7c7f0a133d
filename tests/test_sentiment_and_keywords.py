import pytest

from textlens.keywords import STOP_WORDS, extract_keywords
from textlens.models import Keyword
from textlens.sentiment import analyze_sentiment, sentiment_label
from textlens.stats import word_frequency


def test_sentiment_counts_and_score():
    result = analyze_sentiment("good bad good good")
    assert result.positive == 3
    assert result.negative == 1
    assert result.neutral == 0
    assert result.score == 50
    assert result.label == "Positive"
    assert [(w.word, w.type) for w in result.emotional_words] == [
        ("good", "positive"),
        ("bad", "negative"),
    ]


def test_sentiment_rounds_half_up():
    result = analyze_sentiment("good " * 13 + "bad " * 3)
    assert result.score == 63


def test_sentiment_negative_text():
    result = analyze_sentiment("I love this but I hate that and it is terrible")
    assert result.score == -33
    assert result.label == "Negative"
    assert result.positive + result.negative + result.neutral == 11


def test_sentiment_blank_text_is_neutral():
    result = analyze_sentiment("   ")
    assert result.score == 0
    assert result.label == "Neutral"
    assert result.emotional_words == []


@pytest.mark.parametrize(
    ("score", "label"),
    [
        (100, "Positive"),
        (30, "Positive"),
        (29, "Slightly Positive"),
        (10, "Slightly Positive"),
        (9, "Neutral"),
        (0, "Neutral"),
        (-9, "Neutral"),
        (-10, "Slightly Negative"),
        (-29, "Slightly Negative"),
        (-30, "Negative"),
        (-100, "Negative"),
    ],
)
def test_sentiment_label_boundaries(score: int, label: str):
    assert sentiment_label(score) == label


def test_sentiment_score_is_bounded():
    for text in ["good good good", "bad bad", "plain words only", ""]:
        assert -100 <= analyze_sentiment(text).score <= 100


def test_extract_keywords_example():
    text = "good bad good good"
    keywords = extract_keywords(text, word_frequency(text), limit=2)
    assert keywords == [Keyword(word="good", count=3), Keyword(word="bad", count=1)]


def test_extract_keywords_ties_keep_first_occurrence():
    text = "alpha beta gamma beta alpha"
    keywords = extract_keywords(text, word_frequency(text))
    assert [k.word for k in keywords] == ["alpha", "beta", "gamma"]


def test_extract_keywords_filters_stop_words_and_short_words():
    text = "The ox and the analysis of the data is an analysis"
    keywords = extract_keywords(text, word_frequency(text))
    words = [k.word for k in keywords]
    assert words == ["analysis", "data"]
    assert not any(word in STOP_WORDS for word in words)


def test_extract_keywords_empty_inputs():
    assert extract_keywords("", {}) == []
    assert extract_keywords("words here", {}) == []


def test_sentiment_and_keywords_are_pure():
    text = "Great teams love clear goals, but poor planning causes terrible delays. Great goals help."
    assert analyze_sentiment(text) == analyze_sentiment(text)
    frequency = word_frequency(text)
    first = extract_keywords(text, frequency)
    assert first == extract_keywords(text, frequency)
    assert frequency == word_frequency(text)
    assert [k.word for k in first][:2] == ["great", "goals"]
