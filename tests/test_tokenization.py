from textlens.tokenization import (
    split_paragraphs,
    split_sentences,
    split_whitespace,
    tokenize_words,
)


def test_tokenize_words_strips_punctuation():
    assert tokenize_words("Don't stop (now), friend!") == ["Dont", "stop", "now", "friend"]


def test_tokenize_words_lowercase_and_blank():
    assert tokenize_words("Hello World", lowercase=True) == ["hello", "world"]
    assert tokenize_words("   \n\t ") == []
    assert tokenize_words("") == []


def test_split_sentences_drops_empty_segments():
    assert split_sentences("Wait... What?! Yes.") == ["Wait", "What", "Yes"]
    assert split_sentences("...") == []


def test_split_paragraphs_on_blank_lines():
    text = "First block.\nstill first.\n\n  \nSecond block."
    assert split_paragraphs(text) == ["First block.\nstill first.", "Second block."]


def test_split_whitespace_keeps_punctuation():
    assert split_whitespace("  a, b.  c ") == ["a,", "b.", "c"]
