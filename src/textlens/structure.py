"""Per-sentence and per-paragraph shape of a text."""

from __future__ import annotations

import math
from typing import List

from .models import FlowChunk, ParagraphInfo, SentenceLength, SentenceProfile
from .textutils import round_half_up
from .tokenization import split_paragraphs, split_sentences, split_whitespace

LONG_SENTENCE_WORDS = 25
SHORT_SENTENCE_WORDS = 8
PREVIEW_CHARS = 50
MIN_FLOW_TEXT_CHARS = 20
LONG_WORD_CHARS = 8
SHORT_PARAGRAPH_WORDS = 30
LONG_PARAGRAPH_WORDS = 150


def _sentence_status(words: int) -> str:
    if words > LONG_SENTENCE_WORDS:
        return "Long"
    if words < SHORT_SENTENCE_WORDS:
        return "Short"
    return "Good"


def sentence_profile(text: str) -> SentenceProfile:
    lengths: List[SentenceLength] = []
    for idx, sentence in enumerate(split_sentences(text), start=1):
        preview = sentence[:PREVIEW_CHARS] + ("..." if len(sentence) > PREVIEW_CHARS else "")
        words = len(split_whitespace(sentence))
        lengths.append(
            SentenceLength(index=idx, words=words, preview=preview, status=_sentence_status(words))
        )
    if not lengths:
        return SentenceProfile(
            sentences=[], average=0, long_sentences=0, short_sentences=0, variation=0
        )

    average = int(round_half_up(sum(item.words for item in lengths) / len(lengths)))
    variation = 0
    if len(lengths) > 1:
        variance = sum((item.words - average) ** 2 for item in lengths) / len(lengths)
        variation = int(round_half_up(math.sqrt(variance)))
    return SentenceProfile(
        sentences=lengths,
        average=average,
        long_sentences=sum(1 for item in lengths if item.words > LONG_SENTENCE_WORDS),
        short_sentences=sum(1 for item in lengths if item.words < SHORT_SENTENCE_WORDS),
        variation=variation,
    )


def sentence_complexity(sentence: str) -> int:
    """0-100 blend of sentence length, average word length and long words."""
    words = split_whitespace(sentence)
    count = len(words)
    avg_word_len = sum(len(word) for word in words) / max(1, count)
    long_words = sum(1 for word in words if len(word) > LONG_WORD_CHARS)
    score = min(40, count * 1.5) + min(30, avg_word_len * 4) + min(30, long_words * 8)
    return min(100, int(round_half_up(score)))


def flow_label(complexity: int) -> str:
    if complexity < 30:
        return "Easy flow"
    if complexity < 50:
        return "Smooth"
    if complexity < 70:
        return "Moderate"
    return "Complex"


def reading_flow(text: str) -> List[FlowChunk]:
    if not text or len(text) < MIN_FLOW_TEXT_CHARS:
        return []
    chunks: List[FlowChunk] = []
    for idx, sentence in enumerate(split_sentences(text)):
        complexity = sentence_complexity(sentence)
        chunks.append(
            FlowChunk(index=idx, text=sentence, complexity=complexity, label=flow_label(complexity))
        )
    return chunks


def paragraph_structure(text: str) -> List[ParagraphInfo]:
    paragraphs: List[ParagraphInfo] = []
    for idx, paragraph in enumerate(split_paragraphs(text)):
        words = len(split_whitespace(paragraph))
        if words < SHORT_PARAGRAPH_WORDS:
            status = "Short"
        elif words > LONG_PARAGRAPH_WORDS:
            status = "Long"
        else:
            status = "Good"
        paragraphs.append(
            ParagraphInfo(
                index=idx,
                words=words,
                sentences=len(split_sentences(paragraph)),
                status=status,
            )
        )
    return paragraphs
