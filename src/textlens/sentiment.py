from __future__ import annotations

from typing import List

from .models import EmotionalWord, SentimentResult
from .textutils import round_half_up
from .tokenization import tokenize_words

MAX_EMOTIONAL_WORDS = 10

POSITIVE_WORDS = frozenset(
    [
        "good", "great", "excellent", "amazing", "wonderful", "fantastic",
        "awesome", "best", "love", "happy", "joy", "beautiful", "perfect",
        "brilliant", "outstanding", "superb", "nice", "positive", "success",
        "successful", "win", "winner", "excited", "exciting", "incredible",
        "remarkable", "impressive", "delightful", "pleasant", "cheerful", "glad",
        "pleased", "thankful", "grateful", "blessed", "hopeful", "optimistic",
        "confident", "proud", "satisfied", "content", "peaceful", "calm",
        "relaxed", "comfortable", "safe", "secure", "strong", "healthy", "fresh",
        "clean", "bright", "warm", "friendly", "kind", "generous", "helpful",
        "supportive", "encouraging", "inspiring", "motivated", "energetic",
        "enthusiastic", "passionate", "creative", "innovative", "smart",
        "clever", "wise", "talented", "skilled", "capable", "effective",
        "efficient", "productive", "valuable", "important", "meaningful",
        "significant", "special", "unique", "rare", "precious", "lovely",
        "charming", "elegant", "graceful",
    ]
)

NEGATIVE_WORDS = frozenset(
    [
        "bad", "terrible", "awful", "horrible", "poor", "worst", "hate", "sad",
        "angry", "upset", "disappointed", "frustrating", "annoying", "boring",
        "dull", "ugly", "wrong", "failure", "failed", "lose", "loser",
        "negative", "problem", "issue", "difficult", "hard", "impossible",
        "painful", "hurt", "damage", "broken", "weak", "sick", "tired",
        "exhausted", "stressed", "worried", "anxious", "nervous", "scared",
        "afraid", "fear", "dangerous", "risky", "unsafe", "unhappy",
        "unhealthy", "dirty", "dark", "cold", "lonely", "alone", "empty",
        "meaningless", "useless", "worthless", "hopeless", "helpless",
        "desperate", "confused", "lost", "stuck", "trapped", "limited",
        "restricted", "slow", "late", "mistake", "error", "fault", "blame",
        "guilt", "shame", "regret", "sorry", "miss", "lack", "need", "want",
        "crave", "envy", "jealous", "greedy", "selfish", "rude", "mean",
        "cruel", "harsh", "aggressive", "violent", "hostile", "unfriendly",
        "unkind", "ungrateful", "disrespectful", "dishonest", "fake", "false",
        "lie", "cheat", "steal", "destroy", "ruin", "waste",
    ]
)


def sentiment_label(score: int) -> str:
    if score >= 30:
        return "Positive"
    if score >= 10:
        return "Slightly Positive"
    if score <= -30:
        return "Negative"
    if score <= -10:
        return "Slightly Negative"
    return "Neutral"


def analyze_sentiment(text: str) -> SentimentResult:
    """Score polarity by counting lexicon hits; blank text is Neutral."""
    words = tokenize_words(text, lowercase=True)
    if not words:
        return SentimentResult()

    positive = 0
    negative = 0
    emotional: List[EmotionalWord] = []
    seen: set[str] = set()

    for word in words:
        if word in POSITIVE_WORDS:
            positive += 1
            kind = "positive"
        elif word in NEGATIVE_WORDS:
            negative += 1
            kind = "negative"
        else:
            continue
        if word not in seen:
            seen.add(word)
            emotional.append(EmotionalWord(word=word, type=kind))

    total_emotional = positive + negative
    score = 0
    if total_emotional:
        score = int(round_half_up((positive - negative) / total_emotional * 100))

    return SentimentResult(
        score=score,
        label=sentiment_label(score),
        positive=positive,
        negative=negative,
        neutral=len(words) - total_emotional,
        emotional_words=emotional[:MAX_EMOTIONAL_WORDS],
    )
