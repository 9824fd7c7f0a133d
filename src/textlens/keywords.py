from __future__ import annotations

from typing import List, Mapping

from .models import Keyword

DEFAULT_KEYWORD_LIMIT = 15
MIN_KEYWORD_LENGTH = 3

STOP_WORDS = frozenset(
    [
        # articles, pronouns, auxiliaries and other function words
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it",
        "for", "not", "on", "with", "he", "as", "you", "do", "at", "this", "but",
        "his", "by", "from", "they", "we", "say", "her", "she", "or", "an",
        "will", "my", "one", "all", "would", "there", "their", "what", "so",
        "up", "out", "if", "about", "who", "get", "which", "go", "me", "when",
        "make", "can", "like", "time", "no", "just", "him", "know", "take",
        "people", "into", "year", "your", "some", "could", "them", "see",
        "other", "than", "then", "now", "look", "only", "come", "its", "over",
        "think", "also", "back", "after", "use", "two", "how", "our", "work",
        "first", "well", "way", "even", "new", "want", "because", "any",
        "these", "give", "day", "most", "us", "is", "are", "was", "were",
        "been", "being", "has", "had", "does", "did", "am", "very", "such",
        "here", "where", "why", "should", "each", "more", "may", "must", "own",
        "too", "much", "many", "those", "both", "same", "through", "during",
        "before", "under", "between", "while", "although", "however", "since",
        "until", "against", "without", "within", "along", "among", "around",
        "behind", "beyond", "across", "beside", "besides", "whether", "either",
        "neither", "yet", "still", "already", "always", "never", "ever",
        "often", "sometimes", "usually", "myself", "yourself", "himself",
        "herself", "itself", "ourselves", "themselves", "yours", "hers",
        "ours", "theirs", "mine", "whom", "whose", "upon", "onto", "off",
        "down", "above", "below", "again", "once", "few", "less", "least",
        "nor", "per", "via", "shall", "might", "cannot", "cant", "dont",
        "doesnt", "didnt", "isnt", "arent", "wasnt", "werent", "wont",
        "wouldnt", "couldnt", "shouldnt", "im", "ive", "youre", "theyre",
        "thats", "theres", "lets", "whats", "every", "another", "something",
        "anything", "nothing", "everything", "someone", "anyone", "everyone",
        "thing", "things", "got", "made", "went", "gone", "said", "says",
        "let", "put", "told", "seem", "seems", "seemed", "become", "became",
        # hedging adverbs
        "perhaps", "probably", "certainly", "definitely", "possibly",
        "actually", "really", "quite", "rather", "almost", "enough",
        "especially", "particularly", "generally", "specifically", "simply",
        "completely", "absolutely", "exactly", "directly", "immediately",
        "recently", "currently", "finally", "eventually", "suddenly",
        "gradually", "slowly", "quickly", "carefully", "easily", "hardly",
        "nearly", "mainly", "mostly", "partly", "slightly", "highly",
        "greatly", "strongly", "deeply", "widely", "clearly", "closely",
        "fully", "basically", "literally", "truly", "merely",
        # transitions
        "further", "therefore", "thus", "hence", "moreover", "furthermore",
        "additionally", "meanwhile", "nonetheless", "nevertheless",
        "otherwise", "instead", "accordingly", "consequently", "subsequently",
        "indeed", "though", "unless", "whereas", "whereby", "thereby",
        "likewise", "similarly", "overall", "anyway",
    ]
)


def extract_keywords(
    text: str, frequency: Mapping[str, int], limit: int = DEFAULT_KEYWORD_LIMIT
) -> List[Keyword]:
    """Rank non stop-word tokens by count.

    The sort is stable, so equal counts keep the frequency map's order (first
    occurrence in the text).
    """
    if not text or not frequency or limit <= 0:
        return []
    candidates = [
        (word, count)
        for word, count in frequency.items()
        if word not in STOP_WORDS and len(word) >= MIN_KEYWORD_LENGTH
    ]
    candidates.sort(key=lambda item: item[1], reverse=True)
    return [Keyword(word=word, count=count) for word, count in candidates[:limit]]
