from collections import Counter
from typing import List, Sequence

from profiler.analysis.text import tokenize
from profiler.lexicons import TOPIC_CATEGORIES
from profiler.models import TopicScore

MAX_TOPICS = 15
MAX_CONFIDENCE = 95


def categorize_token(token: str) -> str:
    """
    First topic category sharing a substring with the token, in either direction.

    Args:
        token (str): A lower-case token.
    Returns:
        str: Category name, or "General" when nothing overlaps.
    """
    for lexicon in TOPIC_CATEGORIES:
        if any(keyword in token or token in keyword for keyword in lexicon.keywords):
            return lexicon.name
    return "General"


def extract_topics(texts: Sequence[str], limit: int = MAX_TOPICS) -> List[TopicScore]:
    """
    Ranks corpus tokens by frequency and buckets each into a topic category.

    Confidence is frequency relative to the number of fragments, capped at 95;
    it is not a probability.

    Args:
        texts (Sequence[str]): Fragment texts.
        limit (int): Number of topics to return.
    Returns:
        List[TopicScore]: Most frequent tokens first; ties keep first-seen order.
    """
    frequencies = Counter(tokenize(" ".join(texts)))
    fragment_count = max(1, len(texts))

    return [
        TopicScore(
            topic=token.capitalize(),
            confidence=min(MAX_CONFIDENCE, freq / fragment_count * 100),
            frequency=freq,
            category=categorize_token(token),
        )
        for token, freq in frequencies.most_common(limit)
    ]
