import re
from typing import Callable, List, Sequence

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from profiler.analysis.text import round_half_up
from profiler.lexicons import NEGATIVE_EMOTIONS, POSITIVE_EMOTIONS
from profiler.models import SentimentSummary

WORD_PATTERN = re.compile(r"[a-z]+(?:'[a-z]+)?")

POSITIVE_THRESHOLD = 2
NEGATIVE_THRESHOLD = -2
MAX_EMOTIONAL_KEYWORDS = 10

# Loaded once; only its word -> valence table is used
analyzer = SentimentIntensityAnalyzer()

PolarityScorer = Callable[[str], float]


def lexicon_polarity(text: str) -> float:
    """
    Sums the VADER lexicon valence of every word in the text.

    Positive words add weight and negative words subtract it; unknown words
    contribute nothing. No negation or intensifier handling.

    Args:
        text (str): A single fragment.
    Returns:
        float: Signed polarity score.
    """
    return sum(analyzer.lexicon.get(word, 0.0) for word in WORD_PATTERN.findall(text.lower()))


def extract_emotional_keywords(texts: Sequence[str], limit: int = MAX_EMOTIONAL_KEYWORDS) -> List[str]:
    """
    Collects emotion words by exact (whitespace-split, lower-cased) word equality.

    Args:
        texts (Sequence[str]): Fragment texts.
        limit (int): Maximum number of keywords kept.
    Returns:
        List[str]: Unique hits in first-seen order.
    """
    found: List[str] = []
    for text in texts:
        for word in text.lower().split():
            if (word in POSITIVE_EMOTIONS or word in NEGATIVE_EMOTIONS) and word not in found:
                found.append(word)
    return found[:limit]


def analyze_sentiment(texts: Sequence[str], scorer: PolarityScorer = lexicon_polarity) -> SentimentSummary:
    """
    Buckets each fragment by polarity and classifies the overall emotional tone.

    Bucket percentages are rounded independently, so they may not add up to
    exactly 100.

    Args:
        texts (Sequence[str]): Fragment texts.
        scorer (PolarityScorer): Per-fragment polarity function.
    Returns:
        SentimentSummary: Distribution, tone, confidence and emotional keywords.
    """
    positive = negative = neutral = 0
    total_score = 0.0

    for text in texts:
        score = scorer(text)
        total_score += score
        if score > POSITIVE_THRESHOLD:
            positive += 1
        elif score < NEGATIVE_THRESHOLD:
            negative += 1
        else:
            neutral += 1

    total = len(texts)
    if total == 0:
        return SentimentSummary(positive=0, neutral=0, negative=0, emotional_tone="Balanced",
                                confidence=70, emotional_keywords=[])

    avg_score = total_score / total
    if avg_score > 1:
        tone, confidence = "Positive", min(95, 60 + avg_score * 10)
    elif avg_score < -1:
        tone, confidence = "Negative", min(95, 60 + abs(avg_score) * 10)
    else:
        tone, confidence = "Balanced", 70

    return SentimentSummary(
        positive=round_half_up(positive / total * 100),
        neutral=round_half_up(neutral / total * 100),
        negative=round_half_up(negative / total * 100),
        emotional_tone=tone,
        confidence=round_half_up(confidence),
        emotional_keywords=extract_emotional_keywords(texts),
    )
