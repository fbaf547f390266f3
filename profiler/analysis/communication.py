import re
from typing import Sequence

from profiler.analysis.text import clamp, round_half_up
from profiler.lexicons import ENGAGEMENT_WORDS, FORMAL_WORDS, INFORMAL_WORDS
from profiler.models import CommunicationPatterns

VOWELS = "aeiouy"

HASHTAG_PATTERN = re.compile(r'#\w+')
MENTION_PATTERN = re.compile(r'@\w+')


def count_syllables(word: str) -> int:
    """
    Heuristic syllable count: number of vowel groups, minus a silent trailing "e".

    Args:
        word (str): A single word.
    Returns:
        int: At least 1.
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    count = 0
    previous_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1
    return max(1, count)


def readability_score(text: str) -> int:
    """
    Simplified Flesch Reading Ease, clamped to 0-100.

    Args:
        text (str): Joined corpus.
    Returns:
        int: Higher means easier to read.
    """
    # Empty pieces from leading whitespace or trailing punctuation are counted
    words = re.split(r'\s+', text)
    sentences = re.split(r'[.!?]+', text)
    avg_words_per_sentence = len(words) / len(sentences)
    avg_syllables_per_word = sum(count_syllables(w) for w in words) / len(words)
    score = round_half_up(206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word)
    return int(clamp(score))


def formality_score(text: str) -> int:
    lowered = text.lower()
    formal = sum(1 for word in FORMAL_WORDS if word in lowered)
    informal = sum(1 for word in INFORMAL_WORDS if word in lowered)
    score = round_half_up((formal - informal) / max(formal + informal, 1) * 50 + 50)
    return int(clamp(score))


def engagement_score(text: str, fragment_count: int) -> int:
    lowered = text.lower()
    matches = sum(1 for word in ENGAGEMENT_WORDS if word in lowered)
    return int(clamp(round_half_up(matches / max(1, fragment_count) * 20)))


def classify_writing_style(formality: int, engagement: int, question_count: int, fragment_count: int) -> str:
    """
    Ordered threshold rules; the first that applies decides the style.
    """
    rules = [
        (lambda: formality < 40, "Casual"),
        (lambda: formality > 70, "Formal"),
        (lambda: engagement > 60, "Engaging"),
        (lambda: question_count > fragment_count * 0.3, "Inquisitive"),
    ]
    for predicate, style in rules:
        if predicate():
            return style
    return "Professional"


def analyze_communication_patterns(texts: Sequence[str]) -> CommunicationPatterns:
    """
    Structural and lexical writing metrics over all fragments.

    Args:
        texts (Sequence[str]): Fragment texts.
    Returns:
        CommunicationPatterns: Style label plus per-fragment frequencies (0-100 scale).
    """
    all_text = " ".join(texts)
    n = max(1, len(texts))

    question_count = all_text.count("?")
    exclamation_count = all_text.count("!")
    hashtag_count = len(HASHTAG_PATTERN.findall(all_text))
    mention_count = len(MENTION_PATTERN.findall(all_text))

    formality = formality_score(all_text)
    engagement = engagement_score(all_text, len(texts))

    return CommunicationPatterns(
        writing_style=classify_writing_style(formality, engagement, question_count, len(texts)),
        formality=formality,
        engagement=engagement,
        question_frequency=round_half_up(question_count / n * 100),
        exclamation_frequency=round_half_up(exclamation_count / n * 100),
        hashtag_usage=round_half_up(hashtag_count / n * 100),
        mention_frequency=round_half_up(mention_count / n * 100),
        avg_tweet_length=round_half_up(sum(len(t) for t in texts) / n),
        readability_score=readability_score(all_text),
    )
