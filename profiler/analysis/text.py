import math
import re
from typing import Iterator, List, Sequence

from profiler.lexicons import STOP_WORDS, Lexicon

TOKEN_PATTERN = re.compile(r'\b[a-z]{3,}\b', re.ASCII)


def round_half_up(value: float) -> int:
    """
    Rounds .5 away from zero for positive values (12.5 -> 13), unlike round().

    Args:
        value (float): Number to round.
    Returns:
        int: Rounded integer.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float = 0, hi: float = 100) -> float:
    return max(lo, min(hi, value))


def join_fragments(texts: Sequence[str]) -> str:
    """
    Joins fragment texts into one lower-cased corpus for substring matching.
    """
    return " ".join(texts).lower()


def tokenize(text: str) -> Iterator[str]:
    """
    Lazily yields lower-case alphabetic tokens of 3+ characters, skipping stop words.

    Args:
        text (str): Raw text, possibly several fragments joined together.
    Returns:
        Iterator[str]: Tokens in order of appearance.
    """
    for match in TOKEN_PATTERN.finditer(text.lower()):
        token = match.group(0)
        if token not in STOP_WORDS:
            yield token


def match_keywords(text: str, lexicon: Lexicon) -> List[str]:
    """
    Returns the lexicon keywords found as substrings of the lower-cased text.

    Matching is plain containment, not word-boundary aware ("art" matches "start").

    Args:
        text (str): Text to scan.
        lexicon (Lexicon): Keyword list to test.
    Returns:
        List[str]: Matched keywords in lexicon order.
    """
    lowered = text.lower()
    return [keyword for keyword in lexicon.keywords if keyword in lowered]


def has_any_keyword(text: str, lexicon: Lexicon) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in lexicon.keywords)


def coverage_score(matched: Sequence[str], lexicon: Lexicon) -> int:
    """
    Share of the lexicon that matched, as a 0-100 score.

    Args:
        matched (Sequence[str]): Keywords returned by match_keywords.
        lexicon (Lexicon): The lexicon they came from.
    Returns:
        int: min(100, round(100 * matched / lexicon size)).
    """
    if len(lexicon) == 0:
        return 0
    return min(100, round_half_up(100 * len(matched) / len(lexicon)))
