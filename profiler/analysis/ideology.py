from typing import Sequence

from profiler.analysis.text import match_keywords, round_half_up
from profiler.lexicons import CONSERVATIVE, PROGRESSIVE
from profiler.models import IdeologySummary


def classify_fragment(text: str) -> str:
    """
    Labels one fragment by majority keyword vote; ties (including 0-0) are neutral.

    Args:
        text (str): A single fragment.
    Returns:
        str: "progressive", "conservative" or "neutral".
    """
    progressive = len(match_keywords(text, PROGRESSIVE))
    conservative = len(match_keywords(text, CONSERVATIVE))
    if progressive > conservative:
        return "progressive"
    if conservative > progressive:
        return "conservative"
    return "neutral"


def analyze_ideology(texts: Sequence[str]) -> IdeologySummary:
    """
    Share of fragments per ideology label, each rounded independently.

    Args:
        texts (Sequence[str]): Fragment texts.
    Returns:
        IdeologySummary: Percentages of progressive, conservative and neutral fragments.
    """
    counts = {"progressive": 0, "conservative": 0, "neutral": 0}
    for text in texts:
        counts[classify_fragment(text)] += 1

    total = len(texts)
    if total == 0:
        return IdeologySummary(progressive=0, conservative=0, neutral=0)

    return IdeologySummary(**{label: round_half_up(count / total * 100) for label, count in counts.items()})
