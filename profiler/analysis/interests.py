from typing import List, Sequence

from profiler.analysis.text import coverage_score, join_fragments, match_keywords
from profiler.lexicons import INTEREST_CATEGORIES
from profiler.models import CategoryScore

MAX_EVIDENCE_KEYWORDS = 8


def analyze_interests(texts: Sequence[str]) -> List[CategoryScore]:
    """
    Scores each interest category by how much of its lexicon the corpus covers.

    Args:
        texts (Sequence[str]): Fragment texts.
    Returns:
        List[CategoryScore]: Categories with at least one match, highest score first.
    """
    corpus = join_fragments(texts)
    interests = []

    for lexicon in INTEREST_CATEGORIES:
        matched = match_keywords(corpus, lexicon)
        if not matched:
            continue
        interests.append(CategoryScore(
            category=lexicon.name,
            score=coverage_score(matched, lexicon),
            matched_keywords=matched[:MAX_EVIDENCE_KEYWORDS],
            description=lexicon.description,
        ))

    return sorted(interests, key=lambda interest: interest.score, reverse=True)
