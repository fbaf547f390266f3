from typing import List, Sequence

from profiler.analysis.interests import MAX_EVIDENCE_KEYWORDS
from profiler.analysis.text import coverage_score, join_fragments, match_keywords
from profiler.lexicons import PERSONALITY_TRAITS
from profiler.models import TraitScore


def analyze_personality_traits(texts: Sequence[str]) -> List[TraitScore]:
    """
    Scores the eight personality traits the same way interests are scored.

    The evidence phrases are fixed per trait and do not depend on which
    keywords matched.

    Args:
        texts (Sequence[str]): Fragment texts.
    Returns:
        List[TraitScore]: Traits with at least one match, highest score first.
    """
    corpus = join_fragments(texts)
    traits = []

    for lexicon in PERSONALITY_TRAITS:
        matched = match_keywords(corpus, lexicon)
        if matched:
            traits.append(TraitScore(
                category=lexicon.name,
                score=coverage_score(matched, lexicon),
                matched_keywords=matched[:MAX_EVIDENCE_KEYWORDS],
                description=lexicon.description,
                evidence=list(lexicon.evidence),
            ))

    return sorted(traits, key=lambda trait: trait.score, reverse=True)
