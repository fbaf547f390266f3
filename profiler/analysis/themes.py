from typing import Iterable, List, Sequence

from profiler.analysis.text import has_any_keyword, join_fragments
from profiler.lexicons import RISKS, THEMES

MAX_THEMES = 5


def extract_themes(texts: Sequence[str], limit: int = MAX_THEMES) -> List[str]:
    """
    Themes whose keywords appear anywhere in the corpus, in definition order.
    """
    corpus = join_fragments(texts)
    return [lexicon.name for lexicon in THEMES if has_any_keyword(corpus, lexicon)][:limit]


def identify_risk_factors(texts: Sequence[str]) -> List[str]:
    """
    Every risk category with at least one keyword present in the corpus.

    Args:
        texts (Sequence[str]): Fragment texts.
    Returns:
        List[str]: Risk labels in definition order, uncapped.
    """
    corpus = join_fragments(texts)
    return [lexicon.name for lexicon in RISKS if has_any_keyword(corpus, lexicon)]


def merge_risk_flags(local: Iterable[str], external: Iterable[str]) -> List[str]:
    """
    Appends external red flags after the local ones, dropping exact duplicates.

    Merging an already merged list again returns it unchanged.

    Args:
        local (Iterable[str]): Keyword-detected risk labels.
        external (Iterable[str]): Red flags from the external opinion.
    Returns:
        List[str]: Combined labels, local first.
    """
    merged: List[str] = []
    for flag in [*local, *external]:
        if isinstance(flag, str) and flag not in merged:
            merged.append(flag)
    return merged
