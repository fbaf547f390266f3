from typing import Any, Callable, Dict, List, Sequence, Tuple

from profiler.analysis.text import clamp, join_fragments, round_half_up
from profiler.models import (
    ExternalOpinion,
    HirabilityBreakdown,
    IdeologySummary,
    MindsetProfile,
    SentimentSummary,
)

GOOD_CULTURAL_FIT = "Good cultural fit"
POOR_CULTURAL_FIT = "Poor cultural fit"

# (sentiment, ideology, corpus, opinion) -> bool
MindsetPredicate = Callable[[SentimentSummary, IdeologySummary, str, ExternalOpinion], bool]

MINDSET_RULES: List[Tuple[MindsetPredicate, MindsetProfile]] = [
    (lambda s, i, corpus, o: s.positive > 60 and i.progressive > 50,
     MindsetProfile(category="Optimistic Innovator",
                    description="Positive outlook with progressive values. Likely to embrace change and new ideas.",
                    score=85)),
    (lambda s, i, corpus, o: s.positive > 60 and i.conservative > 50,
     MindsetProfile(category="Pragmatic Leader",
                    description="Positive outlook with focus on proven methods. Values stability and results.",
                    score=75)),
    (lambda s, i, corpus, o: s.negative > 40,
     MindsetProfile(category="Critical Thinker",
                    description="Tends to be critical and analytical. May challenge status quo.",
                    score=55)),
    (lambda s, i, corpus, o: "learning" in corpus or "growth" in corpus,
     MindsetProfile(category="Growth-Oriented",
                    description="Focused on continuous improvement and development.",
                    score=80)),
    (lambda s, i, corpus, o: "Analytical" in o.personality_traits,
     MindsetProfile(category="Analytical Professional",
                    description="Data-driven approach with strong analytical thinking skills.",
                    score=75)),
    (lambda s, i, corpus, o: "Collaborative" in o.personality_traits,
     MindsetProfile(category="Team Player",
                    description="Strong collaborative skills and team-oriented mindset.",
                    score=80)),
]

DEFAULT_MINDSET = MindsetProfile(
    category="Balanced Professional",
    description="Shows balanced perspective with professional focus",
    score=65,
)


def generate_mindset_profile(
    texts: Sequence[str],
    sentiment: SentimentSummary,
    ideology: IdeologySummary,
    opinion: ExternalOpinion,
) -> MindsetProfile:
    """
    Picks the first mindset rule that matches, in fixed priority order.

    Args:
        texts (Sequence[str]): Fragment texts.
        sentiment (SentimentSummary): Sentiment distribution.
        ideology (IdeologySummary): Ideology distribution.
        opinion (ExternalOpinion): Validated (or fallback) external opinion.
    Returns:
        MindsetProfile: Category label, description and score.
    """
    corpus = join_fragments(texts)
    for predicate, profile in MINDSET_RULES:
        if predicate(sentiment, ideology, corpus, opinion):
            return profile.model_copy()
    return DEFAULT_MINDSET.model_copy()


def hirability_breakdown(
    sentiment: SentimentSummary,
    ideology: IdeologySummary,
    risk_factors: Sequence[str],
    opinion: ExternalOpinion,
) -> HirabilityBreakdown:
    """
    Computes every term of the hirability formula separately.

    Args:
        sentiment (SentimentSummary): Sentiment distribution.
        ideology (IdeologySummary): Ideology distribution.
        risk_factors (Sequence[str]): Merged risk labels (local and external).
        opinion (ExternalOpinion): Validated (or fallback) external opinion.
    Returns:
        HirabilityBreakdown: Contributions plus the clamped, rounded final score.
    """
    sentiment_term = sentiment.positive * 0.3 - sentiment.negative * 0.3
    # Balanced ideology scores higher than a strong lean either way
    ideology_term = (100 - abs(ideology.progressive - ideology.conservative)) * 0.1
    risk_term = -15 * len(risk_factors)

    if opinion.cultural_fit == GOOD_CULTURAL_FIT:
        fit_term = 10
    elif opinion.cultural_fit == POOR_CULTURAL_FIT:
        fit_term = -15
    else:
        fit_term = 0

    insights_term = 5 if len(opinion.professional_insights) > 2 else 0

    raw = 50 + sentiment_term + ideology_term + risk_term + fit_term + insights_term
    return HirabilityBreakdown(
        base=50,
        sentiment=sentiment_term,
        ideology_balance=ideology_term,
        risk_penalty=risk_term,
        cultural_fit=fit_term,
        insights_bonus=insights_term,
        raw_score=raw,
        final_score=int(clamp(round_half_up(raw))),
    )


def calculate_hirability(
    sentiment: SentimentSummary,
    ideology: IdeologySummary,
    risk_factors: Sequence[str],
    opinion: ExternalOpinion,
) -> int:
    return hirability_breakdown(sentiment, ideology, risk_factors, opinion).final_score


def generate_recommendation(
    sentiment: SentimentSummary,
    local_risks: Sequence[str],
    opinion: ExternalOpinion,
) -> str:
    """
    Ordered recommendation rules; the first that applies produces the message.

    Args:
        sentiment (SentimentSummary): Sentiment distribution.
        local_risks (Sequence[str]): Keyword-detected risk labels only.
        opinion (ExternalOpinion): Validated (or fallback) external opinion.
    Returns:
        str: Recommendation text.
    """
    if local_risks:
        return (f"Caution recommended. Identified {len(local_risks)} potential concern(s): "
                f"{', '.join(local_risks)}. Consider further investigation before hiring.")

    if opinion.red_flags:
        return (f"Proceed with caution. AI analysis identified potential concerns: "
                f"{', '.join(opinion.red_flags)}. Recommend additional screening.")

    if sentiment.positive > 70 and opinion.cultural_fit == GOOD_CULTURAL_FIT:
        return ("Excellent candidate profile. Shows positive outlook, professional engagement, "
                "and strong cultural fit. Highly recommended for further consideration.")

    if sentiment.positive > 50:
        return ("Good candidate profile. Demonstrates professional engagement and balanced perspective. "
                "Suitable for most roles with proper onboarding.")

    return ("Proceed with caution. Profile shows mixed signals. Recommend conducting additional "
            "interviews to assess cultural fit and professional alignment.")


def generate_audit_trail(
    breakdown: HirabilityBreakdown,
    local_risks: Sequence[str],
    opinion: ExternalOpinion,
) -> Dict[str, Any]:
    """
    Creates the explainability breakdown attached to the profile.

    Args:
        breakdown (HirabilityBreakdown): Output of hirability_breakdown.
        local_risks (Sequence[str]): Keyword-detected risk labels.
        opinion (ExternalOpinion): The opinion that fed the score.
    Returns:
        Dict[str, Any]: Score terms and the evidence behind them.
    """
    return {
        "hirability_breakdown": {
            "base": f"{breakdown.base:+.1f}",
            "sentiment": f"{breakdown.sentiment:+.1f} (0.3 x positive - 0.3 x negative)",
            "ideology_balance": f"{breakdown.ideology_balance:+.1f} (0.1 x (100 - |progressive - conservative|))",
            "risk_penalty": f"{breakdown.risk_penalty:+.1f} (-15 per risk factor)",
            "cultural_fit": f"{breakdown.cultural_fit:+.1f} ({opinion.cultural_fit or 'not assessed'})",
            "insights_bonus": f"{breakdown.insights_bonus:+.1f}",
            "final_score": f"{breakdown.final_score}/100",
        },
        "evidence_log": {
            "keyword_risks": list(local_risks),
            "external_red_flags": list(opinion.red_flags),
            "opinion_source": opinion.source,
        },
    }
