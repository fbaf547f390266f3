import logging
from typing import Sequence

from profiler.analysis.communication import analyze_communication_patterns
from profiler.analysis.ideology import analyze_ideology
from profiler.analysis.interests import analyze_interests
from profiler.analysis.scoring_engine import (
    generate_audit_trail,
    generate_mindset_profile,
    generate_recommendation,
    hirability_breakdown,
)
from profiler.analysis.sentiment import analyze_sentiment
from profiler.analysis.themes import extract_themes, identify_risk_factors, merge_risk_flags
from profiler.analysis.topics import extract_topics
from profiler.analysis.traits import analyze_personality_traits
from profiler.models import CandidateProfile, Fragment
from profiler.services.base_client import BaseLLMClient

logger = logging.getLogger(__name__)


class EmptyFragmentsError(ValueError):
    """Raised when there is nothing to analyze."""


async def analyze_fragments(
    fragments: Sequence[Fragment],
    username: str,
    llm_client: BaseLLMClient,
) -> CandidateProfile:
    """
    Runs every analyzer over the fragments and combines them into one profile.

    The external opinion never fails: the client substitutes its fallback
    opinion on any error, so the result is always complete.

    Args:
        fragments (Sequence[Fragment]): Posts to analyze; must not be empty.
        username (str): Subject identifier.
        llm_client (BaseLLMClient): Source of the external opinion.
    Returns:
        CandidateProfile: The full structured profile.
    """
    if not fragments:
        raise EmptyFragmentsError("At least one fragment is required for analysis.")

    texts = [fragment.text for fragment in fragments]
    logger.info(f"Analyzing {len(texts)} fragments for '{username}'")

    opinion = await llm_client.generate_opinion(texts, username)

    sentiment = analyze_sentiment(texts)
    ideology = analyze_ideology(texts)
    local_risks = identify_risk_factors(texts)
    risk_factors = merge_risk_flags(local_risks, opinion.red_flags)

    breakdown = hirability_breakdown(sentiment, ideology, risk_factors, opinion)

    return CandidateProfile(
        username=username,
        display_name=username[:1].upper() + username[1:],
        fragments_analyzed=len(fragments),
        overall_sentiment=sentiment,
        ideology=ideology,
        mindset_profile=generate_mindset_profile(texts, sentiment, ideology, opinion),
        top_themes=extract_themes(texts),
        topic_analysis=extract_topics(texts),
        interest_analysis=analyze_interests(texts),
        personality_traits=analyze_personality_traits(texts),
        communication_patterns=analyze_communication_patterns(texts),
        risk_factors=risk_factors,
        recommendation=generate_recommendation(sentiment, local_risks, opinion),
        hirability=breakdown.final_score,
        audit_trail=generate_audit_trail(breakdown, local_risks, opinion),
        gemini_insights=opinion.insights,
        conversation_topics=opinion.conversation_topics,
        opinion_source=opinion.source,
    )
