from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    '''
    Base model that serializes with camelCase keys for the presentation layer.
    '''
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Fragment(CamelModel):
    model_config = ConfigDict(frozen=True)

    text: str
    created_at: datetime
    id: str


class CategoryScore(CamelModel):
    category: str
    score: int = Field(ge=0, le=100)
    matched_keywords: List[str] = Field(default_factory=list)
    description: str = ""


class TraitScore(CategoryScore):
    evidence: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def trait(self) -> str:
        return self.category


class TopicScore(CamelModel):
    topic: str
    confidence: float
    frequency: int
    category: str


class SentimentSummary(CamelModel):
    positive: int
    neutral: int
    negative: int
    emotional_tone: str
    confidence: int
    emotional_keywords: List[str] = Field(default_factory=list)


class IdeologySummary(CamelModel):
    progressive: int
    conservative: int
    neutral: int


class CommunicationPatterns(CamelModel):
    writing_style: str
    formality: int
    engagement: int
    question_frequency: int
    exclamation_frequency: int
    hashtag_usage: int
    mention_frequency: int
    avg_tweet_length: int
    readability_score: int


class MindsetProfile(CamelModel):
    category: str
    description: str
    score: int


def _string_list(value: Any) -> List[str]:
    # Untrusted LLM output: anything that isn't a list is treated as absent
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class ExternalOpinion(CamelModel):
    '''
    Qualitative opinion returned by the LLM collaborator.

    Wrong-shaped fields are coerced to "absent" (empty list or string) instead of
    failing validation.
    '''
    conversation_topics: List[str] = Field(default_factory=list)
    professional_insights: List[str] = Field(default_factory=list)
    personality_traits: List[str] = Field(default_factory=list)
    red_flags: List[str] = Field(default_factory=list)
    communication_style: str = ""
    cultural_fit: str = ""
    insights: str = ""
    source: str = "llm"

    @field_validator(
        "conversation_topics", "professional_insights", "personality_traits", "red_flags",
        mode="before",
    )
    @classmethod
    def _lists(cls, value: Any) -> List[str]:
        return _string_list(value)

    @field_validator("communication_style", "cultural_fit", "insights", mode="before")
    @classmethod
    def _strings(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class InterviewQuestion(CamelModel):
    question: str
    category: str


class InterviewQuestionSet(CamelModel):
    questions: List[InterviewQuestion]
    source: str = "llm"


class HirabilityBreakdown(CamelModel):
    base: float = 50.0
    sentiment: float = 0.0
    ideology_balance: float = 0.0
    risk_penalty: float = 0.0
    cultural_fit: float = 0.0
    insights_bonus: float = 0.0
    raw_score: float = 0.0
    final_score: int = 0


class CandidateProfile(CamelModel):
    username: str
    display_name: str
    fragments_analyzed: int
    overall_sentiment: SentimentSummary
    ideology: IdeologySummary
    mindset_profile: MindsetProfile
    top_themes: List[str]
    topic_analysis: List[TopicScore]
    interest_analysis: List[CategoryScore]
    personality_traits: List[TraitScore]
    communication_patterns: CommunicationPatterns
    risk_factors: List[str]
    recommendation: str
    hirability: int = Field(ge=0, le=100)
    audit_trail: Dict[str, Any] = Field(default_factory=dict)
    gemini_insights: str = ""
    conversation_topics: List[str] = Field(default_factory=list)
    opinion_source: Optional[str] = None
