import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from profiler import config
from profiler.constants import (
    DEFAULT_QUESTION_CATEGORIES,
    FALLBACK_OPINION,
    FALLBACK_QUESTIONS,
    OPINION_SYSTEM_PROMPT,
    QUESTIONS_SYSTEM_PROMPT,
)
from profiler.models import ExternalOpinion, InterviewQuestion, InterviewQuestionSet
from profiler.services.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)

QUESTION_COUNT = 4


def extract_json_object(raw: str) -> Optional[dict]:
    """
    Parses a JSON object from a model response, tolerating surrounding prose.

    Args:
        raw (str): Raw response text.
    Returns:
        Optional[dict]: The parsed object, or None when nothing parses to a dict.
    """
    raw = raw.strip()
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        match = re.search(r"\{[\s\S]*\}", raw)
        if not match:
            return None
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
    return parsed if isinstance(parsed, dict) else None


def classify_llm_error(error: BaseException) -> str:
    """
    Buckets a provider exception for logging: "quota", "safety" or "unknown".
    """
    message = str(error).lower()
    if "quota" in message or "limit" in message:
        return "quota"
    if "safety" in message:
        return "safety"
    return "unknown"


def fallback_opinion() -> ExternalOpinion:
    return ExternalOpinion.model_validate({**FALLBACK_OPINION, "source": "fallback"})


def fallback_questions() -> InterviewQuestionSet:
    return InterviewQuestionSet(
        questions=[
            InterviewQuestion(question=question, category=category)
            for question, category in zip(FALLBACK_QUESTIONS, DEFAULT_QUESTION_CATEGORIES)
        ],
        source="fallback",
    )


def parse_opinion(payload: Any) -> Optional[ExternalOpinion]:
    """
    Validates an opinion payload; `conversationTopics` must be present and a list.

    Other wrong-shaped fields are treated as absent rather than rejected.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("conversationTopics"), list):
        return None
    try:
        return ExternalOpinion.model_validate({**payload, "source": "llm"})
    except ValidationError as e:
        logger.error(f"Opinion payload failed validation: {e}")
        return None


def _is_string_list(value: Any, length: int) -> bool:
    return isinstance(value, list) and len(value) == length and all(isinstance(v, str) for v in value)


def parse_questions(payload: Any) -> Optional[InterviewQuestionSet]:
    """
    Validates a questions payload: `questions` must be a list of exactly 4 strings.

    Categories are taken from the payload only when they line up one-to-one.
    """
    if not isinstance(payload, dict) or not _is_string_list(payload.get("questions"), QUESTION_COUNT):
        return None

    categories = payload.get("categories")
    if not _is_string_list(categories, QUESTION_COUNT):
        categories = DEFAULT_QUESTION_CATEGORIES

    return InterviewQuestionSet(
        questions=[
            InterviewQuestion(question=question, category=category)
            for question, category in zip(payload["questions"], categories)
        ],
        source="llm",
    )


def build_opinion_message(texts: Sequence[str], username: str, sample_size: int) -> str:
    sample = "\n\n".join(texts[:sample_size])
    return "\n\n".join([
        f"Analyze the following posts from @{username} and provide insights for a hiring background check.",
        "--- POSTS ---",
        sample,
        "--- ANALYSIS ---",
        "Please return the JSON assessment described above.",
    ])


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _strings(value: Any) -> List[str]:
    return [v for v in value if isinstance(v, str)] if isinstance(value, list) else []


def _names(items: Any, *keys: str) -> List[str]:
    names = []
    for item in items if isinstance(items, list) else []:
        item = _as_dict(item)
        for key in keys:
            if isinstance(item.get(key), str):
                names.append(item[key])
                break
    return names


def build_questions_message(analysis: Dict[str, Any], username: str) -> str:
    """
    Summarises a (possibly partial) profile for the question prompt.

    Args:
        analysis (Dict[str, Any]): Serialized CandidateProfile as sent by a client.
        username (str): Subject identifier.
    Returns:
        str: User message for the LLM.
    """
    sentiment = _as_dict(analysis.get("overallSentiment"))
    mindset = _as_dict(analysis.get("mindsetProfile"))
    themes = _strings(analysis.get("topThemes"))
    interests = _names(analysis.get("interestAnalysis"), "category")
    traits = _names(analysis.get("personalityTraits"), "trait", "category")
    risks = _strings(analysis.get("riskFactors"))

    summary = [
        f"Based on the following candidate analysis for @{username}, generate {QUESTION_COUNT} interview questions.",
        "--- ANALYSIS SUMMARY ---",
        f"- Sentiment: {sentiment.get('positive', 0)}% positive, {sentiment.get('negative', 0)}% negative",
        f"- Mindset Profile: {mindset.get('category', 'Unknown')} ({mindset.get('description', 'No description')})",
        f"- Top Themes: {', '.join(themes) or 'Not specified'}",
        f"- Interest Areas: {', '.join(interests) or 'Not specified'}",
        f"- Personality Traits: {', '.join(traits) or 'Not specified'}",
        f"- Risk Factors: {', '.join(risks) or 'None detected'}",
        f"- Hirability Score: {analysis.get('hirability', 0)}%",
    ]
    return "\n".join(summary)


class BaseLLMClient(ABC):
    """
    Common behaviour for LLM-backed collaborators.

    Subclasses only implement `_complete`. Everything else (rate limiting,
    timeout, JSON extraction, validation and the fallback values) lives here, so
    callers always receive a well-formed result and never an exception.

    Attributes:
        name (str): Provider label used in log messages.
        rate_limiter (FixedWindowRateLimiter): Checked before every call.
        timeout (float): Seconds before an in-flight call is cancelled.
        sample_size (int): Maximum number of fragments sent for the opinion.
    """

    name: str = "LLM"

    def __init__(
        self,
        rate_limiter: Optional[FixedWindowRateLimiter] = None,
        timeout: Optional[float] = None,
        sample_size: Optional[int] = None,
    ):
        self.rate_limiter = rate_limiter or FixedWindowRateLimiter(
            config.RATE_LIMIT_WINDOW_SECONDS, config.RATE_LIMIT_MAX_REQUESTS
        )
        self.timeout = config.LLM_TIMEOUT_SECONDS if timeout is None else timeout
        self.sample_size = config.OPINION_SAMPLE_SIZE if sample_size is None else sample_size

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def _complete(self, system_prompt: str, user_message: str) -> str:
        """Sends one prompt to the provider and returns the raw response text."""

    async def _request_json(self, key: str, purpose: str, system_prompt: str, user_message: str) -> Optional[dict]:
        if not self.is_configured:
            logger.warning(f"{self.name} client is not configured, using fallback {purpose}")
            return None

        if not self.rate_limiter.allow(key):
            logger.warning(f"{self.name} rate limit exceeded for '{key}', using fallback {purpose}")
            return None

        # The provider call runs as its own task so that its cancellation can be
        # told apart from cancellation of the caller
        call = asyncio.ensure_future(self._complete(system_prompt, user_message))
        try:
            done, _ = await asyncio.wait({call}, timeout=self.timeout)
        except asyncio.CancelledError:
            call.cancel()
            raise

        if not done:
            call.cancel()
            logger.warning(f"{self.name} call timed out after {self.timeout}s, using fallback {purpose}")
            return None

        if call.cancelled():
            logger.warning(f"{self.name} call was cancelled, using fallback {purpose}")
            return None

        e = call.exception()
        if e is not None:
            category = classify_llm_error(e)
            if category == "quota":
                logger.warning(f"{self.name} quota exceeded, using fallback {purpose}: {e}")
            elif category == "safety":
                logger.warning(f"{self.name} safety filter triggered, using fallback {purpose}: {e}")
            else:
                logger.error(f"Unexpected {self.name} error, using fallback {purpose}: {e}")
            return None

        raw = call.result()
        payload = extract_json_object(raw) if isinstance(raw, str) else None
        if payload is None:
            logger.error(f"Failed to parse {self.name} response for {purpose}")
        return payload

    async def generate_opinion(self, texts: Sequence[str], username: str) -> ExternalOpinion:
        """
        Asks the LLM for a qualitative opinion of the candidate's posts.

        Args:
            texts (Sequence[str]): Fragment texts; only the first `sample_size` are sent.
            username (str): Subject identifier.
        Returns:
            ExternalOpinion: The validated opinion, or the fixed fallback opinion.
        """
        payload = await self._request_json(
            f"opinion_{username}",
            "opinion",
            OPINION_SYSTEM_PROMPT,
            build_opinion_message(list(texts), username, self.sample_size),
        )
        opinion = parse_opinion(payload) if payload is not None else None
        if opinion is None:
            return fallback_opinion()
        return opinion

    async def generate_interview_questions(self, analysis: Dict[str, Any], username: str) -> InterviewQuestionSet:
        """
        Asks the LLM for 4 interview questions tailored to a profile.

        Args:
            analysis (Dict[str, Any]): Serialized profile (camelCase keys), may be partial.
            username (str): Subject identifier.
        Returns:
            InterviewQuestionSet: 4 question/category pairs, generated or fallback.
        """
        payload = await self._request_json(
            f"questions_{username}",
            "interview questions",
            QUESTIONS_SYSTEM_PROMPT,
            build_questions_message(analysis, username),
        )
        questions = parse_questions(payload) if payload is not None else None
        if questions is None:
            return fallback_questions()
        return questions
