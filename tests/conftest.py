import asyncio
from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from profiler.models import Fragment
from profiler.services.base_client import BaseLLMClient

# Sample corpora used across the property tests
TECH_POSTS = [
    "Just shipped a major feature update. The team did amazing work on this. #tech #development",
    "Exploring the latest in machine learning. The possibilities are endless. #AI #ML",
    "Code review best practices: be kind, be thorough, be constructive. #coding #bestpractices",
    "Debugging is like detective work. Love solving complex problems. #programming #debugging",
    "Open source is the future. Contributing to the community matters. #opensource #community",
    "Performance optimization is an art. Shaved 40% off load time today. #performance #optimization",
    "Testing is not optional. Quality code requires discipline. #testing #quality",
    "Refactoring legacy code is challenging but rewarding. #refactoring #legacy",
    "API design matters. Good documentation saves everyone time. #API #documentation",
    "DevOps culture is essential for modern teams. #DevOps #culture",
]

BUSINESS_POSTS = [
    "Quarterly results exceeded expectations. Great work by the entire team. #business #results",
    "Market analysis shows strong growth potential in Q4. #market #growth",
    "Strategic partnerships are key to scaling. Excited about new collaborations. #partnerships #strategy",
    "Customer feedback is invaluable. Always listening to our users. #customers #feedback",
    "Efficiency improvements led to 25% cost reduction. #efficiency #costs",
    "Building a strong company culture is our top priority. #culture #leadership",
    "Investor confidence is high. Ready for the next phase of growth. #investment #growth",
]

NEGATIVE_POSTS = [
    "I hate this terrible job, everyone is toxic",
    "Another awful day. Drunk at the party again, who cares?",
    "The worst meeting ever!!! Absolutely pathetic and useless.",
]

SAMPLE_CORPORA = [TECH_POSTS, BUSINESS_POSTS, NEGATIVE_POSTS, ["Hello world"], ["?!"]]


class StubLLMClient(BaseLLMClient):
    """
    LLM client whose provider call returns canned responses (default "{}").
    """

    name = "Stub"

    def __init__(self, responses=None, error=None, delay=0.0, configured=True, **kwargs):
        super().__init__(**kwargs)
        self.responses = list(responses or [])
        self.error = error
        self.delay = delay
        self.configured = configured
        self.calls = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def _complete(self, system_prompt: str, user_message: str) -> str:
        self.calls.append((system_prompt, user_message))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else "{}"


def make_fragments(texts: List[str]) -> List[Fragment]:
    now = datetime(2024, 1, 31, tzinfo=timezone.utc)
    return [
        Fragment(text=text, created_at=now - timedelta(days=i), id=f"test_{i}")
        for i, text in enumerate(texts)
    ]


@pytest.fixture
def stub_client():
    return StubLLMClient()
