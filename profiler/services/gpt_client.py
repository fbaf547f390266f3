import logging
from typing import Optional

import openai

from profiler import config
from profiler.services.base_client import BaseLLMClient

logger = logging.getLogger(__name__)


class GPTClient(BaseLLMClient):
    """
    A client for interacting with the OpenAI API (GPT models).
    """

    name = "OpenAI"

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.model = model_name or config.OPENAI_MODEL
        api_key = api_key or config.OPENAI_API_KEY
        if not api_key:
            logger.warning("OPENAI_API_KEY not set. External opinions will use fallback values.")
            self.client = None
            return
        try:
            self.client = openai.AsyncOpenAI(api_key=api_key)
        except Exception as e:
            logger.error(f"Error configuring OpenAI API: {e}")
            self.client = None

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def _complete(self, system_prompt: str, user_message: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message}
            ]
        )
        return response.choices[0].message.content
