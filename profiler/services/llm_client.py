import logging
from typing import Optional

import google.generativeai as genai

from profiler import config
from profiler.services.base_client import BaseLLMClient

logger = logging.getLogger(__name__)


class GeminiClient(BaseLLMClient):
    """
    A client for interacting with the Google Gemini API.

    Attributes:
        model: The configured Gemini GenerativeModel instance, or None when
            the API key is missing or configuration failed.
    """

    name = "Gemini"

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        api_key = api_key or config.GEMINI_API_KEY
        self.model = None
        if not api_key:
            logger.warning("GEMINI_API_KEY not set. External opinions will use fallback values.")
            return
        try:
            genai.configure(api_key=api_key)
            generation_config = genai.GenerationConfig(
                response_mime_type="application/json"
            )
            self.model = genai.GenerativeModel(
                model_name or config.GEMINI_MODEL,
                generation_config=generation_config
            )
        except Exception as e:
            logger.error(f"Error configuring Gemini API: {e}")
            self.model = None

    @property
    def is_configured(self) -> bool:
        return self.model is not None

    async def _complete(self, system_prompt: str, user_message: str) -> str:
        response = await self.model.generate_content_async([system_prompt, user_message])
        return response.text
