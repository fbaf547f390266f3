import logging
from typing import Optional

import ollama

from profiler import config
from profiler.services.base_client import BaseLLMClient

logger = logging.getLogger(__name__)


class OllamaClient(BaseLLMClient):
    """
    A client for interacting with a local Ollama instance.
    """

    name = "Ollama"

    def __init__(self, host: Optional[str] = None, model_name: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.model = model_name or config.OLLAMA_MODEL
        try:
            self.client = ollama.AsyncClient(host=host or config.OLLAMA_HOST)
        except Exception as e:
            logger.error(f"Error configuring Ollama client: {e}")
            self.client = None

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def _complete(self, system_prompt: str, user_message: str) -> str:
        # Connection errors surface to the base class, which logs them and falls back
        response = await self.client.chat(
            model=self.model,
            format="json",
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message}
            ]
        )
        return response['message']['content']
