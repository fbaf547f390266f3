import logging
from typing import Optional

from profiler import config
from profiler.services.base_client import BaseLLMClient
from profiler.services.gpt_client import GPTClient
from profiler.services.llm_client import GeminiClient
from profiler.services.ollama_client import OllamaClient

logger = logging.getLogger(__name__)

PROVIDERS = {
    "gemini": GeminiClient,
    "openai": GPTClient,
    "ollama": OllamaClient,
}


def create_llm_client(provider: Optional[str] = None) -> BaseLLMClient:
    """
    Builds the LLM client named by `provider` (defaults to LLM_PROVIDER).

    Unknown names fall back to Gemini.
    """
    provider = (provider or config.LLM_PROVIDER).strip().lower()
    client_cls = PROVIDERS.get(provider)
    if client_cls is None:
        logger.warning(f"Unknown LLM provider '{provider}', using Gemini")
        client_cls = GeminiClient
    return client_cls()
