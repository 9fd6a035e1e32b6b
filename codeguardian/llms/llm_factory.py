import os

from codeguardian.config import settings
from codeguardian.llms.gemini import Gemini
from codeguardian.llms.litellm_provider import LiteLLMProvider
from codeguardian.llms.llm_interface import LLMInterface
from codeguardian.utils.logger import logger


def create_llm(name: str = None) -> LLMInterface:
    """
    Builds the configured language model client.

    Called once from the application lifespan; the instance is then passed
    to the review pipeline rather than looked up globally.
    """
    name = name or settings.LLM
    if name == "gemini":
        logger.info("Using Gemini LLM.")
        return Gemini(
            api_key=os.getenv("GEMINI_API_KEY"), model_name=settings.GEMINI_MODEL
        )
    elif name == "litellm":
        logger.info(f"Using LiteLLM with model {settings.LITELLM_MODEL}.")
        return LiteLLMProvider(model=settings.LITELLM_MODEL)
    else:
        raise NotImplementedError(f"LLM '{name}' not implemented.")
