import litellm

from codeguardian.exceptions import ReviewGenerationError
from codeguardian.llms.llm_interface import LLMInterface
from codeguardian.prompts.prompts import Prompts
from codeguardian.utils.logger import logger


class LiteLLMProvider(LLMInterface):
    def __init__(self, model: str, timeout: int = 120):
        self.model = model
        self.timeout = timeout

    @property
    def model_name(self) -> str:
        return self.model

    def generate_review(self, diff: str) -> str:
        prompt = Prompts.build_review_prompt(diff)

        logger.info(f"Generating code review from model: {self.model}...")
        response = litellm.completion(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            timeout=self.timeout,
        )

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError) as e:
            raise ReviewGenerationError(
                f"Model {self.model} returned a malformed response: {e}"
            ) from e

        if not isinstance(content, str) or not content.strip():
            raise ReviewGenerationError(f"Model {self.model} returned an empty response.")

        logger.info("Code review generated successfully.")
        return content.strip()
