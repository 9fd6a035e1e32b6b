from google import genai

from codeguardian.exceptions import ReviewGenerationError
from codeguardian.llms.llm_interface import LLMInterface
from codeguardian.prompts.prompts import Prompts
from codeguardian.utils.logger import logger


class Gemini(LLMInterface):
    def __init__(self, api_key: str, model_name: str = "gemini-2.5-pro"):
        """Initializes the Gemini client and model configuration."""
        if not api_key:
            logger.error("GEMINI_API_KEY environment variable not set.")
            raise ValueError("GEMINI_API_KEY environment variable not set.")

        self.client = genai.Client(api_key=api_key)
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate_review(self, diff: str) -> str:
        """
        Generates a code review for a given diff using the Gemini model.

        Args:
            diff: The code diff to be reviewed.

        Returns:
            The review text, or the all-clear sentinel when nothing was found.

        Raises:
            ReviewGenerationError: If the response carries no text.
        """
        prompt = Prompts.build_review_prompt(diff)

        logger.info(f"Generating code review from Gemini model: {self.model_name}...")
        response = self.client.models.generate_content(
            model=f"models/{self.model_name}",
            contents=[prompt],
        )

        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            raise ReviewGenerationError(
                f"Gemini model {self.model_name} returned an empty response."
            )

        logger.info("Code review generated successfully.")
        return text.strip()
