from abc import ABC, abstractmethod


class LLMInterface(ABC):
    @property
    @abstractmethod
    def model_name(self) -> str:
        """The model identifier requests are sent to."""
        pass

    @abstractmethod
    def generate_review(self, diff: str) -> str:
        """Generates review text for the given diff.

        Raises ReviewGenerationError when the model returns nothing usable;
        transport and API errors propagate unchanged.
        """
        pass
