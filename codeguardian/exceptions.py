"""Exceptions raised across the webhook boundary and the review pipeline."""


class WebhookSignatureError(Exception):
    """The webhook request could not be authenticated."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def missing(cls) -> "WebhookSignatureError":
        return cls("No signature found")

    @classmethod
    def invalid(cls) -> "WebhookSignatureError":
        return cls("Invalid signature")


class MalformedPayloadError(Exception):
    """The verified webhook body is not a usable event envelope."""


class ReviewGenerationError(Exception):
    """The model did not produce usable review text."""


class CredentialError(Exception):
    """A stored credential could not be resolved or decrypted."""


class PipelineStepError(Exception):
    """A step of a review run failed; carries the step name and the cause."""

    def __init__(self, step: str, cause: Exception):
        super().__init__(f"{step} failed: {cause}")
        self.step = step
        self.cause = cause
