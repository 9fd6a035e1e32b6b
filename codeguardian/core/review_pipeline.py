from enum import Enum

from codeguardian.config.settings import DEBUG_MODE
from codeguardian.core.publisher import Publisher
from codeguardian.core.steps import step
from codeguardian.integrations.provider_adapter import ProviderAdapter
from codeguardian.llms.llm_interface import LLMInterface
from codeguardian.models.webhook_event import WebhookEvent
from codeguardian.utils.logger import logger


class RunOutcome(str, Enum):
    COMPLETED = "completed"
    SKIPPED_EMPTY_DIFF = "skipped_empty_diff"
    SKIPPED_OVERSIZED_DIFF = "skipped_oversized_diff"
    SKIPPED_UNTRACKED_REPOSITORY = "skipped_untracked_repository"
    FAILED = "failed"


class ReviewPipeline:
    """Fetches a pull request diff, reviews it and publishes the result.

    ``run`` raises ``PipelineStepError`` for any upstream failure; skips are
    reported through the returned ``RunOutcome``.
    """

    def __init__(
        self,
        provider: ProviderAdapter,
        llm: LLMInterface,
        publisher: Publisher,
        max_diff_length: int = 4000,
        notify_on_oversized_diff: bool = False,
    ):
        self.provider = provider
        self.llm = llm
        self.publisher = publisher
        self.max_diff_length = max_diff_length
        self.notify_on_oversized_diff = notify_on_oversized_diff

    def run(self, event: WebhookEvent) -> RunOutcome:
        with step("fetch_diff"):
            diff = self.provider.get_diff(event.diff_url)

        if not diff:
            logger.info(f"[{event}] Diff is empty, skipping review.")
            return RunOutcome.SKIPPED_EMPTY_DIFF

        if len(diff) > self.max_diff_length:
            logger.info(
                f"[{event}] Diff is too large ({len(diff)} > {self.max_diff_length} characters), skipping review."
            )
            if self.notify_on_oversized_diff:
                self.publisher.notify_oversized(event)
            return RunOutcome.SKIPPED_OVERSIZED_DIFF

        if DEBUG_MODE:
            logger.debug(f"[{event}] Diff length: {len(diff)} characters")

        logger.info(f"[{event}] Sending diff to {self.llm.model_name} for review...")
        with step("generate_review"):
            review = self.llm.generate_review(diff)
        logger.info(f"[{event}] Review received from {self.llm.model_name}.")

        record = self.publisher.publish(event, review)
        if record is None:
            return RunOutcome.SKIPPED_UNTRACKED_REPOSITORY
        return RunOutcome.COMPLETED
