from codeguardian.core.review_pipeline import ReviewPipeline, RunOutcome
from codeguardian.events.task_runner import BackgroundTaskRunner
from codeguardian.exceptions import PipelineStepError
from codeguardian.models.webhook_event import WebhookEvent
from codeguardian.utils.logger import logger


class EventDispatcher:
    """Hands qualifying pull request events to the review pipeline in the background."""

    def __init__(self, pipeline: ReviewPipeline, runner: BackgroundTaskRunner = None):
        self.pipeline = pipeline
        self.runner = runner or BackgroundTaskRunner()

    def dispatch(self, event: WebhookEvent):
        """Schedules a review run for ``event`` without waiting for it."""
        logger.info(f"Dispatching review run for {event} (action: {event.action})")
        self.runner.spawn(self._process_event, event, name=f"review {event}")

    def _process_event(self, event: WebhookEvent) -> RunOutcome:
        """Runs the pipeline for one event; failures end this run only."""
        logger.info(f"[{event}] Starting review run.")
        try:
            outcome = self.pipeline.run(event)
        except PipelineStepError as e:
            logger.error(
                f"[{event}] Review run failed at step '{e.step}' "
                f"(repository={event.repository_full_name}, pr={event.number}): {e.cause}",
                exc_info=e.cause,
            )
            return RunOutcome.FAILED

        logger.info(f"[{event}] Review run finished: {outcome.value}")
        return outcome
