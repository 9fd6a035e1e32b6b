from typing import Optional

from codeguardian.core.steps import step
from codeguardian.exceptions import CredentialError
from codeguardian.integrations.provider_adapter import ProviderAdapter
from codeguardian.models.monitored_repository import MonitoredRepository
from codeguardian.models.review_record import ReviewRecord
from codeguardian.models.webhook_event import WebhookEvent
from codeguardian.prompts.prompts import Prompts
from codeguardian.utils.encryption import CredentialCipher
from codeguardian.utils.logger import logger
from codeguardian.utils.review_store import ReviewStore


class Publisher:
    """Posts review text back to the pull request and records it.

    Each step raises on failure; nothing already done is undone and the
    comment post is never retried.
    """

    def __init__(
        self, store: ReviewStore, provider: ProviderAdapter, cipher: CredentialCipher
    ):
        self.store = store
        self.provider = provider
        self.cipher = cipher

    def find_repository(self, event: WebhookEvent) -> Optional[MonitoredRepository]:
        with step("lookup_repository"):
            repository = self.store.get_active_repository(event.repository_full_name)
        if repository is None:
            logger.info(
                f"[{event}] Repository {event.repository_full_name} is not monitored. Cannot post comment."
            )
        return repository

    def resolve_access_token(self, repository: MonitoredRepository) -> str:
        with step("resolve_credential"):
            owner = self.store.get_user(repository.owner_id)
            if owner is None:
                raise CredentialError(
                    f"Owner {repository.owner_id} of {repository.full_name} not found."
                )
            return self.cipher.decrypt(owner.access_token)

    def publish(self, event: WebhookEvent, review: str) -> Optional[ReviewRecord]:
        """Posts ``review`` on the pull request, then persists it.

        Returns:
            The saved record, or None when the repository is not monitored.
        """
        repository = self.find_repository(event)
        if repository is None:
            return None

        access_token = self.resolve_access_token(repository)

        logger.info(f"[{event}] Posting review comment to GitHub...")
        with step("post_comment"):
            self.provider.post_review(
                event.repository_full_name, event.number, review, access_token
            )
        logger.info(f"[{event}] Review posted successfully!")

        with step("save_review_record"):
            record = self.store.save_review_record(
                repository_id=repository.id,
                pull_request_title=event.title,
                pull_request_number=event.number,
                pull_request_url=event.url,
                review_content=review,
            )
        logger.info(f"[{event}] Review saved to database.")
        return record

    def notify_oversized(self, event: WebhookEvent) -> bool:
        """Tells the pull request it was skipped for size. Returns False if untracked."""
        repository = self.find_repository(event)
        if repository is None:
            return False

        access_token = self.resolve_access_token(repository)
        with step("post_comment"):
            self.provider.post_comment(
                event.repository_full_name,
                event.number,
                Prompts.OVERSIZED_DIFF_NOTICE,
                access_token,
            )
        logger.info(f"[{event}] Posted oversized diff notice.")
        return True
