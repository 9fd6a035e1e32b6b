"""
GitHub webhook payload parser.

Turns the verified raw body of a delivery into the event envelope and,
for reviewable actions, into a ``WebhookEvent``.
"""

import json
from typing import Any, Dict

from pydantic import ValidationError

from codeguardian.exceptions import MalformedPayloadError
from codeguardian.models.webhook_event import GitHubWebhookPayload, WebhookEvent


class GitHubWebhookParser:
    """Parses GitHub webhook bodies into structured events."""

    def parse_envelope(self, raw_body: bytes) -> GitHubWebhookPayload:
        """
        Decode and validate the delivery envelope.

        Args:
            raw_body: The exact bytes received, already signature-checked.

        Returns:
            The parsed envelope.

        Raises:
            MalformedPayloadError: If the body is not a JSON object envelope.
        """
        try:
            data = json.loads(raw_body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedPayloadError(f"Webhook body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedPayloadError("Webhook body must be a JSON object.")

        try:
            return GitHubWebhookPayload.model_validate(data)
        except ValidationError as e:
            raise MalformedPayloadError(f"Webhook envelope is invalid: {e}") from e

    def to_event(self, payload: GitHubWebhookPayload) -> WebhookEvent:
        """
        Extract the pull request fields the review pipeline needs.

        Raises:
            MalformedPayloadError: If the pull request or repository data is
                missing or incomplete.
        """
        pull_request: Dict[str, Any] = payload.pull_request or {}
        repository: Dict[str, Any] = payload.repository or {}
        try:
            return WebhookEvent(
                action=payload.action,
                repository_full_name=repository.get("full_name"),
                number=pull_request.get("number"),
                title=pull_request.get("title"),
                url=pull_request.get("html_url"),
                diff_url=pull_request.get("diff_url"),
            )
        except ValidationError as e:
            raise MalformedPayloadError(
                f"Pull request event is missing required fields: {e}"
            ) from e
