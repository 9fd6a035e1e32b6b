from typing import Any, Dict

import requests

from codeguardian.integrations.provider_adapter import ProviderAdapter
from codeguardian.utils.logger import logger


REVIEW_BANNER = "**CodeGuardian AI Review:**"


class GitHub(ProviderAdapter):
    """GitHub REST client used by the review pipeline.

    Holds a single ``requests.Session`` for connection reuse; the session is
    safe to share between background runs because each call passes its own
    authorization header.
    """

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        timeout: int = 30,
        session: requests.Session = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @staticmethod
    def _headers(access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/vnd.github.v3+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def get_diff(self, diff_url: str) -> str:
        """Fetch the raw diff text of a pull request.

        Args:
            diff_url: The ``pull_request.diff_url`` from the webhook payload.

        Returns:
            str: The diff, possibly empty.

        Raises:
            requests.exceptions.RequestException: On transport errors or a
                non-2xx response.
        """
        logger.info(f"Fetching diff from {diff_url}")
        response = self.session.get(diff_url, timeout=self.timeout)
        response.raise_for_status()
        return response.text or ""

    def post_comment(
        self, repository_full_name: str, pr_number: int, body: str, access_token: str
    ) -> Dict[str, Any]:
        """Create an issue comment on a pull request.

        Raises:
            requests.exceptions.RequestException: On transport errors or a
                non-2xx response (404 missing PR, 401/403 bad token, 5xx).
        """
        url = f"{self.api_url}/repos/{repository_full_name}/issues/{pr_number}/comments"
        try:
            response = self.session.post(
                url,
                headers=self._headers(access_token),
                json={"body": body},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            error_msg = f"Failed to post comment to {repository_full_name}#{pr_number}: {e}"
            if getattr(e, "response", None) is not None:
                error_msg += f" - Response: {e.response.text}"
            logger.error(error_msg)
            raise

        logger.info(f"Comment posted to {repository_full_name}#{pr_number}.")
        return response.json()

    def post_review(
        self, repository_full_name: str, pr_number: int, review: str, access_token: str
    ) -> Dict[str, Any]:
        """Post review text under the CodeGuardian banner."""
        return self.post_comment(
            repository_full_name,
            pr_number,
            f"{REVIEW_BANNER}\n\n{review}",
            access_token,
        )

    def close(self):
        self.session.close()
