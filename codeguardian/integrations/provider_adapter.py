from typing import Any, Dict


class ProviderAdapter:
    def get_diff(self, diff_url: str) -> str:
        """Abstract method to fetch the diff of a pull request."""
        raise NotImplementedError("Subclasses must implement get_diff method")

    def post_review(
        self, repository_full_name: str, pr_number: int, review: str, access_token: str
    ) -> Dict[str, Any]:
        """Abstract method to post a review on the pull request."""
        raise NotImplementedError("Subclasses must implement post_review method")

    def post_comment(
        self, repository_full_name: str, pr_number: int, body: str, access_token: str
    ) -> Dict[str, Any]:
        """Abstract method to post a plain comment on the pull request."""
        raise NotImplementedError("Subclasses must implement post_comment method")
