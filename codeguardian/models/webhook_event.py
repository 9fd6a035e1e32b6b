from typing import Optional

from pydantic import BaseModel, ConfigDict

REVIEWABLE_ACTIONS = ("opened", "reopened")


class GitHubWebhookPayload(BaseModel):
    """The subset of a GitHub ``pull_request`` delivery this service reads."""

    action: Optional[str] = None
    pull_request: Optional[dict] = None
    repository: Optional[dict] = None

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "action": "opened",
                "pull_request": {
                    "number": 1,
                    "title": "Example PR Title",
                    "html_url": "https://github.com/octocat/hello-world/pull/1",
                    "diff_url": "https://github.com/octocat/hello-world/pull/1.diff",
                },
                "repository": {"full_name": "octocat/hello-world"},
            }
        },
    )

    @property
    def is_reviewable(self) -> bool:
        return self.action in REVIEWABLE_ACTIONS


class WebhookEvent(BaseModel):
    """A pull request event that qualifies for review."""

    action: str
    repository_full_name: str
    number: int
    title: str
    url: str
    diff_url: str

    model_config = ConfigDict(frozen=True)

    def __str__(self):
        return f"{self.repository_full_name}#{self.number}"
