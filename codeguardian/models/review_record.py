from typing import Optional

from sqlmodel import Field

from codeguardian.models.base_model import BaseModel


class ReviewRecord(BaseModel, table=True):
    __tablename__ = "review_records"

    id: Optional[int] = Field(default=None, primary_key=True, index=True)
    repository_id: int = Field(foreign_key="monitored_repositories.id", index=True)
    pull_request_title: str
    pull_request_number: int = Field(index=True)
    pull_request_url: str
    review_content: str

    def __repr__(self):
        return f"<ReviewRecord(repository_id={self.repository_id}, pull_request_number={self.pull_request_number})>"
