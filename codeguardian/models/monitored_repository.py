from typing import Optional

from sqlmodel import Field

from codeguardian.models.base_model import BaseModel


class MonitoredRepository(BaseModel, table=True):
    __tablename__ = "monitored_repositories"

    id: Optional[int] = Field(default=None, primary_key=True, index=True)
    github_repo_id: str
    full_name: str = Field(index=True)
    owner_id: int = Field(foreign_key="users.id", index=True)
    webhook_id: Optional[str] = None
    is_active: bool = Field(default=True)

    def __repr__(self):
        return f"<MonitoredRepository(full_name={self.full_name}, owner_id={self.owner_id}, is_active={self.is_active})>"
