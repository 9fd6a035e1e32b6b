from typing import Optional

from sqlmodel import Field

from codeguardian.models.base_model import BaseModel


class User(BaseModel, table=True):
    """A GitHub user who signed in and activated repositories.

    ``access_token`` holds the Fernet-encrypted OAuth token; it is never
    stored in plaintext.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True, index=True)
    github_id: str = Field(index=True, unique=True)
    username: str
    avatar: Optional[str] = None
    access_token: str

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
