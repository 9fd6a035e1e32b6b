from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    # Override dict method to handle datetime fields
    def dict(self, *args, **kwargs) -> Dict[str, Any]:
        data = self.model_dump(*args, **kwargs)

        # Convert datetime fields to ISO format
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.isoformat()
        return data
