"""Caption template model for reusable caption bodies."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class CaptionTemplate(SQLModel, table=True):
    """Reusable caption body, private to one user or global when user_id is null."""

    __tablename__ = "caption_template"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)  # None -> global/system template
    name: str
    platform: Optional[str] = None
    tone: Optional[str] = None
    body: str  # template text, may contain {placeholders}
    is_system: bool = Field(default=False)  # only set by seeding
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_global(self) -> bool:
        return self.user_id is None
