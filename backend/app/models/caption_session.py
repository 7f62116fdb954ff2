"""Caption session model: one campaign or post concept owned by a single user."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class CaptionSession(SQLModel, table=True):
    """Groups caption variants written for one campaign or post idea."""

    __tablename__ = "caption_session"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)  # owner, never reassigned
    name: str  # e.g. "New product launch promo"
    description: Optional[str] = None
    core_message: Optional[str] = None  # central idea/offer
    target_audience: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
