import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Caption(SQLModel, table=True):
    __tablename__ = "caption"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    session_id: str = Field(foreign_key="caption_session.id", index=True)
    platform: Optional[str] = None  # "instagram", "linkedin", "twitter", etc.
    tone: Optional[str] = None  # "fun", "formal", "casual", etc.
    variant_label: Optional[str] = None  # "A", "B", "Carousel Slide 1", etc.
    caption_text: str
    hashtags: Optional[str] = None  # stored as given, plain string or JSON
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
