from app.models.caption import Caption
from app.models.caption_session import CaptionSession
from app.models.caption_template import CaptionTemplate

__all__ = [
    "CaptionSession",
    "Caption",
    "CaptionTemplate",
]
