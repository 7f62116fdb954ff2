# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from app.models.caption import Caption  # noqa: F401
from app.models.caption_session import CaptionSession  # noqa: F401
from app.models.caption_template import CaptionTemplate  # noqa: F401
