"""
Access Guards

Reusable lookups that resolve a row and enforce who may touch it:
- Sessions: owner only, owner mismatch reported as not found
- Templates: owner or global, owner mismatch reported as forbidden
- Captions: scoped to the session they were created under
"""

import logging

from sqlmodel import Session, select

from app.errors import ForbiddenError, NotFoundError
from app.models.caption import Caption
from app.models.caption_session import CaptionSession
from app.models.caption_template import CaptionTemplate

logger = logging.getLogger(__name__)


def resolve_owned_session(session: Session, session_id: str, user_id: str) -> CaptionSession:
    """
    Get a caption session owned by user_id or raise 404.

    A session owned by someone else is reported exactly like a missing one,
    so callers can never probe for other users' sessions.

    Args:
        session: Database session
        session_id: Caption session ID
        user_id: Acting user's ID

    Returns:
        CaptionSession

    Raises:
        NotFoundError: No session with this ID belongs to user_id
    """
    caption_session = session.exec(
        select(CaptionSession).where(CaptionSession.id == session_id, CaptionSession.user_id == user_id)
    ).first()

    if not caption_session:
        raise NotFoundError("Caption session not found.")

    return caption_session


def resolve_accessible_template(session: Session, template_id: str, user_id: str) -> CaptionTemplate:
    """
    Get a template the user may use, otherwise raise 404 or 403.

    Args:
        session: Database session
        template_id: Caption template ID
        user_id: Acting user's ID

    Returns:
        CaptionTemplate (global, or owned by user_id)

    Raises:
        NotFoundError: Template does not exist
        ForbiddenError: Template is private to another user
    """
    template = session.exec(select(CaptionTemplate).where(CaptionTemplate.id == template_id)).first()

    if not template:
        raise NotFoundError("Template not found.")

    if not template.is_global and template.user_id != user_id:
        logger.warning("User %s denied access to template %s", user_id, template_id)
        raise ForbiddenError("You do not have access to this template.")

    return template


def get_session_caption(session: Session, caption_id: str, session_id: str) -> Caption:
    """
    Get a caption by ID within one caption session or raise 404.

    A caption ID that exists under a different session is not found here.
    """
    caption = session.exec(select(Caption).where(Caption.id == caption_id, Caption.session_id == session_id)).first()

    if not caption:
        raise NotFoundError("Caption not found.")

    return caption
