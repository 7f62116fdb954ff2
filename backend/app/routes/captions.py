"""
Caption API Routes
CRUD for caption variants, always scoped to one caption session owned by the
acting user.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import delete
from sqlmodel import Session, select

from app.auth import RequestIdentity, get_request_identity, require_user
from app.database import get_session
from app.errors import NotFoundError
from app.models.caption import Caption
from app.utils.access_guards import get_session_caption, resolve_accessible_template, resolve_owned_session
from app.utils.envelope import Envelope, ItemList, SuccessResponse, item_list, ok
from app.utils.patch import PatchRequest, apply_changes

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class CaptionCreate(BaseModel):
    platform: Optional[str] = None
    tone: Optional[str] = None
    variant_label: Optional[str] = None
    caption_text: str = Field(min_length=1)
    hashtags: Optional[str] = None
    template_id: Optional[str] = None  # access check only, body is not merged


class CaptionUpdate(PatchRequest):
    platform: Optional[str] = None
    tone: Optional[str] = None
    variant_label: Optional[str] = None
    caption_text: Optional[str] = Field(default=None, min_length=1)
    hashtags: Optional[str] = None


class CaptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    session_id: str
    platform: Optional[str] = None
    tone: Optional[str] = None
    variant_label: Optional[str] = None
    caption_text: str
    hashtags: Optional[str] = None
    created_at: datetime


class CaptionData(BaseModel):
    caption: CaptionResponse


# ============================================================================
# Caption Endpoints
# ============================================================================


@router.post(
    "/caption-sessions/{session_id}/captions",
    response_model=Envelope[CaptionData],
    status_code=201,
)
def create_caption(
    session_id: str,
    request: CaptionCreate,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """
    Add a caption variant to a session.

    When template_id is given the template must exist and be global or owned
    by the acting user.
    """
    user = require_user(identity)
    resolve_owned_session(session, session_id, user.id)

    if request.template_id:
        resolve_accessible_template(session, request.template_id, user.id)

    caption = Caption(
        session_id=session_id,
        platform=request.platform,
        tone=request.tone,
        variant_label=request.variant_label,
        caption_text=request.caption_text,
        hashtags=request.hashtags,
    )
    session.add(caption)
    session.commit()
    session.refresh(caption)

    logger.info("Created caption %s in session %s", caption.id, session_id)
    return ok(caption=caption)


@router.patch(
    "/caption-sessions/{session_id}/captions/{caption_id}",
    response_model=Envelope[CaptionData],
)
def update_caption(
    session_id: str,
    caption_id: str,
    request: CaptionUpdate,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """Partially update a caption within its session"""
    user = require_user(identity)
    resolve_owned_session(session, session_id, user.id)
    caption = get_session_caption(session, caption_id, session_id)

    apply_changes(caption, request.changes())
    session.add(caption)
    session.commit()
    session.refresh(caption)

    return ok(caption=caption)


@router.delete(
    "/caption-sessions/{session_id}/captions/{caption_id}",
    response_model=SuccessResponse,
)
def delete_caption(
    session_id: str,
    caption_id: str,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """Delete a caption; a caption from another session is not found"""
    user = require_user(identity)
    resolve_owned_session(session, session_id, user.id)

    result = session.exec(delete(Caption).where(Caption.id == caption_id, Caption.session_id == session_id))
    if result.rowcount == 0:
        raise NotFoundError("Caption not found.")
    session.commit()

    logger.info("Deleted caption %s from session %s", caption_id, session_id)
    return {"success": True}


@router.get(
    "/caption-sessions/{session_id}/captions",
    response_model=Envelope[ItemList[CaptionResponse]],
)
def list_captions(
    session_id: str,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """List every caption in one session"""
    user = require_user(identity)
    resolve_owned_session(session, session_id, user.id)

    captions = session.exec(
        select(Caption).where(Caption.session_id == session_id).order_by(Caption.created_at, Caption.id)
    ).all()
    return ok(**item_list(captions))
