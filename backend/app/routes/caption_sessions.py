"""
Caption Session API Routes
Create, update and list the acting user's caption sessions.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Session, select

from app.auth import RequestIdentity, get_request_identity, require_user
from app.database import get_session
from app.models.caption_session import CaptionSession
from app.utils.access_guards import resolve_owned_session
from app.utils.envelope import Envelope, ItemList, item_list, ok
from app.utils.patch import PatchRequest, apply_changes

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class CaptionSessionCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    core_message: Optional[str] = None
    target_audience: Optional[str] = None


class CaptionSessionUpdate(PatchRequest):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    core_message: Optional[str] = None
    target_audience: Optional[str] = None


class CaptionSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    core_message: Optional[str] = None
    target_audience: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CaptionSessionData(BaseModel):
    session: CaptionSessionResponse


# ============================================================================
# Caption Session Endpoints
# ============================================================================


@router.post("/caption-sessions", response_model=Envelope[CaptionSessionData], status_code=201)
def create_caption_session(
    request: CaptionSessionCreate,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """Create a caption session owned by the acting user"""
    user = require_user(identity)
    now = datetime.now(timezone.utc)
    caption_session = CaptionSession(
        user_id=user.id,
        name=request.name,
        description=request.description,
        core_message=request.core_message,
        target_audience=request.target_audience,
        created_at=now,
        updated_at=now,
    )
    session.add(caption_session)
    session.commit()
    session.refresh(caption_session)

    logger.info("Created caption session %s for user %s", caption_session.id, user.id)
    return ok(session=caption_session)


@router.patch("/caption-sessions/{session_id}", response_model=Envelope[CaptionSessionData])
def update_caption_session(
    session_id: str,
    request: CaptionSessionUpdate,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """
    Partially update a caption session.

    Only fields present in the body change; updated_at is always refreshed.
    """
    user = require_user(identity)
    caption_session = resolve_owned_session(session, session_id, user.id)

    apply_changes(caption_session, request.changes())
    caption_session.updated_at = datetime.now(timezone.utc)
    session.add(caption_session)
    session.commit()
    session.refresh(caption_session)

    return ok(session=caption_session)


@router.get("/caption-sessions", response_model=Envelope[ItemList[CaptionSessionResponse]])
def list_caption_sessions(
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """List every caption session owned by the acting user"""
    user = require_user(identity)
    sessions = session.exec(
        select(CaptionSession)
        .where(CaptionSession.user_id == user.id)
        .order_by(CaptionSession.created_at, CaptionSession.id)
    ).all()
    return ok(**item_list(sessions))
