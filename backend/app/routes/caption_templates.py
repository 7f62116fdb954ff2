"""
Caption Template API Routes
Create private templates and list the templates visible to the acting user.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Session, col, or_, select

from app.auth import RequestIdentity, get_request_identity, require_user
from app.database import get_session
from app.models.caption_template import CaptionTemplate
from app.utils.envelope import Envelope, ItemList, item_list, ok

logger = logging.getLogger(__name__)

router = APIRouter()


class CaptionTemplateCreate(BaseModel):
    """Unknown keys (including is_system) are ignored."""

    name: str = Field(min_length=1)
    platform: Optional[str] = None
    tone: Optional[str] = None
    body: str = Field(min_length=1)


class CaptionTemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    name: str
    platform: Optional[str] = None
    tone: Optional[str] = None
    body: str
    is_system: bool
    created_at: datetime


class CaptionTemplateData(BaseModel):
    template: CaptionTemplateResponse


@router.post("/caption-templates", response_model=Envelope[CaptionTemplateData], status_code=201)
def create_template(
    request: CaptionTemplateCreate,
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """Create a template private to the acting user"""
    user = require_user(identity)
    template = CaptionTemplate(
        user_id=user.id,
        name=request.name,
        platform=request.platform,
        tone=request.tone,
        body=request.body,
        is_system=False,
    )
    session.add(template)
    session.commit()
    session.refresh(template)

    logger.info("Created caption template %s for user %s", template.id, user.id)
    return ok(template=template)


@router.get("/caption-templates", response_model=Envelope[ItemList[CaptionTemplateResponse]])
def list_templates(
    identity: RequestIdentity = Depends(get_request_identity),
    session: Session = Depends(get_session),
):
    """List the acting user's own templates plus all global templates (globals first)"""
    user = require_user(identity)
    templates = session.exec(
        select(CaptionTemplate)
        .where(or_(col(CaptionTemplate.user_id) == user.id, col(CaptionTemplate.user_id).is_(None)))
        .order_by(col(CaptionTemplate.user_id).is_not(None), CaptionTemplate.created_at, CaptionTemplate.id)
    ).all()
    return ok(**item_list(templates))
