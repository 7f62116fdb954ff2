"""
Identity resolution.

Authentication happens upstream: a reverse proxy (oauth2-proxy or similar)
signs the user in and forwards the identity in request headers. This module
only reads that identity and fails closed when it is missing.

Contract:
    get_request_identity() only captures the forwarded headers, so FastAPI
    validates the request body first. Handlers then call require_user(),
    which returns a CurrentUser or raises UnauthorizedError before any
    database access.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from fastapi import Header

from app.errors import UnauthorizedError

logger = logging.getLogger(__name__)

DEFAULT_DEV_USER_ID = "dev-user"


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str] = None,
    x_auth_request_email: Optional[str] = None,
    x_forwarded_user: Optional[str] = None,
    x_forwarded_email: Optional[str] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """Return (user_id, email) from proxy headers, preferring X-Auth-Request-*."""
    user_id = _clean(x_auth_request_user) or _clean(x_forwarded_user)
    email = _clean(x_auth_request_email) or _clean(x_forwarded_email)
    return user_id, email


def is_dev_mode() -> bool:
    return os.getenv("DEV_MODE", "false").lower() in ("true", "1", "yes")


def identify_user(user_id: Optional[str], email: Optional[str] = None) -> CurrentUser:
    """Turn a resolved identity into a CurrentUser, or fail closed."""
    if user_id:
        return CurrentUser(id=user_id, email=email)

    if is_dev_mode():
        dev_user_id = os.getenv("DEV_USER_ID", DEFAULT_DEV_USER_ID)
        logger.debug("DEV_MODE active, acting as %s", dev_user_id)
        return CurrentUser(id=dev_user_id, email="dev@localhost", display_name="Development User")

    raise UnauthorizedError("You must be signed in to perform this action.")


@dataclass(frozen=True)
class RequestIdentity:
    user_id: Optional[str] = None
    email: Optional[str] = None


def get_request_identity(
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> RequestIdentity:
    """FastAPI dependency capturing the forwarded identity without rejecting it."""
    user_id, email = resolve_identity_from_headers(
        x_auth_request_user=x_auth_request_user,
        x_auth_request_email=x_auth_request_email,
        x_forwarded_user=x_forwarded_user,
        x_forwarded_email=x_forwarded_email,
    )
    return RequestIdentity(user_id=user_id, email=email)


def require_user(identity: RequestIdentity) -> CurrentUser:
    """Resolve the acting user inside a handler, after body validation."""
    return identify_user(identity.user_id, identity.email)
