# 📄 File: app/shared/core/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Checks the badge (token) that comes with each request and tells the endpoints who is calling
# and whether they are an administrator.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies for bearer-token authentication and the admin policy, exposing a
# CurrentUser principal built from validated JWT claims.
# 🔗 Dependencies:
# FastAPI security (HTTPBearer), app.shared.core.security, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Every protected router in app.modules.*.presentation.api.v1

import logging
from datetime import datetime
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.shared.core.exceptions import AuthenticationError, AuthorizationError
from app.shared.core.security import ROLE_ADMIN, SecurityManager, get_security_manager
from app.shared.utils.logging import bind_user

logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


class CurrentUser:
    """
    Authenticated principal resolved from the bearer token.
    """

    def __init__(self, person_id: int, role: str, role_paid: bool = False,
                 expires_at: Optional[datetime] = None):
        self.person_id = person_id
        self.role = role
        self.role_paid = role_paid
        self.expires_at = expires_at

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def __repr__(self) -> str:
        return f"CurrentUser(person_id={self.person_id}, role={self.role!r})"


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    security_manager: SecurityManager = Depends(get_security_manager),
) -> CurrentUser:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    token_data = security_manager.verify_token(credentials.credentials)
    bind_user(str(token_data.person_id))
    return CurrentUser(
        person_id=token_data.person_id,
        role=token_data.role,
        role_paid=token_data.role_paid,
        expires_at=token_data.expires_at,
    )


async def get_current_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """
    Admin policy: only tokens carrying the admin role pass.

    Raises:
        AuthorizationError: If the caller is not an admin
    """
    if not current_user.is_admin:
        logger.warning(f"Non-admin access attempt: {current_user.person_id}")
        raise AuthorizationError("Admin privileges required for this action", required_role=ROLE_ADMIN)
    return current_user
