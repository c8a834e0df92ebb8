# 📄 File: app/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles logging in with email and password and handing out (or renewing) the badge
# that proves who you are on later requests.
# 🧪 Purpose (Technical Summary):
# Domain service implementing credential authentication across users and admins and
# JWT issuance/refresh through the shared SecurityManager.
# 🔗 Dependencies:
# Domain models, repositories, app.shared.core.security
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.auth

import logging
from datetime import datetime
from typing import Optional, Union

from fastapi import Depends
from pydantic import BaseModel

from app.shared.core.exceptions import AuthenticationError, NotFoundError
from app.shared.core.security import ROLE_ADMIN, SecurityManager, get_security_manager
from app.shared.utils.validators import normalize_email

from ..models.user import Admin, User
from ..repositories.user_repository import AdminRepository, UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


class AuthResult(BaseModel):
    """Outcome of a successful login or token refresh."""
    token: str
    person_id: int
    role: str
    role_paid: Optional[bool] = None
    expires_at: datetime


class AuthService:
    """
    Domain service for authentication.

    Business rules:
    - Users and admins share one email namespace; users are checked first
    - Only admins get the ``admin`` role; ``rolePaid`` is carried for users
    - A refreshed token is only issued while the account still exists
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        admin_repository: AdminRepository = Depends(),
        security_manager: SecurityManager = Depends(get_security_manager),
    ):
        self.user_repository = user_repository
        self.admin_repository = admin_repository
        self.security_manager = security_manager

    async def authenticate(self, email: str, password: str) -> AuthResult:
        """
        Authenticate a person with email and password.

        Raises:
            AuthenticationError: If no account matches or the password is wrong
        """
        email = normalize_email(email or "")
        person: Optional[Union[User, Admin]] = await self.user_repository.get_by_email(email)
        if person is None:
            person = await self.admin_repository.get_by_email(email)

        if person is None or not self.security_manager.verify_password(password, person.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"Login successful: {person.role.value} {person.id}")
        return self._issue(person)

    async def refresh(self, token: str) -> AuthResult:
        """
        Validate ``token`` and issue a fresh one for the same person.

        Raises:
            AuthenticationError: If the token is invalid or expired
            NotFoundError: If the account no longer exists
        """
        token_data = self.security_manager.verify_token(token)

        if token_data.role == ROLE_ADMIN:
            person = await self.admin_repository.get_by_id(token_data.person_id)
            if person is None:
                raise NotFoundError("Admin not found", resource_type="admin", resource_id=token_data.person_id)
        else:
            person = await self.user_repository.get_by_id(token_data.person_id)
            if person is None:
                raise NotFoundError("User not found", resource_type="user", resource_id=token_data.person_id)

        return self._issue(person)

    def _issue(self, person: Union[User, Admin]) -> AuthResult:
        role_paid = person.role_paid if isinstance(person, User) else None
        issued = self.security_manager.create_access_token(
            person_id=person.id,
            role=person.role.value,
            role_paid=bool(role_paid),
        )
        return AuthResult(
            token=issued.token,
            person_id=person.id,
            role=person.role.value,
            role_paid=role_paid,
            expires_at=issued.expires_at,
        )
