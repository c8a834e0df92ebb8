# 📄 File: app/shared/core/security.py
# 🧭 Purpose (Layman Explanation):
# Handles the secret parts of logging in: scrambling passwords so they are never stored as typed,
# and issuing the signed "badges" (tokens) that prove who is making a request.
# 🧪 Purpose (Technical Summary):
# JWT issuance/validation with python-jose and bcrypt password hashing with passlib,
# wrapped in a cached SecurityManager plus module-level convenience functions.
# 🔗 Dependencies:
# python-jose, passlib[bcrypt], app.shared.config.settings, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies, user_management auth/user/admin services

"""
Security utilities for JWT validation and password hashing.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from ..config.settings import Settings, get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class TokenData(BaseModel):
    """Decoded access token claims."""
    person_id: int
    role: str = ROLE_USER
    role_paid: bool = False
    expires_at: datetime


class IssuedToken(BaseModel):
    token: str
    expires_at: datetime


class SecurityManager:
    """
    Centralized security manager for authentication.
    Handles JWT tokens and password hashing.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.algorithm = self.settings.JWT_ALGORITHM
        self.secret_key = self.settings.JWT_SECRET_KEY
        self.issuer = self.settings.JWT_ISSUER
        self.audience = self.settings.JWT_AUDIENCE
        self.access_token_expire_minutes = self.settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.settings.BCRYPT_ROUNDS,
        )

    # =========================================================================
    # PASSWORDS
    # =========================================================================

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            # unknown or corrupted hash format
            logger.warning("Stored password hash could not be parsed")
            return False

    # =========================================================================
    # TOKENS
    # =========================================================================

    def create_access_token(
        self,
        person_id: int,
        role: str,
        role_paid: bool = False,
        expires_delta: Optional[timedelta] = None
    ) -> IssuedToken:
        """
        Create a signed access token for a person.

        Args:
            person_id: Id of the user or admin
            role: ``admin`` or ``user``
            role_paid: Whether the user has a premium subscription
            expires_delta: Custom lifetime, defaults to the configured minutes

        Returns:
            IssuedToken: Encoded JWT and its expiry instant
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))
        claims = {
            "sub": str(person_id),
            "role": role,
            "rolePaid": role_paid,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "exp": expire,
            "type": "access",
        }
        token = jwt.encode(claims, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for person: {person_id}")
        return IssuedToken(token=token, expires_at=expire)

    def verify_token(self, token: str) -> TokenData:
        """
        Verify and decode a JWT access token.

        Raises:
            AuthenticationError: If the token is malformed, expired or lacks a subject
        """
        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise AuthenticationError("Token expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Could not validate credentials")

        if payload.get("type") != "access":
            raise AuthenticationError("Could not validate credentials")

        subject = payload.get("sub")
        if subject is None or not str(subject).isdigit():
            logger.warning("Token missing subject")
            raise AuthenticationError("Could not validate credentials")

        return TokenData(
            person_id=int(subject),
            role=payload.get("role", ROLE_USER),
            role_paid=bool(payload.get("rolePaid", False)),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


@lru_cache()
def get_security_manager() -> SecurityManager:
    """Get the process-wide security manager."""
    return SecurityManager()


# Convenience functions
def hash_password(password: str) -> str:
    return get_security_manager().hash_password(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return get_security_manager().verify_password(plain_password, hashed_password)
