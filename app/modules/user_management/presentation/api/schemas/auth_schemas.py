# 📄 File: app/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the login form and of the "you are logged in" answer with its badge (token).
#
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for /auth login and token refresh.
#
# 🔗 Dependencies:
# - app.shared.utils.schemas.CamelModel
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.auth

from datetime import datetime
from typing import Optional

from app.shared.utils.schemas import CamelModel


class LoginRequest(CamelModel):
    email: str
    password: str


class AuthResponse(CamelModel):
    """Returned by login and token refresh."""
    auth: bool = True
    token: str
    user_id: int
    role_paid: Optional[bool] = None
    expiration: datetime
