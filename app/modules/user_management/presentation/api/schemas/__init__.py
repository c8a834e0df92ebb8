# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the request and response formats of the account endpoints.
#
# 🧪 Purpose (Technical Summary):
# API schemas package exports for user management endpoints.
#
# 🔗 Dependencies:
# - user_schemas, auth_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1

from .auth_schemas import AuthResponse, LoginRequest
from .user_schemas import (
    AdminCreateRequest,
    AdminResponse,
    AdminUpdateRequest,
    UserInfoRequest,
    UserPasswordRequest,
    UserPreferencesRequest,
    UserResponse,
)

__all__ = [
    "AdminCreateRequest",
    "AdminResponse",
    "AdminUpdateRequest",
    "AuthResponse",
    "LoginRequest",
    "UserInfoRequest",
    "UserPasswordRequest",
    "UserPreferencesRequest",
    "UserResponse",
]
