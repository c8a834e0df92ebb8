# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats for gardener and administrator accounts: what the apps
# send when signing up or editing an account and what they get back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas (camelCase on the wire) for the /user and /admin endpoints.
# Password hashes never appear in responses.
#
# 🔗 Dependencies:
# - pydantic, app.shared.utils.schemas.CamelModel
# - app.shared.core.care_levels (labelled care-level field types)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.users
# - app.modules.user_management.presentation.api.v1.admins

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.modules.user_management.domain.models import PersonRole
from app.shared.core.care_levels import ExperienceLevelField, LightLevelField, WaterLevelField
from app.shared.utils.schemas import CamelModel


# =============================================================================
# USERS
# =============================================================================

class UserResponse(CamelModel):
    """Public view of a gardener account."""
    id: int
    username: str
    email: str
    contact: Optional[str] = None
    role: PersonRole
    role_paid: bool
    location: str
    care_experience: ExperienceLevelField
    water_availability: WaterLevelField
    luminosity_availability: LightLevelField
    user_avatar: Optional[str] = None
    created_at: Optional[datetime] = None


class UserPreferencesRequest(CamelModel):
    care_experience: ExperienceLevelField
    water_availability: WaterLevelField
    luminosity_availability: LightLevelField


class UserPasswordRequest(CamelModel):
    old_password: str = Field(..., min_length=1)
    new_password: str


class UserInfoRequest(CamelModel):
    username: str = ""
    location: str = ""
    contact: str = ""


# =============================================================================
# ADMINS
# =============================================================================

class AdminResponse(CamelModel):
    id: int
    username: str
    email: str
    contact: Optional[str] = None
    role: PersonRole
    created_at: Optional[datetime] = None


class AdminCreateRequest(CamelModel):
    username: str
    email: str
    password: str
    contact: str


class AdminUpdateRequest(CamelModel):
    username: str = ""
    contact: str = ""
