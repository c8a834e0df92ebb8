# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines who the people in Leaflings are: gardeners (users) with their care preferences and
# premium status, and administrators who look after the plant catalog and ads.
# 🧪 Purpose (Technical Summary):
# Pydantic domain models for the Person hierarchy (User, Admin) with role enumeration,
# ORM attribute mapping (from_attributes) and the user's care-capability projection.
# 🔗 Dependencies:
# pydantic, app.shared.core.care_levels, app.modules.plant_matching.domain.models
# 🔄 Connected Modules / Calls From:
# user_service.py, admin_service.py, auth_service.py, match_service.py, repositories

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_matching.domain.models import CapabilityProfile
from app.shared.core.care_levels import ExperienceLevel, LightLevel, WaterLevel


class PersonRole(str, Enum):
    """Authorization role carried in access tokens."""
    USER = "user"
    ADMIN = "admin"


class Person(BaseModel):
    """
    Fields shared by every account that can log in.

    Emails are stored lower-cased; passwords only as bcrypt hashes.
    """

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., max_length=255)
    password_hash: str
    role: PersonRole = PersonRole.USER
    contact: Optional[str] = Field(None, max_length=9)
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == PersonRole.ADMIN


class User(Person):
    """
    A gardener. ``role_paid`` unlocks owning more than the free number of plants.
    """

    role: PersonRole = PersonRole.USER
    role_paid: bool = False
    location: str = Field(..., min_length=1, max_length=64)
    care_experience: ExperienceLevel = ExperienceLevel.BEGINNER
    water_availability: WaterLevel = WaterLevel.LOW
    luminosity_availability: LightLevel = LightLevel.LOW
    user_avatar: Optional[str] = Field(None, max_length=256)

    def capability_profile(self) -> CapabilityProfile:
        return CapabilityProfile(
            experience=self.care_experience,
            water=self.water_availability,
            luminosity=self.luminosity_availability,
        )


class Admin(Person):
    """Back-office administrator."""

    role: PersonRole = PersonRole.ADMIN
