# 📄 File: app/modules/plant_journal/domain/models/journal.py
# 🧭 Purpose (Layman Explanation):
# Describes a gardener's own plant collection and what they write about it: which plants they
# own, a diary per plant, dated diary entries, and reminders ("water the basil on Friday").
# 🧪 Purpose (Technical Summary):
# Pydantic domain models for UserPlant, Diary, Log and CareWarning with ORM attribute mapping.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# plant_journal services and repositories

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserPlant(BaseModel):
    """Ownership of a catalog plant by a user. Each (user, plant) pair exists once."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    user_id: int
    plant_id: int


class Diary(BaseModel):
    """The single diary kept for one owned plant."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    user_plant_id: int
    title: str = Field(..., min_length=1, max_length=64)
    creation_date: Optional[datetime] = None


class Log(BaseModel):
    """A dated diary entry."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    diary_id: int
    log_date: Optional[datetime] = None
    log_description: str = Field(..., min_length=1, max_length=500)


class CareWarning(BaseModel):
    """A reminder scheduled for a user."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    location: str = Field(..., min_length=1, max_length=64)
    message: str = Field(..., min_length=1, max_length=255)
    reminder_date: datetime
