# 📄 File: app/modules/plant_journal/presentation/api/schemas/journal_schemas.py
# 🧭 Purpose (Layman Explanation):
# The data formats for a gardener's plant collection, diaries, diary entries and reminders.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas (camelCase) for /userplants, /diary, /log and /warning.
#
# 🔗 Dependencies:
# - app.shared.utils.schemas.CamelModel
# - app.modules.plant_catalog.presentation.api.schemas.PlantResponse
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_journal.presentation.api.v1.*

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.modules.plant_catalog.presentation.api.schemas import PlantResponse
from app.shared.utils.schemas import CamelModel


# =============================================================================
# USER PLANTS
# =============================================================================

class UserPlantRequest(CamelModel):
    user_id: int
    plant_id: int


class UserPlantResponse(CamelModel):
    id: int
    user_id: int
    plant_id: int


class OwnedPlantResponse(CamelModel):
    """An owned plant with its catalog details."""
    id: int
    user_id: int
    plant: PlantResponse


# =============================================================================
# DIARIES & LOGS
# =============================================================================

class DiaryRequest(CamelModel):
    user_plant_id: int
    title: str = Field(..., min_length=1, max_length=64)


class DiaryUpdateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=64)


class DiaryResponse(CamelModel):
    id: int
    user_plant_id: int
    title: str
    creation_date: Optional[datetime] = None


class LogRequest(CamelModel):
    diary_id: int
    log_description: str = Field(..., min_length=1, max_length=500)


class LogUpdateRequest(CamelModel):
    log_description: str = Field(..., min_length=1, max_length=500)


class LogResponse(CamelModel):
    id: int
    diary_id: int
    log_date: Optional[datetime] = None
    log_description: str


# =============================================================================
# WARNINGS
# =============================================================================

class WarningRequest(CamelModel):
    user_id: int
    location: str = Field(..., min_length=1, max_length=64)
    message: str = Field(..., min_length=1, max_length=255)
    reminder_date: datetime


class WarningResponse(CamelModel):
    id: int
    user_id: int
    location: str
    message: str
    reminder_date: datetime
