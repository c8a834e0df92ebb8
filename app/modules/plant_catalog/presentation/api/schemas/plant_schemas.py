# 📄 File: app/modules/plant_catalog/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# The data formats for catalog plants and their care tasks as the apps see them.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas (camelCase) for /plant and /task endpoints. Care levels
# and plant types are returned as display names.
#
# 🔗 Dependencies:
# - app.shared.utils.schemas.CamelModel, app.shared.core.care_levels
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_catalog.presentation.api.v1.plants / tasks
# - app.modules.plant_matching.presentation.api.v1.matches

from typing import Optional

from pydantic import Field

from app.shared.core.care_levels import (
    ExperienceLevelField,
    LightLevelField,
    PlantTypeField,
    WaterLevelField,
)
from app.shared.utils.schemas import CamelModel


class PlantResponse(CamelModel):
    id: int
    admin_id: Optional[int] = None
    name: str
    type: PlantTypeField
    exp_suggested: ExperienceLevelField
    water_needs: WaterLevelField
    luminosity_needed: LightLevelField
    description: Optional[str] = None
    plant_image: Optional[str] = None


class TaskRequest(CamelModel):
    """Create/update body; ``adminId`` defaults to the calling admin."""
    admin_id: Optional[int] = None
    plant_id: int
    task_name: str = Field(..., max_length=48)
    task_description: str = Field(..., max_length=96)


class TaskResponse(CamelModel):
    id: int
    admin_id: Optional[int] = None
    plant_id: int
    task_name: str
    task_description: str
