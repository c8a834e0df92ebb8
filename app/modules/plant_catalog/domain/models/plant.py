# 📄 File: app/modules/plant_catalog/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant in the catalog (its name, kind, how much care, water and light it needs)
# and the care tasks an administrator attaches to it.
# 🧪 Purpose (Technical Summary):
# Pydantic domain models for Plant and PlantTask with ORM attribute mapping and the plant's
# requirement-profile projection used by the compatibility classifier.
# 🔗 Dependencies:
# pydantic, app.shared.core.care_levels, app.modules.plant_matching.domain.models
# 🔄 Connected Modules / Calls From:
# plant_service.py, task_service.py, match_service.py, repositories

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_matching.domain.models import RequirementProfile
from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel


class Plant(BaseModel):
    """A catalog plant and its care requirements."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    admin_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=64)
    type: PlantType = PlantType.DECORATIVE
    exp_suggested: ExperienceLevel = ExperienceLevel.BEGINNER
    water_needs: WaterLevel = WaterLevel.LOW
    luminosity_needed: LightLevel = LightLevel.LOW
    description: Optional[str] = Field(None, max_length=4000)
    plant_image: Optional[str] = Field(None, max_length=256)

    def requirement_profile(self) -> RequirementProfile:
        return RequirementProfile(
            experience=self.exp_suggested,
            water=self.water_needs,
            luminosity=self.luminosity_needed,
        )


class PlantTask(BaseModel):
    """A recurring care task (watering, pruning...) suggested for a plant."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    admin_id: Optional[int] = None
    plant_id: int
    task_name: str = Field(..., min_length=1, max_length=48)
    task_description: str = Field(..., min_length=1, max_length=96)
