# 📄 File: app/modules/plant_catalog/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for the plant catalog: browsing and filtering plants, searching them by name,
# and letting administrators add, change and remove plants together with their photos.
# 🧪 Purpose (Technical Summary):
# Domain service for Plant CRUD, attribute filters, name search and image lifecycle
# (old images deleted on replacement and on plant removal).
# 🔗 Dependencies:
# Plant domain model, PlantRepository, ImageStorage, validators
# 🔄 Connected Modules / Calls From:
# app.modules.plant_catalog.presentation.api.v1.plants, match_service

import logging
from typing import List, Optional, Tuple

from fastapi import Depends, UploadFile

from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel
from app.shared.core.exceptions import NotFoundError, ValidationError
from app.shared.infrastructure.storage.image_storage import ImageStorage, get_image_storage
from app.shared.utils.pagination import PageParams
from app.shared.utils.validators import validate_text_content

from ..models.plant import Plant
from ..repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)

PLANT_NAME_MAX_LENGTH = 64
PLANT_DESCRIPTION_MAX_LENGTH = 4000


class PlantService:
    """
    Domain service for the plant catalog.
    """

    def __init__(
        self,
        plant_repository: PlantRepository = Depends(),
        image_storage: ImageStorage = Depends(get_image_storage),
    ):
        self.plant_repository = plant_repository
        self.image_storage = image_storage

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_plants(
        self,
        params: PageParams,
        exp: Optional[ExperienceLevel] = None,
        water: Optional[WaterLevel] = None,
        light: Optional[LightLevel] = None,
        plant_type: Optional[PlantType] = None,
    ) -> Tuple[List[Plant], int]:
        return await self.plant_repository.list_filtered(params, exp=exp, water=water, light=light,
                                                         plant_type=plant_type)

    async def search_plants(self, query: Optional[str]) -> List[Plant]:
        """Case-insensitive name search; a blank query matches nothing."""
        if not query or not query.strip():
            return []
        return await self.plant_repository.search_by_name(query)

    async def get_plant(self, plant_id: int) -> Plant:
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            raise NotFoundError("Plant not found", resource_type="plant", resource_id=plant_id)
        return plant

    # =========================================================================
    # COMMANDS
    # =========================================================================

    async def create_plant(
        self,
        admin_id: Optional[int],
        name: str,
        plant_type: PlantType,
        exp_suggested: ExperienceLevel,
        water_needs: WaterLevel,
        luminosity_needed: LightLevel,
        description: Optional[str] = None,
        image: Optional[UploadFile] = None,
    ) -> Plant:
        """
        Add a plant to the catalog, storing its photo when one is given.

        Raises:
            ValidationError: If the name or description are out of bounds
            FileStorageError: If the photo is not an acceptable image
        """
        self._validate_text(name, description)
        image_url = await self.image_storage.save(image) if image is not None else None

        plant = await self.plant_repository.add(
            Plant(
                admin_id=admin_id,
                name=name.strip(),
                type=plant_type,
                exp_suggested=exp_suggested,
                water_needs=water_needs,
                luminosity_needed=luminosity_needed,
                description=description,
                plant_image=image_url,
            )
        )
        logger.info(f"Plant created: {plant.id} ({plant.name})")
        return plant

    async def update_plant(
        self,
        plant_id: int,
        name: str,
        plant_type: PlantType,
        exp_suggested: ExperienceLevel,
        water_needs: WaterLevel,
        luminosity_needed: LightLevel,
        description: Optional[str] = None,
        image: Optional[UploadFile] = None,
    ) -> Plant:
        """
        Update a plant. A new photo replaces (and deletes) the previous one.

        Raises:
            NotFoundError: If the plant does not exist
        """
        plant = await self.get_plant(plant_id)
        self._validate_text(name, description)

        if image is not None:
            plant.plant_image = await self.image_storage.replace(plant.plant_image, image)

        plant.name = name.strip()
        plant.type = plant_type
        plant.exp_suggested = exp_suggested
        plant.water_needs = water_needs
        plant.luminosity_needed = luminosity_needed
        plant.description = description

        updated = await self.plant_repository.update(plant)
        if updated is None:
            raise NotFoundError(f"Plant with id {plant_id} not found.", resource_type="plant", resource_id=plant_id)
        return updated

    async def delete_plant(self, plant_id: int) -> None:
        plant = await self.get_plant(plant_id)
        await self.plant_repository.delete(plant_id)
        await self.image_storage.delete(plant.plant_image)
        logger.info(f"Plant deleted: {plant_id}")

    @staticmethod
    def _validate_text(name: str, description: Optional[str]) -> None:
        result = validate_text_content(name, "Name", max_length=PLANT_NAME_MAX_LENGTH)
        if not result.is_valid:
            raise ValidationError(result.first_error, field="name")
        if description is not None and len(description) > PLANT_DESCRIPTION_MAX_LENGTH:
            raise ValidationError("The description is too long.", field="description")
