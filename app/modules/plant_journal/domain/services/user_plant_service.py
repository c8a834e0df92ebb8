# 📄 File: app/modules/plant_journal/domain/services/user_plant_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for a gardener's own plant collection: adding a catalog plant to it (free accounts
# may keep only a few), listing it, and removing plants from it.
# 🧪 Purpose (Technical Summary):
# Domain service for UserPlant ownership enforcing referential checks, pair uniqueness and
# the free-tier plant limit (FREE_PLANT_LIMIT) for users without role_paid.
# 🔗 Dependencies:
# UserPlantRepository, UserRepository, PlantRepository, Settings
# 🔄 Connected Modules / Calls From:
# app.modules.plant_journal.presentation.api.v1.user_plants

import logging
from typing import List, Tuple

from fastapi import Depends

from app.modules.plant_catalog.domain.models import Plant
from app.modules.plant_catalog.domain.repositories import PlantRepository
from app.modules.user_management.domain.repositories import UserRepository
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import DuplicateResourceError, NonPaidUserError, NotFoundError
from app.shared.utils.pagination import PageParams

from ..models.journal import UserPlant
from ..repositories.journal_repository import UserPlantRepository

logger = logging.getLogger(__name__)


class UserPlantService:
    """
    Domain service for plant ownership.

    Business rules:
    - Both the user and the plant must exist
    - A user owns a given plant at most once
    - Users without ``role_paid`` own at most ``FREE_PLANT_LIMIT`` plants
    """

    def __init__(
        self,
        user_plant_repository: UserPlantRepository = Depends(),
        user_repository: UserRepository = Depends(),
        plant_repository: PlantRepository = Depends(),
        settings: Settings = Depends(get_settings),
    ):
        self.user_plant_repository = user_plant_repository
        self.user_repository = user_repository
        self.plant_repository = plant_repository
        self.free_plant_limit = settings.FREE_PLANT_LIMIT

    async def list_user_plants(self, params: PageParams) -> Tuple[List[UserPlant], int]:
        return await self.user_plant_repository.list_page(params)

    async def plants_of_user(self, user_id: int) -> List[Tuple[UserPlant, Plant]]:
        """
        Raises:
            NotFoundError: If the user does not exist
        """
        if not await self.user_repository.exists(user_id):
            raise NotFoundError(f"User with id {user_id} not found.", resource_type="user", resource_id=user_id)
        return await self.user_plant_repository.list_by_user(user_id)

    async def owners_of_plant(self, plant_id: int) -> List[UserPlant]:
        owners = await self.user_plant_repository.list_by_plant(plant_id)
        if not owners:
            raise NotFoundError("No users own this plant.", resource_type="plant", resource_id=plant_id)
        return owners

    async def add_plant_to_user(self, user_id: int, plant_id: int) -> UserPlant:
        """
        Raises:
            NotFoundError: If the user or plant does not exist
            DuplicateResourceError: If the user already owns the plant
            NonPaidUserError: If a free user already owns the maximum number of plants
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found.", resource_type="user", resource_id=user_id)
        if not await self.plant_repository.exists(plant_id):
            raise NotFoundError(f"Plant with id {plant_id} not found.", resource_type="plant", resource_id=plant_id)

        if await self.user_plant_repository.get_pair(user_id, plant_id) is not None:
            raise DuplicateResourceError("Plant already added to user", resource_type="user plant")

        if not user.role_paid:
            owned = await self.user_plant_repository.count_by_user(user_id)
            if owned >= self.free_plant_limit:
                logger.info(f"Free user {user_id} reached the plant limit ({self.free_plant_limit})")
                raise NonPaidUserError(
                    f"Free users can only have {self.free_plant_limit} plants associated",
                    limit=self.free_plant_limit,
                )

        user_plant = await self.user_plant_repository.add(UserPlant(user_id=user_id, plant_id=plant_id))
        logger.info(f"Plant {plant_id} added to user {user_id}")
        return user_plant

    async def remove_plant_from_user(self, user_id: int, plant_id: int) -> None:
        user_plant = await self.user_plant_repository.get_pair(user_id, plant_id)
        if user_plant is None:
            raise NotFoundError("This user does not own this plant.", resource_type="user plant")
        await self.user_plant_repository.delete(user_plant.id)
        logger.info(f"Plant {plant_id} removed from user {user_id}")
