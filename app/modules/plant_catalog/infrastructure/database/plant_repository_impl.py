# 📄 File: app/modules/plant_catalog/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for the plant catalog: listing, filtering, searching,
# saving and removing plants and their care tasks.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of PlantRepository and PlantTaskRepository on top of the shared
# generic repository.
#
# 🔗 Dependencies:
# - app.modules.plant_catalog.domain.repositories (interfaces)
# - app.modules.plant_catalog.infrastructure.database.models (ORM models)
# - app.shared.infrastructure.database.repository (SQLAlchemyRepository)
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency overrides

import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select

from app.modules.plant_catalog.domain.models.plant import Plant, PlantTask
from app.modules.plant_catalog.domain.repositories.plant_repository import PlantRepository, PlantTaskRepository
from app.modules.plant_catalog.infrastructure.database.models import PlantModel, PlantTaskModel
from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.utils.pagination import PageParams

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(SQLAlchemyRepository[PlantModel, Plant], PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    model = PlantModel
    domain = Plant
    entity_name = "plant"

    async def list_filtered(
        self,
        params: PageParams,
        exp: Optional[ExperienceLevel] = None,
        water: Optional[WaterLevel] = None,
        light: Optional[LightLevel] = None,
        plant_type: Optional[PlantType] = None,
    ) -> Tuple[List[Plant], int]:
        criteria = []
        if exp is not None:
            criteria.append(PlantModel.exp_suggested == exp)
        if water is not None:
            criteria.append(PlantModel.water_needs == water)
        if light is not None:
            criteria.append(PlantModel.luminosity_needed == light)
        if plant_type is not None:
            criteria.append(PlantModel.type == plant_type)
        return await self.list_page(params, *criteria)

    async def search_by_name(self, query: str) -> List[Plant]:
        needle = query.strip().lower()
        stmt = (
            select(PlantModel)
            .where(func.lower(PlantModel.name).contains(needle, autoescape=True))
            .order_by(PlantModel.id)
        )
        return await self._fetch_all(stmt)


class PlantTaskRepositoryImpl(SQLAlchemyRepository[PlantTaskModel, PlantTask], PlantTaskRepository):
    """
    SQLAlchemy implementation of the PlantTaskRepository interface.
    """

    model = PlantTaskModel
    domain = PlantTask
    entity_name = "task"

    async def list_by_plant(self, plant_id: int) -> List[PlantTask]:
        stmt = select(PlantTaskModel).where(PlantTaskModel.plant_id == plant_id).order_by(PlantTaskModel.id)
        return await self._fetch_all(stmt)

    async def list_by_admin(self, admin_id: int) -> List[PlantTask]:
        stmt = select(PlantTaskModel).where(PlantTaskModel.admin_id == admin_id).order_by(PlantTaskModel.id)
        return await self._fetch_all(stmt)
