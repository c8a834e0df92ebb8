# 📄 File: app/modules/plant_journal/infrastructure/database/journal_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for the plant journal.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the journal repository interfaces on top of the shared
# generic repository; owned plants are joined with the catalog in one query.
#
# 🔗 Dependencies:
# - app.modules.plant_journal.domain.repositories (interfaces)
# - app.modules.plant_journal.infrastructure.database.models (ORM models)
# - app.modules.plant_catalog.infrastructure.database.models (PlantModel join)
# - app.shared.infrastructure.database.repository (SQLAlchemyRepository)
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency overrides

import logging
from typing import List, Optional, Tuple

from sqlalchemy import select

from app.modules.plant_catalog.domain.models import Plant
from app.modules.plant_catalog.infrastructure.database.models import PlantModel
from app.modules.plant_journal.domain.models.journal import CareWarning, Diary, Log, UserPlant
from app.modules.plant_journal.domain.repositories.journal_repository import (
    DiaryRepository,
    LogRepository,
    UserPlantRepository,
    WarningRepository,
)
from app.modules.plant_journal.infrastructure.database.models import (
    DiaryModel,
    LogModel,
    UserPlantModel,
    WarningModel,
)
from app.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class UserPlantRepositoryImpl(SQLAlchemyRepository[UserPlantModel, UserPlant], UserPlantRepository):
    model = UserPlantModel
    domain = UserPlant
    entity_name = "user plant"

    async def list_by_user(self, user_id: int) -> List[Tuple[UserPlant, Plant]]:
        stmt = (
            select(UserPlantModel, PlantModel)
            .join(PlantModel, PlantModel.id == UserPlantModel.plant_id)
            .where(UserPlantModel.user_id == user_id)
            .order_by(UserPlantModel.id)
        )
        async with self._guard("list"):
            result = await self._session.execute(stmt)
            return [
                (self._to_domain(user_plant), Plant.model_validate(plant))
                for user_plant, plant in result.all()
            ]

    async def list_by_plant(self, plant_id: int) -> List[UserPlant]:
        stmt = select(UserPlantModel).where(UserPlantModel.plant_id == plant_id).order_by(UserPlantModel.id)
        return await self._fetch_all(stmt)

    async def get_pair(self, user_id: int, plant_id: int) -> Optional[UserPlant]:
        stmt = select(UserPlantModel).where(
            UserPlantModel.user_id == user_id,
            UserPlantModel.plant_id == plant_id,
        )
        return await self._fetch_one(stmt)

    async def count_by_user(self, user_id: int) -> int:
        return await self.count(UserPlantModel.user_id == user_id)


class DiaryRepositoryImpl(SQLAlchemyRepository[DiaryModel, Diary], DiaryRepository):
    model = DiaryModel
    domain = Diary
    entity_name = "diary"

    async def get_by_user_plant(self, user_plant_id: int) -> Optional[Diary]:
        return await self._fetch_one(select(DiaryModel).where(DiaryModel.user_plant_id == user_plant_id))


class LogRepositoryImpl(SQLAlchemyRepository[LogModel, Log], LogRepository):
    model = LogModel
    domain = Log
    entity_name = "log"

    async def list_by_diary(self, diary_id: int) -> List[Log]:
        stmt = select(LogModel).where(LogModel.diary_id == diary_id).order_by(LogModel.log_date, LogModel.id)
        return await self._fetch_all(stmt)


class WarningRepositoryImpl(SQLAlchemyRepository[WarningModel, CareWarning], WarningRepository):
    model = WarningModel
    domain = CareWarning
    entity_name = "warning"

    async def list_by_user(self, user_id: int) -> List[CareWarning]:
        stmt = (
            select(WarningModel)
            .where(WarningModel.user_id == user_id)
            .order_by(WarningModel.reminder_date, WarningModel.id)
        )
        return await self._fetch_all(stmt)
