# 📄 File: app/modules/plant_journal/domain/services/diary_service.py
# 🧭 Purpose (Layman Explanation):
# Rules for plant diaries: every owned plant can have exactly one diary.
# 🧪 Purpose (Technical Summary):
# Domain service for Diary CRUD with user-plant existence and one-diary-per-plant checks.
# 🔗 Dependencies:
# DiaryRepository, UserPlantRepository
# 🔄 Connected Modules / Calls From:
# app.modules.plant_journal.presentation.api.v1.diaries

import logging
from typing import List, Tuple

from fastapi import Depends

from app.shared.core.exceptions import BusinessRuleError, ConflictError, NotFoundError
from app.shared.utils.pagination import PageParams

from ..models.journal import Diary
from ..repositories.journal_repository import DiaryRepository, UserPlantRepository

logger = logging.getLogger(__name__)


class DiaryService:
    """Domain service for plant diaries."""

    def __init__(
        self,
        diary_repository: DiaryRepository = Depends(),
        user_plant_repository: UserPlantRepository = Depends(),
    ):
        self.diary_repository = diary_repository
        self.user_plant_repository = user_plant_repository

    async def list_diaries(self, params: PageParams) -> Tuple[List[Diary], int]:
        return await self.diary_repository.list_page(params)

    async def get_diary(self, diary_id: int) -> Diary:
        diary = await self.diary_repository.get_by_id(diary_id)
        if diary is None:
            raise NotFoundError("Diary not Found", resource_type="diary", resource_id=diary_id)
        return diary

    async def diary_for_user_plant(self, user_plant_id: int) -> Diary:
        diary = await self.diary_repository.get_by_user_plant(user_plant_id)
        if diary is None:
            raise NotFoundError("No diaries found for this UserPlantId.", resource_type="diary")
        return diary

    async def create_diary(self, user_plant_id: int, title: str) -> Diary:
        """
        Raises:
            BusinessRuleError: If the owned plant does not exist
            ConflictError: If the owned plant already has a diary
        """
        if not await self.user_plant_repository.exists(user_plant_id):
            raise BusinessRuleError("This plant does not exist.", rule="diary_user_plant")
        if await self.diary_repository.get_by_user_plant(user_plant_id) is not None:
            raise ConflictError("A diary entry already exists for this UserPlant.")

        diary = await self.diary_repository.add(Diary(user_plant_id=user_plant_id, title=title.strip()))
        logger.info(f"Diary {diary.id} created for user plant {user_plant_id}")
        return diary

    async def update_title(self, diary_id: int, title: str) -> Diary:
        diary = await self.get_diary(diary_id)
        diary.title = title.strip()
        updated = await self.diary_repository.update(diary)
        if updated is None:
            raise NotFoundError("Diary not found or unable to update.", resource_type="diary", resource_id=diary_id)
        return updated

    async def delete_diary(self, diary_id: int) -> None:
        if not await self.diary_repository.delete(diary_id):
            raise NotFoundError("Diary not found or unable to delete.", resource_type="diary", resource_id=diary_id)
