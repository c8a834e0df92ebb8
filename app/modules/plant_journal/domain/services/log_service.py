# 📄 File: app/modules/plant_journal/domain/services/log_service.py
# 🧭 Purpose (Layman Explanation):
# Rules for diary entries: writing, correcting and deleting dated notes in a plant's diary.
# 🧪 Purpose (Technical Summary):
# Domain service for Log CRUD; entries are stamped with the current time on creation.
# 🔗 Dependencies:
# LogRepository, DiaryRepository
# 🔄 Connected Modules / Calls From:
# app.modules.plant_journal.presentation.api.v1.logs

import logging
from datetime import datetime, timezone
from typing import List, Tuple

from fastapi import Depends

from app.shared.core.exceptions import NotFoundError
from app.shared.utils.pagination import PageParams

from ..models.journal import Log
from ..repositories.journal_repository import DiaryRepository, LogRepository

logger = logging.getLogger(__name__)


class LogService:
    def __init__(self, log_repository: LogRepository = Depends(), diary_repository: DiaryRepository = Depends()):
        self.log_repository = log_repository
        self.diary_repository = diary_repository

    async def list_logs(self, params: PageParams) -> Tuple[List[Log], int]:
        return await self.log_repository.list_page(params)

    async def get_log(self, log_id: int) -> Log:
        log = await self.log_repository.get_by_id(log_id)
        if log is None:
            raise NotFoundError("Log not Found", resource_type="log", resource_id=log_id)
        return log

    async def logs_for_diary(self, diary_id: int) -> List[Log]:
        logs = await self.log_repository.list_by_diary(diary_id)
        if not logs:
            raise NotFoundError("No logs found for this DiaryId.", resource_type="diary", resource_id=diary_id)
        return logs

    async def create_log(self, diary_id: int, description: str) -> Log:
        if not await self.diary_repository.exists(diary_id):
            raise NotFoundError("Diary not found, unable to create log", resource_type="diary", resource_id=diary_id)
        log = await self.log_repository.add(
            Log(diary_id=diary_id, log_date=datetime.now(timezone.utc), log_description=description.strip())
        )
        logger.info(f"Log {log.id} added to diary {diary_id}")
        return log

    async def update_description(self, log_id: int, description: str) -> Log:
        log = await self.get_log(log_id)
        log.log_description = description.strip()
        updated = await self.log_repository.update(log)
        if updated is None:
            raise NotFoundError("Log not Found", resource_type="log", resource_id=log_id)
        return updated

    async def delete_log(self, log_id: int) -> None:
        if not await self.log_repository.delete(log_id):
            raise NotFoundError("Log not Found", resource_type="log", resource_id=log_id)
