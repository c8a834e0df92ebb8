# 📄 File: app/modules/plant_journal/domain/services/warning_service.py
# 🧭 Purpose (Layman Explanation):
# Rules for care reminders a gardener schedules for themself.
# 🧪 Purpose (Technical Summary):
# Domain service for CareWarning CRUD; reminders belong to an existing user.
# 🔗 Dependencies:
# WarningRepository, UserRepository
# 🔄 Connected Modules / Calls From:
# app.modules.plant_journal.presentation.api.v1.warnings

import logging
from datetime import datetime
from typing import List

from fastapi import Depends

from app.modules.user_management.domain.repositories import UserRepository
from app.shared.core.exceptions import NotFoundError

from ..models.journal import CareWarning
from ..repositories.journal_repository import WarningRepository

logger = logging.getLogger(__name__)


class WarningService:
    def __init__(
        self,
        warning_repository: WarningRepository = Depends(),
        user_repository: UserRepository = Depends(),
    ):
        self.warning_repository = warning_repository
        self.user_repository = user_repository

    async def warnings_for_user(self, user_id: int) -> List[CareWarning]:
        return await self.warning_repository.list_by_user(user_id)

    async def get_warning(self, warning_id: int) -> CareWarning:
        warning = await self.warning_repository.get_by_id(warning_id)
        if warning is None:
            raise NotFoundError("Warning not found", resource_type="warning", resource_id=warning_id)
        return warning

    async def create_warning(self, user_id: int, location: str, message: str, reminder_date: datetime) -> CareWarning:
        await self._require_user(user_id)
        warning = await self.warning_repository.add(
            CareWarning(user_id=user_id, location=location.strip(), message=message.strip(),
                        reminder_date=reminder_date)
        )
        logger.info(f"Warning {warning.id} scheduled for user {user_id}")
        return warning

    async def update_warning(
        self, warning_id: int, user_id: int, location: str, message: str, reminder_date: datetime
    ) -> CareWarning:
        warning = await self.get_warning(warning_id)
        await self._require_user(user_id)
        warning.user_id = user_id
        warning.location = location.strip()
        warning.message = message.strip()
        warning.reminder_date = reminder_date
        updated = await self.warning_repository.update(warning)
        if updated is None:
            raise NotFoundError("Warning not found", resource_type="warning", resource_id=warning_id)
        return updated

    async def delete_warning(self, warning_id: int) -> None:
        if not await self.warning_repository.delete(warning_id):
            raise NotFoundError("Warning not found", resource_type="warning", resource_id=warning_id)

    async def _require_user(self, user_id: int) -> None:
        if not await self.user_repository.exists(user_id):
            raise NotFoundError(f"User with id {user_id} not found.", resource_type="user", resource_id=user_id)
