# 📄 File: app/modules/plant_journal/domain/repositories/journal_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how owned plants, diaries, diary entries and reminders are saved and found.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for the plant journal aggregates; SQLAlchemy implementations live
# in the infrastructure layer.
# 🔗 Dependencies:
# Domain models, Plant (catalog) model, typing, abc
# 🔄 Connected Modules / Calls From:
# plant_journal domain services, app.main dependency overrides

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.modules.plant_catalog.domain.models import Plant
from app.shared.utils.pagination import PageParams

from ..models.journal import CareWarning, Diary, Log, UserPlant


class UserPlantRepository(ABC):
    """
    Repository interface for plant ownership.
    """

    @abstractmethod
    async def get_by_id(self, user_plant_id: int) -> Optional[UserPlant]:
        pass

    @abstractmethod
    async def exists(self, user_plant_id: int) -> bool:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[UserPlant], int]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Tuple[UserPlant, Plant]]:
        """Owned plants of a user together with their catalog entry."""
        pass

    @abstractmethod
    async def list_by_plant(self, plant_id: int) -> List[UserPlant]:
        pass

    @abstractmethod
    async def get_pair(self, user_id: int, plant_id: int) -> Optional[UserPlant]:
        pass

    @abstractmethod
    async def count_by_user(self, user_id: int) -> int:
        pass

    @abstractmethod
    async def add(self, user_plant: UserPlant) -> UserPlant:
        pass

    @abstractmethod
    async def delete(self, user_plant_id: int) -> bool:
        pass


class DiaryRepository(ABC):
    """
    Repository interface for diaries.
    """

    @abstractmethod
    async def get_by_id(self, diary_id: int) -> Optional[Diary]:
        pass

    @abstractmethod
    async def exists(self, diary_id: int) -> bool:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[Diary], int]:
        pass

    @abstractmethod
    async def get_by_user_plant(self, user_plant_id: int) -> Optional[Diary]:
        pass

    @abstractmethod
    async def add(self, diary: Diary) -> Diary:
        pass

    @abstractmethod
    async def update(self, diary: Diary) -> Optional[Diary]:
        pass

    @abstractmethod
    async def delete(self, diary_id: int) -> bool:
        pass


class LogRepository(ABC):
    """
    Repository interface for diary entries.
    """

    @abstractmethod
    async def get_by_id(self, log_id: int) -> Optional[Log]:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[Log], int]:
        pass

    @abstractmethod
    async def list_by_diary(self, diary_id: int) -> List[Log]:
        """Entries of a diary, oldest first."""
        pass

    @abstractmethod
    async def add(self, log: Log) -> Log:
        pass

    @abstractmethod
    async def update(self, log: Log) -> Optional[Log]:
        pass

    @abstractmethod
    async def delete(self, log_id: int) -> bool:
        pass


class WarningRepository(ABC):
    """
    Repository interface for care reminders.
    """

    @abstractmethod
    async def get_by_id(self, warning_id: int) -> Optional[CareWarning]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[CareWarning]:
        """Reminders of a user ordered by reminder date."""
        pass

    @abstractmethod
    async def add(self, warning: CareWarning) -> CareWarning:
        pass

    @abstractmethod
    async def update(self, warning: CareWarning) -> Optional[CareWarning]:
        pass

    @abstractmethod
    async def delete(self, warning_id: int) -> bool:
        pass
