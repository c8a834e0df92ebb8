# 📄 File: app/modules/plant_catalog/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how plants and plant tasks are saved and found, without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for Plant and PlantTask entities; implementations live in the
# infrastructure layer and are bound through FastAPI dependency overrides.
# 🔗 Dependencies:
# Domain models (Plant, PlantTask), typing, abc
# 🔄 Connected Modules / Calls From:
# plant_service.py, task_service.py, match_service.py, plant_journal services

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel
from app.shared.utils.pagination import PageParams

from ..models.plant import Plant, PlantTask


class PlantRepository(ABC):
    """
    Repository interface for Plant entity data access operations.
    """

    @abstractmethod
    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        pass

    @abstractmethod
    async def exists(self, plant_id: int) -> bool:
        pass

    @abstractmethod
    async def list_all(self) -> List[Plant]:
        """Every plant in catalog (id) order."""
        pass

    @abstractmethod
    async def list_filtered(
        self,
        params: PageParams,
        exp: Optional[ExperienceLevel] = None,
        water: Optional[WaterLevel] = None,
        light: Optional[LightLevel] = None,
        plant_type: Optional[PlantType] = None,
    ) -> Tuple[List[Plant], int]:
        """
        Get one page of plants matching every given filter.

        Returns:
            The page and the total number of matching plants
        """
        pass

    @abstractmethod
    async def search_by_name(self, query: str) -> List[Plant]:
        """Case-insensitive substring search on the plant name."""
        pass

    @abstractmethod
    async def add(self, plant: Plant) -> Plant:
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Optional[Plant]:
        pass

    @abstractmethod
    async def delete(self, plant_id: int) -> bool:
        pass


class PlantTaskRepository(ABC):
    """
    Repository interface for PlantTask entity data access operations.
    """

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[PlantTask]:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[PlantTask], int]:
        pass

    @abstractmethod
    async def list_by_plant(self, plant_id: int) -> List[PlantTask]:
        pass

    @abstractmethod
    async def list_by_admin(self, admin_id: int) -> List[PlantTask]:
        pass

    @abstractmethod
    async def add(self, task: PlantTask) -> PlantTask:
        pass

    @abstractmethod
    async def update(self, task: PlantTask) -> Optional[PlantTask]:
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        pass
