# 📄 File: app/modules/advertising/domain/repositories/ad_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how advertisements are saved and found.
# 🧪 Purpose (Technical Summary):
# Repository interface for the Ad entity.
# 🔗 Dependencies:
# Ad domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# ad_service.py, app.main dependency overrides

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from app.shared.utils.pagination import PageParams

from ..models.ad import Ad


class AdRepository(ABC):
    """
    Repository interface for Ad entity data access operations.
    """

    @abstractmethod
    async def get_by_id(self, ad_id: int) -> Optional[Ad]:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[Ad], int]:
        pass

    @abstractmethod
    async def list_showing(self, moment: datetime) -> List[Ad]:
        """Active ads whose window contains ``moment``."""
        pass

    @abstractmethod
    async def count_all(self) -> int:
        pass

    @abstractmethod
    async def count_active(self) -> int:
        pass

    @abstractmethod
    async def add(self, ad: Ad) -> Ad:
        pass

    @abstractmethod
    async def update(self, ad: Ad) -> Optional[Ad]:
        pass

    @abstractmethod
    async def delete(self, ad_id: int) -> bool:
        pass
