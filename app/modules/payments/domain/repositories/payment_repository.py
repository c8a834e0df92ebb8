# 📄 File: app/modules/payments/domain/repositories/payment_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how payment receipts are saved and found.
# 🧪 Purpose (Technical Summary):
# Repository interface for the Payment entity.
# 🔗 Dependencies:
# Payment domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# payment_service.py, app.main dependency overrides

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.shared.utils.pagination import PageParams

from ..models.payment import Payment


class PaymentRepository(ABC):
    """
    Repository interface for Payment entity data access operations.
    """

    @abstractmethod
    async def get_by_id(self, payment_id: int) -> Optional[Payment]:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[Payment], int]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Payment]:
        pass

    @abstractmethod
    async def add(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def update(self, payment: Payment) -> Optional[Payment]:
        pass

    @abstractmethod
    async def delete(self, payment_id: int) -> bool:
        pass
