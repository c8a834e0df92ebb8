# 📄 File: app/modules/payments/domain/services/payment_service.py
# 🧭 Purpose (Layman Explanation):
# Rules for payment receipts: listing them, looking them up, and keeping them tied to real users.
# 🧪 Purpose (Technical Summary):
# Domain service for Payment CRUD with user existence checks.
# 🔗 Dependencies:
# PaymentRepository, UserRepository
# 🔄 Connected Modules / Calls From:
# app.modules.payments.presentation.api.v1.payments, checkout_service.py

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from fastapi import Depends

from app.modules.user_management.domain.repositories import UserRepository
from app.shared.core.exceptions import BusinessRuleError, NotFoundError
from app.shared.utils.pagination import PageParams

from ..models.payment import Payment
from ..repositories.payment_repository import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Domain service for payment records."""

    def __init__(
        self,
        payment_repository: PaymentRepository = Depends(),
        user_repository: UserRepository = Depends(),
    ):
        self.payment_repository = payment_repository
        self.user_repository = user_repository

    async def list_payments(self, params: PageParams) -> Tuple[List[Payment], int]:
        return await self.payment_repository.list_page(params)

    async def get_payment(self, payment_id: int) -> Payment:
        payment = await self.payment_repository.get_by_id(payment_id)
        if payment is None:
            raise NotFoundError("Payment not found!", resource_type="payment", resource_id=payment_id)
        return payment

    async def payments_of_user(self, user_id: int) -> List[Payment]:
        return await self.payment_repository.list_by_user(user_id)

    async def record_payment(self, user_id: int, title: str, creation_date: Optional[datetime] = None) -> Payment:
        """
        Raises:
            BusinessRuleError: If the user does not exist
        """
        await self._require_user(user_id)
        payment = await self.payment_repository.add(
            Payment(user_id=user_id, title=title, creation_date=creation_date or datetime.now(timezone.utc))
        )
        logger.info(f"Payment {payment.id} recorded for user {user_id}")
        return payment

    async def update_payment(
        self, payment_id: int, user_id: int, title: str, creation_date: Optional[datetime] = None
    ) -> Payment:
        payment = await self.get_payment(payment_id)
        await self._require_user(user_id)

        payment.user_id = user_id
        payment.title = title
        if creation_date is not None:
            payment.creation_date = creation_date
        updated = await self.payment_repository.update(payment)
        if updated is None:
            raise NotFoundError("Payment not found!", resource_type="payment", resource_id=payment_id)
        return updated

    async def delete_payment(self, payment_id: int) -> None:
        if not await self.payment_repository.delete(payment_id):
            raise NotFoundError("Payment not found!", resource_type="payment", resource_id=payment_id)
        logger.info(f"Payment deleted: {payment_id}")

    async def _require_user(self, user_id: int) -> None:
        if user_id < 1 or not await self.user_repository.exists(user_id):
            raise BusinessRuleError(f"User with id {user_id} not found.", rule="payment_user")
