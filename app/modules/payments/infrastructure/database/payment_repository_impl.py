# 📄 File: app/modules/payments/infrastructure/database/payment_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for payment receipts.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PaymentRepository on top of the shared generic repository.
#
# 🔗 Dependencies:
# - app.modules.payments.domain.repositories.PaymentRepository
# - app.shared.infrastructure.database.repository.SQLAlchemyRepository
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency overrides

from typing import List

from sqlalchemy import select

from app.modules.payments.domain.models.payment import Payment
from app.modules.payments.domain.repositories.payment_repository import PaymentRepository
from app.modules.payments.infrastructure.database.models import PaymentModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository


class PaymentRepositoryImpl(SQLAlchemyRepository[PaymentModel, Payment], PaymentRepository):
    model = PaymentModel
    domain = Payment
    entity_name = "payment"

    async def list_by_user(self, user_id: int) -> List[Payment]:
        stmt = (
            select(PaymentModel)
            .where(PaymentModel.user_id == user_id)
            .order_by(PaymentModel.creation_date, PaymentModel.id)
        )
        return await self._fetch_all(stmt)
