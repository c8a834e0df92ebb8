# 📄 File: app/modules/advertising/infrastructure/database/ad_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for advertisements.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of AdRepository on top of the shared generic repository.
#
# 🔗 Dependencies:
# - app.modules.advertising.domain.repositories.AdRepository
# - app.shared.infrastructure.database.repository.SQLAlchemyRepository
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency overrides

from datetime import datetime
from typing import List

from sqlalchemy import select

from app.modules.advertising.domain.models.ad import Ad
from app.modules.advertising.domain.repositories.ad_repository import AdRepository
from app.modules.advertising.infrastructure.database.models import AdModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository


class AdRepositoryImpl(SQLAlchemyRepository[AdModel, Ad], AdRepository):
    """
    SQLAlchemy implementation of the AdRepository interface.
    """

    model = AdModel
    domain = Ad
    entity_name = "ad"

    async def list_showing(self, moment: datetime) -> List[Ad]:
        stmt = (
            select(AdModel)
            .where(
                AdModel.is_active.is_(True),
                AdModel.start_date <= moment,
                AdModel.end_date >= moment,
            )
            .order_by(AdModel.id)
        )
        return await self._fetch_all(stmt)

    async def count_all(self) -> int:
        return await self.count()

    async def count_active(self) -> int:
        return await self.count(AdModel.is_active.is_(True))
