# 📄 File: app/modules/advertising/domain/services/ad_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for advertisements: administrators upload banners with a showing period, and the
# app asks for a random banner that is currently running.
# 🧪 Purpose (Technical Summary):
# Domain service for Ad CRUD, window validation (end >= start), counts, random selection of a
# currently showing ad and banner image lifecycle.
# 🔗 Dependencies:
# AdRepository, AdminRepository, ImageStorage
# 🔄 Connected Modules / Calls From:
# app.modules.advertising.presentation.api.v1.ads

import logging
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from fastapi import Depends, UploadFile

from app.modules.user_management.domain.repositories import AdminRepository
from app.shared.core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from app.shared.infrastructure.storage.image_storage import ImageStorage, get_image_storage
from app.shared.utils.pagination import PageParams

from ..models.ad import Ad
from ..repositories.ad_repository import AdRepository

logger = logging.getLogger(__name__)


def to_utc_naive(moment: datetime) -> datetime:
    """Normalize to naive UTC; naive input is taken to be UTC already."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AdService:
    """Domain service for advertisements."""

    def __init__(
        self,
        ad_repository: AdRepository = Depends(),
        admin_repository: AdminRepository = Depends(),
        image_storage: ImageStorage = Depends(get_image_storage),
    ):
        self.ad_repository = ad_repository
        self.admin_repository = admin_repository
        self.image_storage = image_storage

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_ads(self, params: PageParams) -> Tuple[List[Ad], int]:
        return await self.ad_repository.list_page(params)

    async def get_ad(self, ad_id: int) -> Ad:
        ad = await self.ad_repository.get_by_id(ad_id)
        if ad is None:
            raise NotFoundError(f"Ad with ID number {ad_id} was not found.", resource_type="ad", resource_id=ad_id)
        return ad

    async def counts(self) -> Dict[str, int]:
        return {
            "total": await self.ad_repository.count_all(),
            "active": await self.ad_repository.count_active(),
        }

    async def random_showing_ad(self, moment: Optional[datetime] = None) -> Optional[Ad]:
        """Pick one active ad whose window contains ``moment`` (now by default)."""
        candidates = await self.ad_repository.list_showing(to_utc_naive(moment) if moment else utc_now())
        if not candidates:
            return None
        return random.choice(candidates)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    async def create_ad(
        self,
        admin_id: int,
        is_active: bool,
        start_date: datetime,
        end_date: datetime,
        ad_file: Optional[UploadFile] = None,
    ) -> Ad:
        """
        Raises:
            ValidationError: If the window ends before it starts
            BusinessRuleError: If the admin does not exist
        """
        start_date, end_date = self._window(start_date, end_date)
        await self._require_admin(admin_id)

        file_url = await self.image_storage.save(ad_file) if ad_file is not None else None
        ad = await self.ad_repository.add(
            Ad(admin_id=admin_id, is_active=is_active, start_date=start_date, end_date=end_date, ad_file=file_url)
        )
        logger.info(f"Ad {ad.id} created by admin {admin_id}")
        return ad

    async def update_ad(
        self,
        ad_id: int,
        admin_id: int,
        is_active: bool,
        start_date: datetime,
        end_date: datetime,
        ad_file: Optional[UploadFile] = None,
    ) -> Ad:
        ad = await self.get_ad(ad_id)
        start_date, end_date = self._window(start_date, end_date)
        await self._require_admin(admin_id)

        if ad_file is not None:
            ad.ad_file = await self.image_storage.replace(ad.ad_file, ad_file)

        ad.admin_id = admin_id
        ad.is_active = is_active
        ad.start_date = start_date
        ad.end_date = end_date
        updated = await self.ad_repository.update(ad)
        if updated is None:
            raise NotFoundError(f"Ad with ID number {ad_id} was not found.", resource_type="ad", resource_id=ad_id)
        return updated

    async def delete_ad(self, ad_id: int) -> None:
        ad = await self.get_ad(ad_id)
        await self.ad_repository.delete(ad_id)
        await self.image_storage.delete(ad.ad_file)
        logger.info(f"Ad deleted: {ad_id}")

    async def _require_admin(self, admin_id: int) -> None:
        if not await self.admin_repository.exists(admin_id):
            raise BusinessRuleError(f"Admin with id {admin_id} not found.", rule="ad_admin")

    @staticmethod
    def _window(start_date: datetime, end_date: datetime) -> Tuple[datetime, datetime]:
        start_date, end_date = to_utc_naive(start_date), to_utc_naive(end_date)
        if end_date < start_date:
            raise ValidationError("End date cannot be earlier than start date.", field="endDate")
        return start_date, end_date
