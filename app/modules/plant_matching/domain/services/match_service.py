# 📄 File: app/modules/plant_matching/domain/services/match_service.py
# 🧭 Purpose (Layman Explanation):
# Looks up a gardener and the whole plant catalog and asks the classifier which plants suit
# them perfectly, fairly, weakly or not at all.
# 🧪 Purpose (Technical Summary):
# Application-facing service resolving a user's CapabilityProfile and the catalog through the
# repositories, then delegating to the pure classifier. Unknown users yield empty buckets
# unless MATCH_STRICT_USER_LOOKUP is enabled.
# 🔗 Dependencies:
# UserRepository, PlantRepository, compatibility_classifier, Settings
# 🔄 Connected Modules / Calls From:
# app.modules.plant_matching.presentation.api.v1.matches

import logging

from fastapi import Depends

from app.modules.plant_catalog.domain.models import Plant
from app.modules.plant_catalog.domain.repositories import PlantRepository
from app.modules.user_management.domain.repositories import UserRepository
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import NotFoundError

from ..models.care_profile import MatchBuckets
from .compatibility_classifier import classify_items

logger = logging.getLogger(__name__)


class MatchService:
    """Matches the plant catalog against one user's care capabilities."""

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        plant_repository: PlantRepository = Depends(),
        settings: Settings = Depends(get_settings),
    ):
        self.user_repository = user_repository
        self.plant_repository = plant_repository
        self.strict_user_lookup = settings.MATCH_STRICT_USER_LOOKUP

    async def match_plants(self, user_id: int) -> MatchBuckets[Plant]:
        """
        Bucket every catalog plant for ``user_id``.

        Raises:
            NotFoundError: Only in strict mode, when the user does not exist
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            if self.strict_user_lookup:
                raise NotFoundError("User Not Found", resource_type="user", resource_id=user_id)
            logger.warning(f"Plant match requested for unknown user {user_id}; returning empty buckets")
            return MatchBuckets()

        catalog = await self.plant_repository.list_all()
        buckets = classify_items(user.capability_profile(), catalog, Plant.requirement_profile)
        logger.debug(
            f"Matched {len(catalog)} plants for user {user_id}: perfect={len(buckets.perfect)} "
            f"medium={len(buckets.medium)} weak={len(buckets.weak)} none={len(buckets.none)}"
        )
        return buckets
