# 📄 File: app/modules/plant_matching/presentation/api/v1/matches.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint a gardener's app calls to see which catalog plants suit them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoint GET /user/match/{user_id} returning the four classifier buckets with
# per-plant matchType labels.
#
# 🔗 Dependencies:
# - FastAPI router, MatchService, get_current_user
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/user)

import logging

from fastapi import APIRouter, Depends

from app.modules.plant_matching.domain.services.match_service import MatchService
from app.modules.plant_matching.presentation.api.schemas import PlantMatchResponse
from app.shared.core.dependencies import CurrentUser, get_current_user

logger = logging.getLogger(__name__)

matches_router = APIRouter()


@matches_router.get(
    "/match/{user_id}",
    response_model=PlantMatchResponse,
    summary="Match the plant catalog to a user",
    description="Buckets every plant by how many of its needs (experience, water, light) the user meets.",
)
async def match_plants(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    match_service: MatchService = Depends(),
):
    buckets = await match_service.match_plants(user_id)
    return PlantMatchResponse.from_buckets(buckets)
