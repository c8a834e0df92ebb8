# 📄 File: app/modules/plant_journal/presentation/api/v1/user_plants.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for a gardener's plant collection: see it, add a plant, remove a plant.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /userplants endpoints over UserPlantService; the free-tier limit surfaces as 403.
#
# 🔗 Dependencies:
# - FastAPI router, UserPlantService, get_current_user, pagination helpers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/userplants)

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.modules.plant_journal.domain.services import UserPlantService
from app.modules.plant_journal.presentation.api.schemas import (
    OwnedPlantResponse,
    UserPlantRequest,
    UserPlantResponse,
)
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

logger = logging.getLogger(__name__)

user_plants_router = APIRouter()


@user_plants_router.get("", response_model=PageResponse[UserPlantResponse], summary="List plant ownerships")
async def list_user_plants(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    user_plant_service: UserPlantService = Depends(),
):
    user_plants, total = await user_plant_service.list_user_plants(params)
    return paginated_response(user_plants, total)


@user_plants_router.get(
    "/plant/{plant_id}",
    response_model=List[UserPlantResponse],
    summary="Owners of a plant",
)
async def owners_of_plant(
    plant_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_plant_service: UserPlantService = Depends(),
):
    return await user_plant_service.owners_of_plant(plant_id)


@user_plants_router.get(
    "/{user_id}",
    response_model=List[OwnedPlantResponse],
    summary="Plants owned by a user",
    responses={204: {"description": "The user owns no plants"}, 404: {"description": "User not found"}},
)
async def plants_of_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_plant_service: UserPlantService = Depends(),
):
    owned = await user_plant_service.plants_of_user(user_id)
    if not owned:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [
        OwnedPlantResponse(id=user_plant.id, user_id=user_plant.user_id, plant=plant.model_dump())
        for user_plant, plant in owned
    ]


@user_plants_router.post(
    "",
    response_model=UserPlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant to a user",
    responses={403: {"description": "Free plant limit reached"}, 409: {"description": "Already owned"}},
)
async def add_plant_to_user(
    request: UserPlantRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_plant_service: UserPlantService = Depends(),
):
    return await user_plant_service.add_plant_to_user(request.user_id, request.plant_id)


@user_plants_router.delete("/{user_id}/{plant_id}", status_code=status.HTTP_204_NO_CONTENT,
                           summary="Remove a plant from a user")
async def remove_plant_from_user(
    user_id: int,
    plant_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_plant_service: UserPlantService = Depends(),
) -> Response:
    await user_plant_service.remove_plant_from_user(user_id, plant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
