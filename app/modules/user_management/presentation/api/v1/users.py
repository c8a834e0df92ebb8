# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for gardener accounts: signing up, looking people up,
# changing preferences, password, details and profile picture, and removing accounts.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /user endpoints over UserService with bearer authentication, admin-only deletion,
# multipart registration/avatar upload and the shared pagination envelope.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File parameters
# - app.modules.user_management.domain.services.UserService
# - app.shared.core.dependencies (get_current_user, get_current_admin)
# - app.shared.utils.pagination
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/user)
# - Mobile app (registration, settings), back office (user list)

"""
Users API Endpoints

Endpoints:
- GET /: List users (paginated)
- GET /{user_id}: Get one user
- POST /: Register (multipart form, optional avatar)
- PUT /preferences/{user_id}: Update care preferences
- PUT /password/{user_id}: Change password
- PUT /{user_id}: Update username, location and contact
- PUT /image/{user_id}: Replace the avatar
- DELETE /{user_id}: Delete a user (admin only)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from app.modules.user_management.domain.services import UserService
from app.modules.user_management.presentation.api.schemas import (
    UserInfoRequest,
    UserPasswordRequest,
    UserPreferencesRequest,
    UserResponse,
)
from app.shared.core.care_levels import ExperienceLevel, LightLevel, WaterLevel, parse_form_value
from app.shared.core.dependencies import CurrentUser, get_current_admin, get_current_user
from app.shared.infrastructure.storage import ImageStorage
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response
from app.shared.utils.schemas import MessageResponse

logger = logging.getLogger(__name__)

# Create router
users_router = APIRouter()


@users_router.get(
    "",
    response_model=PageResponse[UserResponse],
    summary="List users",
    responses={204: {"description": "No users on this page"}},
)
async def list_users(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
):
    users, total = await user_service.list_users(params)
    return paginated_response(users, total)


@users_router.get("/{user_id}", response_model=UserResponse, summary="Get user")
async def get_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
):
    return await user_service.get_user(user_id)


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={409: {"description": "Email already in use"}},
)
async def register_user(
    username: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    contact: str = Form(...),
    location: str = Form(...),
    care_experience: str = Form(..., alias="careExperience"),
    water_availability: str = Form(..., alias="waterAvailability"),
    luminosity_availability: str = Form(..., alias="luminosityAvailability"),
    user_avatar: Optional[UploadFile] = File(None, alias="userAvatar"),
    user_service: UserService = Depends(),
):
    """
    Register a new gardener account.

    Care levels accept names (``Beginner``) or their ordinal (``0``).
    """
    user = await user_service.register_user(
        username=username,
        email=email,
        password=password,
        contact=contact,
        location=location,
        care_experience=parse_form_value(ExperienceLevel, care_experience, "careExperience"),
        water_availability=parse_form_value(WaterLevel, water_availability, "waterAvailability"),
        luminosity_availability=parse_form_value(LightLevel, luminosity_availability, "luminosityAvailability"),
        avatar=user_avatar if ImageStorage.has_file(user_avatar) else None,
    )
    return user


@users_router.put("/preferences/{user_id}", response_model=UserResponse, summary="Update care preferences")
async def update_preferences(
    user_id: int,
    request: UserPreferencesRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
):
    return await user_service.update_preferences(
        user_id,
        care_experience=request.care_experience,
        water_availability=request.water_availability,
        luminosity_availability=request.luminosity_availability,
    )


@users_router.put(
    "/password/{user_id}",
    response_model=MessageResponse,
    summary="Change password",
    responses={401: {"description": "Current password is incorrect"}},
)
async def change_password(
    user_id: int,
    request: UserPasswordRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
):
    await user_service.change_password(user_id, request.old_password, request.new_password)
    return MessageResponse(message="Password updated successfully.")


@users_router.put("/image/{user_id}", response_model=UserResponse, summary="Replace avatar")
async def update_avatar(
    user_id: int,
    image: UploadFile = File(...),
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
):
    return await user_service.update_avatar(user_id, image)


@users_router.put("/{user_id}", response_model=UserResponse, summary="Update account details")
async def update_user(
    user_id: int,
    request: UserInfoRequest,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
):
    return await user_service.update_information(user_id, request.username, request.location, request.contact)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user")
async def delete_user(
    user_id: int,
    current_admin: CurrentUser = Depends(get_current_admin),
    user_service: UserService = Depends(),
) -> Response:
    await user_service.delete_user(user_id)
    logger.info(f"User {user_id} deleted by admin {current_admin.person_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
