# 📄 File: app/modules/user_management/presentation/api/v1/admins.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for managing back-office administrator accounts.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /admin CRUD endpoints over AdminService; creation is public, everything else
# requires an admin token.
#
# 🔗 Dependencies:
# - FastAPI router, AdminService, admin policy dependency, pagination helpers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/admin)

import logging

from fastapi import APIRouter, Depends, Response, status

from app.modules.user_management.domain.services import AdminService
from app.modules.user_management.presentation.api.schemas import (
    AdminCreateRequest,
    AdminResponse,
    AdminUpdateRequest,
)
from app.shared.core.dependencies import CurrentUser, get_current_admin
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

logger = logging.getLogger(__name__)

admins_router = APIRouter()


@admins_router.get("", response_model=PageResponse[AdminResponse], summary="List admins")
async def list_admins(
    params: PageParams = Depends(page_params()),
    current_admin: CurrentUser = Depends(get_current_admin),
    admin_service: AdminService = Depends(),
):
    admins, total = await admin_service.list_admins(params)
    return paginated_response(admins, total)


@admins_router.get("/{admin_id}", response_model=AdminResponse, summary="Get admin")
async def get_admin(
    admin_id: int,
    current_admin: CurrentUser = Depends(get_current_admin),
    admin_service: AdminService = Depends(),
):
    return await admin_service.get_admin(admin_id)


@admins_router.post("", response_model=AdminResponse, status_code=status.HTTP_201_CREATED, summary="Create admin")
async def create_admin(request: AdminCreateRequest, admin_service: AdminService = Depends()):
    return await admin_service.create_admin(request.username, request.email, request.password, request.contact)


@admins_router.put("/{admin_id}", response_model=AdminResponse, summary="Update admin")
async def update_admin(
    admin_id: int,
    request: AdminUpdateRequest,
    current_admin: CurrentUser = Depends(get_current_admin),
    admin_service: AdminService = Depends(),
):
    return await admin_service.update_admin(admin_id, request.username, request.contact)


@admins_router.delete("/{admin_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete admin")
async def delete_admin(
    admin_id: int,
    current_admin: CurrentUser = Depends(get_current_admin),
    admin_service: AdminService = Depends(),
) -> Response:
    await admin_service.delete_admin(admin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
