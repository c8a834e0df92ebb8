# 📄 File: app/modules/plant_journal/presentation/api/v1/logs.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for diary entries.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /log CRUD endpoints over LogService.
#
# 🔗 Dependencies:
# - FastAPI router, LogService, get_current_user, pagination helpers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/log)

from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.modules.plant_journal.domain.services import LogService
from app.modules.plant_journal.presentation.api.schemas import LogRequest, LogResponse, LogUpdateRequest
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

logs_router = APIRouter()


@logs_router.get("", response_model=PageResponse[LogResponse], summary="List diary entries")
async def list_logs(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    log_service: LogService = Depends(),
):
    logs, total = await log_service.list_logs(params)
    return paginated_response(logs, total)


@logs_router.get("/diary/{diary_id}", response_model=List[LogResponse], summary="Entries of a diary")
async def logs_for_diary(
    diary_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    log_service: LogService = Depends(),
):
    return await log_service.logs_for_diary(diary_id)


@logs_router.get("/{log_id}", response_model=LogResponse, summary="Get diary entry")
async def get_log(
    log_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    log_service: LogService = Depends(),
):
    return await log_service.get_log(log_id)


@logs_router.post("", response_model=LogResponse, status_code=status.HTTP_201_CREATED, summary="Write diary entry")
async def create_log(
    request: LogRequest,
    current_user: CurrentUser = Depends(get_current_user),
    log_service: LogService = Depends(),
):
    return await log_service.create_log(request.diary_id, request.log_description)


@logs_router.put("/{log_id}", response_model=LogResponse, summary="Edit diary entry")
async def update_log(
    log_id: int,
    request: LogUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    log_service: LogService = Depends(),
):
    return await log_service.update_description(log_id, request.log_description)


@logs_router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete diary entry")
async def delete_log(
    log_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    log_service: LogService = Depends(),
) -> Response:
    await log_service.delete_log(log_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
