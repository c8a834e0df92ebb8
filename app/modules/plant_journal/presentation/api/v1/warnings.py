# 📄 File: app/modules/plant_journal/presentation/api/v1/warnings.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the care reminders a gardener schedules.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /warning endpoints over WarningService; a user's reminders come back ordered by date.
#
# 🔗 Dependencies:
# - FastAPI router, WarningService, get_current_user
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/warning)

from fastapi import APIRouter, Depends, Response, status

from app.modules.plant_journal.domain.services import WarningService
from app.modules.plant_journal.presentation.api.schemas import WarningRequest, WarningResponse
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.utils.pagination import PageResponse, paginated_response

warnings_router = APIRouter()


@warnings_router.get(
    "/{user_id}",
    response_model=PageResponse[WarningResponse],
    summary="Reminders of a user",
    responses={204: {"description": "No reminders"}},
)
async def warnings_for_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    warning_service: WarningService = Depends(),
):
    warnings = await warning_service.warnings_for_user(user_id)
    return paginated_response(warnings, len(warnings))


@warnings_router.post("", response_model=WarningResponse, status_code=status.HTTP_201_CREATED,
                      summary="Schedule a reminder")
async def create_warning(
    request: WarningRequest,
    current_user: CurrentUser = Depends(get_current_user),
    warning_service: WarningService = Depends(),
):
    return await warning_service.create_warning(
        request.user_id, request.location, request.message, request.reminder_date
    )


@warnings_router.put("/{warning_id}", response_model=WarningResponse, summary="Update a reminder")
async def update_warning(
    warning_id: int,
    request: WarningRequest,
    current_user: CurrentUser = Depends(get_current_user),
    warning_service: WarningService = Depends(),
):
    return await warning_service.update_warning(
        warning_id, request.user_id, request.location, request.message, request.reminder_date
    )


@warnings_router.delete("/{warning_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a reminder")
async def delete_warning(
    warning_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    warning_service: WarningService = Depends(),
) -> Response:
    await warning_service.delete_warning(warning_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
