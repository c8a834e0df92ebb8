# 📄 File: app/modules/plant_journal/presentation/api/v1/diaries.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for plant diaries.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /diary CRUD endpoints over DiaryService.
#
# 🔗 Dependencies:
# - FastAPI router, DiaryService, get_current_user, pagination helpers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/diary)

from fastapi import APIRouter, Depends, Response, status

from app.modules.plant_journal.domain.services import DiaryService
from app.modules.plant_journal.presentation.api.schemas import DiaryRequest, DiaryResponse, DiaryUpdateRequest
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

diaries_router = APIRouter()


@diaries_router.get("", response_model=PageResponse[DiaryResponse], summary="List diaries")
async def list_diaries(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    diary_service: DiaryService = Depends(),
):
    diaries, total = await diary_service.list_diaries(params)
    return paginated_response(diaries, total)


@diaries_router.get("/userPlant/{user_plant_id}", response_model=DiaryResponse, summary="Diary of an owned plant")
async def diary_for_user_plant(
    user_plant_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    diary_service: DiaryService = Depends(),
):
    return await diary_service.diary_for_user_plant(user_plant_id)


@diaries_router.get("/{diary_id}", response_model=DiaryResponse, summary="Get diary")
async def get_diary(
    diary_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    diary_service: DiaryService = Depends(),
):
    return await diary_service.get_diary(diary_id)


@diaries_router.post(
    "",
    response_model=DiaryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create diary",
    responses={400: {"description": "Owned plant not found"}, 409: {"description": "Diary already exists"}},
)
async def create_diary(
    request: DiaryRequest,
    current_user: CurrentUser = Depends(get_current_user),
    diary_service: DiaryService = Depends(),
):
    return await diary_service.create_diary(request.user_plant_id, request.title)


@diaries_router.put("/{diary_id}", response_model=DiaryResponse, summary="Rename diary")
async def update_diary(
    diary_id: int,
    request: DiaryUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    diary_service: DiaryService = Depends(),
):
    return await diary_service.update_title(diary_id, request.title)


@diaries_router.delete("/{diary_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete diary")
async def delete_diary(
    diary_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    diary_service: DiaryService = Depends(),
) -> Response:
    await diary_service.delete_diary(diary_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
