# 📄 File: app/modules/plant_catalog/presentation/api/v1/tasks.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the care tasks attached to catalog plants.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /task endpoints over TaskService; reads need a token, writes need an admin token.
#
# 🔗 Dependencies:
# - FastAPI router, TaskService, auth dependencies, pagination helpers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/task)

import logging

from fastapi import APIRouter, Depends, Response, status

from app.modules.plant_catalog.domain.services import TaskService
from app.modules.plant_catalog.presentation.api.schemas import TaskRequest, TaskResponse
from app.shared.core.dependencies import CurrentUser, get_current_admin, get_current_user
from app.shared.utils.pagination import PageParams, PageResponse, page_params, paginated_response

logger = logging.getLogger(__name__)

tasks_router = APIRouter()


@tasks_router.get("", response_model=PageResponse[TaskResponse], summary="List tasks")
async def list_tasks(
    params: PageParams = Depends(page_params()),
    current_user: CurrentUser = Depends(get_current_user),
    task_service: TaskService = Depends(),
):
    tasks, total = await task_service.list_tasks(params)
    return paginated_response(tasks, total)


@tasks_router.get("/plant/{plant_id}", response_model=PageResponse[TaskResponse], summary="Tasks of a plant")
async def tasks_for_plant(
    plant_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    task_service: TaskService = Depends(),
):
    tasks = await task_service.tasks_for_plant(plant_id)
    return {"data": tasks, "total": len(tasks)}


@tasks_router.get("/admin/{admin_id}", response_model=PageResponse[TaskResponse], summary="Tasks created by an admin")
async def tasks_by_admin(
    admin_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    task_service: TaskService = Depends(),
):
    tasks = await task_service.tasks_by_admin(admin_id)
    return {"data": tasks, "total": len(tasks)}


@tasks_router.get("/{task_id}", response_model=TaskResponse, summary="Get task")
async def get_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    task_service: TaskService = Depends(),
):
    return await task_service.get_task(task_id)


@tasks_router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED, summary="Create task")
async def create_task(
    request: TaskRequest,
    current_admin: CurrentUser = Depends(get_current_admin),
    task_service: TaskService = Depends(),
):
    return await task_service.create_task(
        admin_id=request.admin_id or current_admin.person_id,
        plant_id=request.plant_id,
        task_name=request.task_name,
        task_description=request.task_description,
    )


@tasks_router.put("/{task_id}", response_model=TaskResponse, summary="Update task")
async def update_task(
    task_id: int,
    request: TaskRequest,
    current_admin: CurrentUser = Depends(get_current_admin),
    task_service: TaskService = Depends(),
):
    return await task_service.update_task(
        task_id,
        admin_id=request.admin_id or current_admin.person_id,
        plant_id=request.plant_id,
        task_name=request.task_name,
        task_description=request.task_description,
    )


@tasks_router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete task")
async def delete_task(
    task_id: int,
    current_admin: CurrentUser = Depends(get_current_admin),
    task_service: TaskService = Depends(),
) -> Response:
    await task_service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
