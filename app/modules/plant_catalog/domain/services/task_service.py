# 📄 File: app/modules/plant_catalog/domain/services/task_service.py
# 🧭 Purpose (Layman Explanation):
# Rules for the care tasks administrators attach to plants (e.g. "Water weekly").
# 🧪 Purpose (Technical Summary):
# Domain service for PlantTask CRUD; a task must reference an existing admin and plant.
# 🔗 Dependencies:
# PlantTask domain model, task/plant/admin repositories, validators
# 🔄 Connected Modules / Calls From:
# app.modules.plant_catalog.presentation.api.v1.tasks

import logging
from typing import List, Tuple

from fastapi import Depends

from app.modules.user_management.domain.repositories import AdminRepository
from app.shared.core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from app.shared.utils.pagination import PageParams
from app.shared.utils.validators import validate_text_content

from ..models.plant import PlantTask
from ..repositories.plant_repository import PlantRepository, PlantTaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Domain service for plant care tasks."""

    def __init__(
        self,
        task_repository: PlantTaskRepository = Depends(),
        plant_repository: PlantRepository = Depends(),
        admin_repository: AdminRepository = Depends(),
    ):
        self.task_repository = task_repository
        self.plant_repository = plant_repository
        self.admin_repository = admin_repository

    async def list_tasks(self, params: PageParams) -> Tuple[List[PlantTask], int]:
        return await self.task_repository.list_page(params)

    async def get_task(self, task_id: int) -> PlantTask:
        task = await self.task_repository.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found!", resource_type="task", resource_id=task_id)
        return task

    async def tasks_for_plant(self, plant_id: int) -> List[PlantTask]:
        tasks = await self.task_repository.list_by_plant(plant_id)
        if not tasks:
            raise NotFoundError("This plant doesn't have tasks.", resource_type="plant", resource_id=plant_id)
        return tasks

    async def tasks_by_admin(self, admin_id: int) -> List[PlantTask]:
        tasks = await self.task_repository.list_by_admin(admin_id)
        if not tasks:
            raise NotFoundError("This admin hasn't created tasks.", resource_type="admin", resource_id=admin_id)
        return tasks

    async def create_task(self, admin_id: int, plant_id: int, task_name: str, task_description: str) -> PlantTask:
        """
        Raises:
            BusinessRuleError: If the admin or the plant does not exist
        """
        await self._check_references(admin_id, plant_id)
        self._validate(task_name, task_description)
        task = await self.task_repository.add(
            PlantTask(
                admin_id=admin_id,
                plant_id=plant_id,
                task_name=task_name.strip(),
                task_description=task_description.strip(),
            )
        )
        logger.info(f"Task {task.id} created for plant {plant_id}")
        return task

    async def update_task(
        self, task_id: int, admin_id: int, plant_id: int, task_name: str, task_description: str
    ) -> PlantTask:
        task = await self.get_task(task_id)
        await self._check_references(admin_id, plant_id)
        self._validate(task_name, task_description)

        task.admin_id = admin_id
        task.plant_id = plant_id
        task.task_name = task_name.strip()
        task.task_description = task_description.strip()
        updated = await self.task_repository.update(task)
        if updated is None:
            raise NotFoundError("Task not found.", resource_type="task", resource_id=task_id)
        return updated

    async def delete_task(self, task_id: int) -> None:
        if not await self.task_repository.delete(task_id):
            raise NotFoundError("Task not found!", resource_type="task", resource_id=task_id)

    async def _check_references(self, admin_id: int, plant_id: int) -> None:
        if not await self.admin_repository.exists(admin_id) or not await self.plant_repository.exists(plant_id):
            raise BusinessRuleError(
                "Admin or Plant not found for the provided IDs.",
                rule="task_references",
                details={"adminId": admin_id, "plantId": plant_id},
            )

    @staticmethod
    def _validate(task_name: str, task_description: str) -> None:
        for result, field in (
            (validate_text_content(task_name, "Task name", max_length=48), "taskName"),
            (validate_text_content(task_description, "Task description", max_length=96), "taskDescription"),
        ):
            if not result.is_valid:
                raise ValidationError(result.first_error, field=field)
