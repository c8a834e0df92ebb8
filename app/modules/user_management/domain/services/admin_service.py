# 📄 File: app/modules/user_management/domain/services/admin_service.py
# 🧭 Purpose (Layman Explanation):
# Rules for back-office administrator accounts: creating them, editing their name and phone
# number, and removing them.
# 🧪 Purpose (Technical Summary):
# Domain service for Admin CRUD with the same email uniqueness and credential rules as users.
# 🔗 Dependencies:
# Admin domain model, user/admin repositories, SecurityManager, validators
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.admins, plant_catalog task creation

import logging
from typing import List, Tuple

from fastapi import Depends

from app.shared.core.exceptions import DuplicateResourceError, NotFoundError, ValidationError
from app.shared.core.security import SecurityManager, get_security_manager
from app.shared.utils.pagination import PageParams
from app.shared.utils.validators import (
    USERNAME_MAX_LENGTH,
    normalize_email,
    validate_contact,
    validate_email_address,
    validate_password,
    validate_text_content,
)

from ..models.user import Admin
from ..repositories.user_repository import AdminRepository, UserRepository

logger = logging.getLogger(__name__)


class AdminService:
    """Domain service for administrator accounts."""

    def __init__(
        self,
        admin_repository: AdminRepository = Depends(),
        user_repository: UserRepository = Depends(),
        security_manager: SecurityManager = Depends(get_security_manager),
    ):
        self.admin_repository = admin_repository
        self.user_repository = user_repository
        self.security_manager = security_manager

    async def list_admins(self, params: PageParams) -> Tuple[List[Admin], int]:
        return await self.admin_repository.list_page(params)

    async def get_admin(self, admin_id: int) -> Admin:
        admin = await self.admin_repository.get_by_id(admin_id)
        if admin is None:
            raise NotFoundError(f"Admin with id {admin_id} not found.", resource_type="admin", resource_id=admin_id)
        return admin

    async def create_admin(self, username: str, email: str, password: str, contact: str) -> Admin:
        """
        Raises:
            ValidationError: If any field is invalid
            DuplicateResourceError: If the email belongs to another account
        """
        for result, field in (
            (validate_email_address(email), "email"),
            (validate_password(password), "password"),
            (validate_text_content(username, "Username", max_length=USERNAME_MAX_LENGTH), "username"),
            (validate_contact(contact), "contact"),
        ):
            if not result.is_valid:
                raise ValidationError(result.first_error, field=field)

        email = normalize_email(email)
        if await self.admin_repository.get_by_email(email) or await self.user_repository.get_by_email(email):
            raise DuplicateResourceError("Email already in use.", resource_type="admin", field="email")

        admin = await self.admin_repository.add(
            Admin(
                username=username.strip(),
                email=email,
                password_hash=self.security_manager.hash_password(password),
                contact=contact.strip(),
            )
        )
        logger.info(f"Admin created: {admin.id}")
        return admin

    async def update_admin(self, admin_id: int, username: str, contact: str) -> Admin:
        admin = await self.get_admin(admin_id)
        if not (username or "").strip() or not (contact or "").strip():
            raise ValidationError("New data can't be empty!")
        result = validate_contact(contact)
        if not result.is_valid:
            raise ValidationError(result.first_error, field="contact")

        admin.username = username.strip()
        admin.contact = contact.strip()
        updated = await self.admin_repository.update(admin)
        if updated is None:
            raise NotFoundError(f"Admin with id {admin_id} not found.", resource_type="admin", resource_id=admin_id)
        return updated

    async def delete_admin(self, admin_id: int) -> None:
        if not await self.admin_repository.delete(admin_id):
            raise NotFoundError(f"Admin with id {admin_id} not found.", resource_type="admin", resource_id=admin_id)
        logger.info(f"Admin deleted: {admin_id}")
