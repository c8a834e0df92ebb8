# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the rules for gardener accounts: signing up, changing preferences,
# password, contact details and profile picture, upgrading to premium and closing the account.
# 🧪 Purpose (Technical Summary):
# Domain service implementing user lifecycle business logic: registration validation,
# unique email enforcement across all accounts, bcrypt password handling and avatar management.
# 🔗 Dependencies:
# User domain model, user/admin repositories, SecurityManager, ImageStorage, validators
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.users, payments (premium upgrade)

import logging
from typing import List, Optional, Tuple

from fastapi import Depends, UploadFile

from app.shared.core.care_levels import ExperienceLevel, LightLevel, WaterLevel
from app.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    NotFoundError,
    ValidationError,
)
from app.shared.core.security import SecurityManager, get_security_manager
from app.shared.infrastructure.storage.image_storage import ImageStorage, get_image_storage
from app.shared.utils.pagination import PageParams
from app.shared.utils.validators import (
    LOCATION_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    normalize_email,
    validate_contact,
    validate_email_address,
    validate_password,
    validate_text_content,
)

from ..models.user import User
from ..repositories.user_repository import AdminRepository, UserRepository

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already in use."


class UserService:
    """
    Domain service for user management business logic.

    IMPORTANT: This is a domain service class used for business logic only.
    Always return schemas from API endpoints, not domain service instances.
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        admin_repository: AdminRepository = Depends(),
        security_manager: SecurityManager = Depends(get_security_manager),
        image_storage: ImageStorage = Depends(get_image_storage),
    ):
        self.user_repository = user_repository
        self.admin_repository = admin_repository
        self.security_manager = security_manager
        self.image_storage = image_storage

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_users(self, params: PageParams) -> Tuple[List[User], int]:
        return await self.user_repository.list_page(params)

    async def get_user(self, user_id: int) -> User:
        """
        Raises:
            NotFoundError: If no user has this id
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found.", resource_type="user", resource_id=user_id)
        return user

    # =========================================================================
    # USER CREATION AND LIFECYCLE
    # =========================================================================

    async def register_user(
        self,
        username: str,
        email: str,
        password: str,
        contact: str,
        location: str,
        care_experience: ExperienceLevel,
        water_availability: WaterLevel,
        luminosity_availability: LightLevel,
        avatar: Optional[UploadFile] = None,
    ) -> User:
        """
        Create a new user with business rule validation.

        Raises:
            ValidationError: If email, password, contact, username or location are invalid
            DuplicateResourceError: If the email belongs to another account
        """
        self._require(validate_email_address(email), "email")
        self._require(validate_password(password), "password")
        self._require(validate_text_content(username, "Username", max_length=USERNAME_MAX_LENGTH), "username")
        self._require(validate_text_content(location, "Location", max_length=LOCATION_MAX_LENGTH), "location")
        self._require(validate_contact(contact), "contact")

        email = normalize_email(email)
        await self.ensure_email_available(email)

        avatar_url = await self.image_storage.save(avatar) if avatar is not None else None

        user = User(
            username=username.strip(),
            email=email,
            password_hash=self.security_manager.hash_password(password),
            contact=contact.strip(),
            location=location.strip(),
            care_experience=care_experience,
            water_availability=water_availability,
            luminosity_availability=luminosity_availability,
            user_avatar=avatar_url,
        )
        try:
            created = await self.user_repository.add(user)
        except DuplicateResourceError:
            await self.image_storage.delete(avatar_url)
            raise DuplicateResourceError(EMAIL_IN_USE, resource_type="user", field="email")

        logger.info(f"User registered: {created.id}")
        return created

    async def ensure_email_available(self, email: str) -> None:
        if await self.user_repository.get_by_email(email) or await self.admin_repository.get_by_email(email):
            logger.warning(f"Registration with an email already in use: {email}")
            raise DuplicateResourceError(EMAIL_IN_USE, field="email")

    async def update_preferences(
        self,
        user_id: int,
        care_experience: ExperienceLevel,
        water_availability: WaterLevel,
        luminosity_availability: LightLevel,
    ) -> User:
        user = await self.get_user(user_id)
        user.care_experience = care_experience
        user.water_availability = water_availability
        user.luminosity_availability = luminosity_availability
        return await self._save(user)

    async def change_password(self, user_id: int, old_password: str, new_password: str) -> None:
        """
        Replace the password after checking the current one.

        Raises:
            AuthenticationError: If ``old_password`` is wrong
            ValidationError: If ``new_password`` is too short
        """
        user = await self.get_user(user_id)
        if not self.security_manager.verify_password(old_password, user.password_hash):
            logger.warning(f"Password change with wrong current password for user {user_id}")
            raise AuthenticationError("Current password is incorrect.")

        self._require(validate_password(new_password), "newPassword")
        user.password_hash = self.security_manager.hash_password(new_password)
        await self._save(user)
        logger.info(f"Password changed for user {user_id}")

    async def update_information(self, user_id: int, username: str, location: str, contact: str) -> User:
        user = await self.get_user(user_id)
        if not (username or "").strip() or not (location or "").strip() or not (contact or "").strip():
            raise ValidationError("New data can't be empty!")

        self._require(validate_text_content(username, "Username", max_length=USERNAME_MAX_LENGTH), "username")
        self._require(validate_text_content(location, "Location", max_length=LOCATION_MAX_LENGTH), "location")
        self._require(validate_contact(contact), "contact")

        user.username = username.strip()
        user.location = location.strip()
        user.contact = contact.strip()
        return await self._save(user)

    async def update_avatar(self, user_id: int, image: UploadFile) -> User:
        user = await self.get_user(user_id)
        user.user_avatar = await self.image_storage.replace(user.user_avatar, image)
        return await self._save(user)

    async def set_role_paid(self, user_id: int, role_paid: bool = True) -> User:
        user = await self.get_user(user_id)
        user.role_paid = role_paid
        logger.info(f"User {user_id} premium flag set to {role_paid}")
        return await self._save(user)

    async def delete_user(self, user_id: int) -> None:
        user = await self.get_user(user_id)
        await self.user_repository.delete(user_id)
        await self.image_storage.delete(user.user_avatar)
        logger.info(f"User deleted: {user_id}")

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _save(self, user: User) -> User:
        updated = await self.user_repository.update(user)
        if updated is None:
            raise NotFoundError(f"User with id {user.id} not found.", resource_type="user", resource_id=user.id)
        return updated

    @staticmethod
    def _require(result, field: str) -> None:
        if not result.is_valid:
            raise ValidationError(result.first_error, field=field, details={"errors": result.errors})
