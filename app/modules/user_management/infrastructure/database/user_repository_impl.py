# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for accounts: creating gardeners and administrators,
# finding them by number or email, updating and removing them.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of UserRepository and AdminRepository on top of the shared
# generic repository, with case-insensitive email lookup and discriminator-aware counting.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories (interfaces)
# - app.modules.user_management.infrastructure.database.models (ORM models)
# - app.shared.infrastructure.database.repository (SQLAlchemyRepository)
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency overrides, user/admin/auth services

import logging
from typing import Any, Optional, Tuple

from sqlalchemy import func, select

from app.modules.user_management.domain.models.user import Admin, User
from app.modules.user_management.domain.repositories.user_repository import AdminRepository, UserRepository
from app.modules.user_management.infrastructure.database.models import AdminModel, PersonModel, UserModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.utils.validators import normalize_email

logger = logging.getLogger(__name__)


class UserRepositoryImpl(SQLAlchemyRepository[UserModel, User], UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    model = UserModel
    domain = User
    entity_name = "user"

    def _type_criteria(self) -> Tuple[Any, ...]:
        return (PersonModel.person_type == "user",)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(func.lower(UserModel.email) == normalize_email(email))
        return await self._fetch_one(stmt)


class AdminRepositoryImpl(SQLAlchemyRepository[AdminModel, Admin], AdminRepository):
    """
    SQLAlchemy implementation of the AdminRepository interface.
    """

    model = AdminModel
    domain = Admin
    entity_name = "admin"

    def _type_criteria(self) -> Tuple[Any, ...]:
        return (PersonModel.person_type == "admin",)

    async def get_by_email(self, email: str) -> Optional[Admin]:
        stmt = select(AdminModel).where(func.lower(AdminModel.email) == normalize_email(email))
        return await self._fetch_one(stmt)
