# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update and delete gardener and administrator
# accounts without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for the User and Admin entities following the Repository pattern
# and dependency inversion; implementations live in the infrastructure layer.
# 🔗 Dependencies:
# Domain models (User, Admin), typing, abc
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations, app.main dependency overrides

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.shared.utils.pagination import PageParams

from ..models.user import Admin, User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Methods return domain entities (User), not database models
    - All operations are async for non-blocking I/O
    - Emails are compared lower-cased
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def exists(self, user_id: int) -> bool:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[User], int]:
        """
        Get one page of users.

        Returns:
            The page of users and the total number of users
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """
        Persist a new user.

        Raises:
            DuplicateResourceError: If the email is already taken
            RepositoryError: If the database operation fails
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> Optional[User]:
        """Persist changes to an existing user; None when it no longer exists."""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        pass


class AdminRepository(ABC):
    """
    Repository interface for Admin entity data access operations.
    """

    @abstractmethod
    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Admin]:
        pass

    @abstractmethod
    async def exists(self, admin_id: int) -> bool:
        pass

    @abstractmethod
    async def list_page(self, params: PageParams) -> Tuple[List[Admin], int]:
        pass

    @abstractmethod
    async def add(self, admin: Admin) -> Admin:
        pass

    @abstractmethod
    async def update(self, admin: Admin) -> Optional[Admin]:
        pass

    @abstractmethod
    async def delete(self, admin_id: int) -> bool:
        pass

