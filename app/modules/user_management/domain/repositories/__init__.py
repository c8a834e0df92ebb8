# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access interfaces for accounts.
# 🧪 Purpose (Technical Summary):
# Package exports for the user/admin repository interfaces.
# 🔗 Dependencies:
# user_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .user_repository import AdminRepository, UserRepository

__all__ = ["UserRepository", "AdminRepository"]
