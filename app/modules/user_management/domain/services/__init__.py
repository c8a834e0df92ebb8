# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the account rules (users, admins, login) in one place.
# 🧪 Purpose (Technical Summary):
# Domain services package exports.
# 🔗 Dependencies:
# user_service, admin_service, auth_service
# 🔄 Connected Modules / Calls From:
# user_management presentation layer, plant_matching, plant_journal, payments

from .admin_service import AdminService
from .auth_service import AuthResult, AuthService
from .user_service import UserService

__all__ = ["AdminService", "AuthResult", "AuthService", "UserService"]
