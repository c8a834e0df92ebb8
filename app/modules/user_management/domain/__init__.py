# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules for accounts: what a valid user or admin is and how logging in works.
# 🧪 Purpose (Technical Summary):
# Domain layer containing entities, repository interfaces and domain services.
# 🔗 Dependencies:
# models, repositories, services subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, presentation layer, other modules' services

"""
User Management Domain Layer

Domain Models:
- Person, User, Admin

Domain Services:
- UserService, AdminService, AuthService

Business Rules Enforced:
- Email uniqueness across users and admins
- Minimum password length
- Portuguese mobile contact numbers
"""
