# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about accounts: gardeners, administrators, logging in and premium status.
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module (domain models and services,
# SQLAlchemy repositories, FastAPI routers for /user, /admin and /auth).
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, passlib, python-jose
# 🔄 Connected Modules / Calls From:
# app.main (dependency overrides), app.api.v1.router, plant_matching, plant_journal, payments

"""
User Management Module

Architecture follows Domain-Driven Design:
- Domain: Person/User/Admin models, repository interfaces, services
- Infrastructure: SQLAlchemy single-table models and repositories
- Presentation: API endpoints and request/response schemas
"""

__module_name__ = "user_management"
