# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the account endpoints: users, administrators and login.
#
# 🧪 Purpose (Technical Summary):
# Router exports for the user management v1 API.
#
# 🔗 Dependencies:
# - users, admins, auth routers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

from .admins import admins_router
from .auth import auth_router
from .users import users_router

__all__ = ["admins_router", "auth_router", "users_router"]
