# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of accounts: the endpoints the apps call.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer package holding FastAPI routers and pydantic schemas.
#
# 🔗 Dependencies:
# - app.modules.user_management.presentation.api
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
