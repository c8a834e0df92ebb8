# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the account API endpoints and their data formats.
#
# 🧪 Purpose (Technical Summary):
# API package for user management: versioned routers (v1) and schemas.
#
# 🔗 Dependencies:
# - app.modules.user_management.presentation.api.v1
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router
