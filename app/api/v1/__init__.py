# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the list of Leaflings endpoints and the health checks.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API router aggregation.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py
