# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file marks the api folder as a Python package: the web-facing layer with its middleware
# and the list of all endpoints.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (middleware, router aggregation, health endpoints).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

API_PREFIX = "/api"
