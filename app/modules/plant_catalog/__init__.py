# 📄 File: app/modules/plant_catalog/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant catalog: the plants people can grow and the care tasks for each.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant catalog module (domain, SQLAlchemy infrastructure,
# FastAPI routers for /plant and /task).
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, Pillow (via shared image storage)
# 🔄 Connected Modules / Calls From:
# app.main (dependency overrides), app.api.v1.router, plant_matching, plant_journal

__module_name__ = "plant_catalog"
