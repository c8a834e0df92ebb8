# 📄 File: app/modules/plant_journal/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes a gardener's personal side of the app: their plants, diaries, notes and reminders.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant journal module (domain, SQLAlchemy infrastructure,
# FastAPI routers for /userplants, /diary, /log and /warning).
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic
# 🔄 Connected Modules / Calls From:
# app.main (dependency overrides), app.api.v1.router

__module_name__ = "plant_journal"
