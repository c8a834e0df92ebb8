# 📄 File: app/modules/advertising/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the advertisement banners shown in the app.
# 🧪 Purpose (Technical Summary):
# Package initialization for the advertising module (/ad endpoints).
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, Pillow (via shared image storage)
# 🔄 Connected Modules / Calls From:
# app.main (dependency overrides), app.api.v1.router

__module_name__ = "advertising"
