# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell Leaflings how to connect to its database and PayPal,
# where to keep pictures, and how to adjust its behavior.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the pydantic-settings model and its factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

from .settings import Settings, get_settings

__all__ = [
    "get_settings",
    "Settings",
]
