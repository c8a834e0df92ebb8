# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains the Leaflings application code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the Leaflings FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
Leaflings - Plant Care Companion API

Backend API for a plant catalog, personal plant journals with diaries and reminders,
plant/user compatibility matching, advertising and PayPal premium upgrades.
"""

__version__ = "1.0.0"
__title__ = "Leaflings API"
__description__ = "Plant care companion backend"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
