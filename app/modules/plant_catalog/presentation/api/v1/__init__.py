# 📄 File: app/modules/plant_catalog/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the catalog endpoints: plants and care tasks.
#
# 🧪 Purpose (Technical Summary):
# Router exports for the plant catalog v1 API.
#
# 🔗 Dependencies:
# - plants, tasks routers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router

from .plants import plants_router
from .tasks import tasks_router

__all__ = ["plants_router", "tasks_router"]
