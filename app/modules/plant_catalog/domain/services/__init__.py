# 📄 File: app/modules/plant_catalog/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the catalog rules (plants and their care tasks).
# 🧪 Purpose (Technical Summary):
# Domain services package exports.
# 🔗 Dependencies:
# plant_service, task_service
# 🔄 Connected Modules / Calls From:
# plant_catalog presentation layer, plant_matching

from .plant_service import PlantService
from .task_service import TaskService

__all__ = ["PlantService", "TaskService"]
