# 📄 File: app/modules/plant_catalog/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access interfaces for the plant catalog.
# 🧪 Purpose (Technical Summary):
# Package exports for plant/task repository interfaces.
# 🔗 Dependencies:
# plant_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .plant_repository import PlantRepository, PlantTaskRepository

__all__ = ["PlantRepository", "PlantTaskRepository"]
