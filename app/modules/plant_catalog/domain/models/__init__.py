# 📄 File: app/modules/plant_catalog/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the catalog models: plants and their care tasks.
# 🧪 Purpose (Technical Summary):
# Package exports for plant catalog domain models.
# 🔗 Dependencies:
# plant.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer

from .plant import Plant, PlantTask

__all__ = ["Plant", "PlantTask"]
