# 📄 File: app/modules/plant_catalog/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the request and response formats of the catalog endpoints.
#
# 🧪 Purpose (Technical Summary):
# API schemas package exports for plant catalog endpoints.
#
# 🔗 Dependencies:
# - plant_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_catalog.presentation.api.v1

from .plant_schemas import PlantResponse, TaskRequest, TaskResponse

__all__ = ["PlantResponse", "TaskRequest", "TaskResponse"]
