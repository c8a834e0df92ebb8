"""
Plant Catalog Domain Layer

Domain Models:
- Plant, PlantTask

Domain Services:
- PlantService, TaskService
"""
