"""
Plant Journal Domain Layer

Domain Models:
- UserPlant, Diary, Log, CareWarning
"""
