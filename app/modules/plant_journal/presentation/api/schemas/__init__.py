from .journal_schemas import (
    DiaryRequest,
    DiaryResponse,
    DiaryUpdateRequest,
    LogRequest,
    LogResponse,
    LogUpdateRequest,
    OwnedPlantResponse,
    UserPlantRequest,
    UserPlantResponse,
    WarningRequest,
    WarningResponse,
)

__all__ = [
    "DiaryRequest",
    "DiaryResponse",
    "DiaryUpdateRequest",
    "LogRequest",
    "LogResponse",
    "LogUpdateRequest",
    "OwnedPlantResponse",
    "UserPlantRequest",
    "UserPlantResponse",
    "WarningRequest",
    "WarningResponse",
]
