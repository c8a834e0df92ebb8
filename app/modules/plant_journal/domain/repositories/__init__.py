from .journal_repository import DiaryRepository, LogRepository, UserPlantRepository, WarningRepository

__all__ = ["UserPlantRepository", "DiaryRepository", "LogRepository", "WarningRepository"]
