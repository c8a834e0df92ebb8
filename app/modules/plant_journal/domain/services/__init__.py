# 📄 File: app/modules/plant_journal/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the journal rules: owned plants, diaries, entries and reminders.
# 🧪 Purpose (Technical Summary):
# Domain services package exports.
# 🔗 Dependencies:
# user_plant_service, diary_service, log_service, warning_service
# 🔄 Connected Modules / Calls From:
# plant_journal presentation layer

from .diary_service import DiaryService
from .log_service import LogService
from .user_plant_service import UserPlantService
from .warning_service import WarningService

__all__ = ["DiaryService", "LogService", "UserPlantService", "WarningService"]
