# 📄 File: app/modules/plant_journal/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the journal models: owned plants, diaries, entries and reminders.
# 🧪 Purpose (Technical Summary):
# Package exports for plant journal domain models.
# 🔗 Dependencies:
# journal.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer

from .journal import CareWarning, Diary, Log, UserPlant

__all__ = ["UserPlant", "Diary", "Log", "CareWarning"]
