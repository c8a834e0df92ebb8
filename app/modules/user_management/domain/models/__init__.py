# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the account models: gardeners (users) and administrators.
# 🧪 Purpose (Technical Summary):
# Package exports for the Person hierarchy domain models.
# 🔗 Dependencies:
# user.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer

from .user import Admin, Person, PersonRole, User

__all__ = [
    "Person",
    "PersonRole",
    "User",
    "Admin",
]
