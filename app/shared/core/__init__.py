# 📄 File: app/shared/core/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The core rules shared by every part of Leaflings: error types, passwords and tokens,
# who is calling, request limits and the care level vocabulary.
#
# 🧪 Purpose (Technical Summary):
# Core package: exceptions, security (JWT/bcrypt), FastAPI auth dependencies,
# slowapi limiter and care level enums. Import from the submodules directly.
#
# 🔗 Dependencies:
# - exceptions, security, dependencies, rate_limiter, care_levels
#
# 🔄 Connected Modules / Calls From:
# - All application modules
