# 📄 File: app/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Small helpers used everywhere: checking input, paging lists, shaping API data and logging.
#
# 🧪 Purpose (Technical Summary):
# Utilities package: validators, pagination, camelCase schemas and structured logging.
# Import from the submodules directly.
#
# 🔗 Dependencies:
# - validators, pagination, schemas, logging
#
# 🔄 Connected Modules / Calls From:
# - All application modules
