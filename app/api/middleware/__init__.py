# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the helpers that wrap every request: one keeps a diary of requests,
# the other turns errors into clear answers.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware and exception handler registration.
# 🔗 Dependencies:
# error_handling, logging
# 🔄 Connected Modules / Calls From:
# app.main.py

from .error_handling import register_exception_handlers
from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware", "register_exception_handlers"]
