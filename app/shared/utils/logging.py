# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the logging system that records what happens in Leaflings in a structured way,
# so every line can be traced back to the request (and the person) that caused it.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), a contextual text fallback format,
# and ContextVar-based request/user correlation injected through a logging filter.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup), app.api.middleware.logging (request correlation),
# app.shared.core.dependencies (binds the authenticated person id)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'leaflings-api'

_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Adds request id, user id and service metadata to every record.
    """

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        record.user_id = user_id_var.get()
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        return True


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for ``json`` or ``text`` output."""
    if log_format.lower() == 'json':
        return JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s %(user_id)s %(service)s',
            rename_fields={'levelname': 'level', 'name': 'logger', 'asctime': 'timestamp'},
        )
    return logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
    )


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False,
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name, defaults to ``LOG_LEVEL`` from settings
        log_format: ``json`` or ``text``, defaults to ``LOG_FORMAT``
        log_file: Optional file to mirror console output into
        enable_console: Attach a stdout handler
        force: Reconfigure even if logging was already set up

    Returns:
        The ``startup`` logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = build_formatter(log_format)
    context_filter = ContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('aiosqlite').setLevel(logging.WARNING)
    logging.getLogger('passlib').setLevel(logging.ERROR)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None) -> Iterator[str]:
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier, generated when omitted
        user_id: Authenticated person identifier

    Yields:
        The bound request id
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')
    try:
        yield request_id
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def bind_user(user_id: Optional[str]) -> None:
    """Attach the authenticated person to the current logging context."""
    user_id_var.set(user_id or '')
