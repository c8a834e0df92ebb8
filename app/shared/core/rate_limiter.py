"""
Rate limiting for the Leaflings API.
Provides the shared slowapi limiter keyed by client address.
"""

import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config.settings import get_settings

logger = logging.getLogger(__name__)


def create_limiter() -> Limiter:
    """
    Build the application limiter.

    Limits are kept in process memory; decorated endpoints must accept a
    ``request: Request`` argument.
    """
    settings = get_settings()
    if not settings.RATE_LIMIT_ENABLED:
        logger.info("Rate limiting disabled by configuration")
    return Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


# Global limiter instance, attached to ``app.state.limiter`` in create_application()
limiter = create_limiter()


def login_rate_limit() -> str:
    return get_settings().LOGIN_RATE_LIMIT
