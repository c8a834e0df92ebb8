from .diaries import diaries_router
from .logs import logs_router
from .user_plants import user_plants_router
from .warnings import warnings_router

__all__ = ["diaries_router", "logs_router", "user_plants_router", "warnings_router"]
