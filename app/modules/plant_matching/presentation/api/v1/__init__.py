from .matches import matches_router

__all__ = ["matches_router"]
