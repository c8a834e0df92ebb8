from .ads import ads_router

__all__ = ["ads_router"]
