from .ad_repository import AdRepository

__all__ = ["AdRepository"]
