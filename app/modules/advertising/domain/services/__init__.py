from .ad_service import AdService

__all__ = ["AdService"]
