"""
Storage infrastructure: local image storage for uploaded pictures.
"""

from .image_storage import ImageStorage, get_image_storage

__all__ = ["ImageStorage", "get_image_storage"]
