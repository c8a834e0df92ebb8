from .ad import Ad

__all__ = ["Ad"]
