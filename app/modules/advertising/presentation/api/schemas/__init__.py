from .ad_schemas import AdCountResponse, AdResponse

__all__ = ["AdCountResponse", "AdResponse"]
