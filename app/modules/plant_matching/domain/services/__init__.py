from .compatibility_classifier import classify, classify_items, match_count, match_tier

__all__ = ["classify", "classify_items", "match_count", "match_tier"]
