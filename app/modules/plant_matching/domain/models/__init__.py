from .care_profile import (
    MATCH_TYPE_LABELS,
    CapabilityProfile,
    MatchBuckets,
    MatchTier,
    RequirementProfile,
)

__all__ = [
    "CapabilityProfile",
    "RequirementProfile",
    "MatchBuckets",
    "MatchTier",
    "MATCH_TYPE_LABELS",
]
