# 📄 File: app/modules/plant_matching/domain/models/care_profile.py
# 🧭 Purpose (Layman Explanation):
# Describes the two things we compare when suggesting plants: what a person can offer
# (experience, water, light) and what a plant needs, plus the four groups of results.
# 🧪 Purpose (Technical Summary):
# Immutable capability/requirement profiles sharing the ordinal care-level enums, and the
# MatchBuckets result partition with its match-type labels.
# 🔗 Dependencies:
# dataclasses, app.shared.core.care_levels
# 🔄 Connected Modules / Calls From:
# compatibility_classifier.py, match_service.py, user and plant domain models

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Generic, List, Tuple, TypeVar

from app.shared.core.care_levels import ExperienceLevel, LightLevel, WaterLevel

T = TypeVar("T")


@dataclass(frozen=True)
class CapabilityProfile:
    """What a user can offer a plant."""
    experience: ExperienceLevel
    water: WaterLevel
    luminosity: LightLevel

    def as_tuple(self) -> Tuple[int, int, int]:
        return int(self.experience), int(self.water), int(self.luminosity)


@dataclass(frozen=True)
class RequirementProfile:
    """The minimum a plant needs on each attribute."""
    experience: ExperienceLevel
    water: WaterLevel
    luminosity: LightLevel

    def as_tuple(self) -> Tuple[int, int, int]:
        return int(self.experience), int(self.water), int(self.luminosity)


class MatchTier(IntEnum):
    """Bucket index, equal to the number of satisfied attributes."""
    NONE = 0
    WEAK = 1
    MEDIUM = 2
    PERFECT = 3

    @property
    def label(self) -> str:
        return MATCH_TYPE_LABELS[self]


MATCH_TYPE_LABELS = {
    MatchTier.PERFECT: "Perfect Match (3/3)",
    MatchTier.MEDIUM: "Average Match (2/3)",
    MatchTier.WEAK: "Weak Match (1/3)",
    MatchTier.NONE: "Weak Match (0/3)",
}


@dataclass
class MatchBuckets(Generic[T]):
    """Partition of a catalog by match count, catalog order kept inside each bucket."""
    perfect: List[T] = field(default_factory=list)
    medium: List[T] = field(default_factory=list)
    weak: List[T] = field(default_factory=list)
    none: List[T] = field(default_factory=list)

    def bucket(self, tier: MatchTier) -> List[T]:
        return {
            MatchTier.PERFECT: self.perfect,
            MatchTier.MEDIUM: self.medium,
            MatchTier.WEAK: self.weak,
            MatchTier.NONE: self.none,
        }[tier]

    def as_tuple(self) -> Tuple[List[T], List[T], List[T], List[T]]:
        return self.perfect, self.medium, self.weak, self.none

    def __len__(self) -> int:
        return len(self.perfect) + len(self.medium) + len(self.weak) + len(self.none)
