# 📄 File: app/modules/plant_matching/domain/services/compatibility_classifier.py
# 🧭 Purpose (Layman Explanation):
# Sorts the whole plant catalog into "perfect", "average", "weak" and "no" matches for a person,
# by counting how many of a plant's needs (experience, water, light) the person can meet.
# 🧪 Purpose (Technical Summary):
# Pure, stateless partition of a catalog by match count = Σ[user_i >= plant_i] over three
# ordinal attributes. Stable, total and disjoint; a missing user yields four empty buckets.
# 🔗 Dependencies:
# app.modules.plant_matching.domain.models.care_profile
# 🔄 Connected Modules / Calls From:
# app.modules.plant_matching.domain.services.match_service (GET /api/user/match/{user_id})

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from ..models.care_profile import CapabilityProfile, MatchBuckets, MatchTier, RequirementProfile

T = TypeVar("T")


def match_count(user: CapabilityProfile, plant: RequirementProfile) -> int:
    """Number of attributes where the user's level meets or exceeds the plant's need."""
    return sum(
        1 for offered, needed in zip(user.as_tuple(), plant.as_tuple())
        if offered >= needed
    )


def match_tier(user: CapabilityProfile, plant: RequirementProfile) -> MatchTier:
    return MatchTier(match_count(user, plant))


def classify_items(
    user: Optional[CapabilityProfile],
    catalog: Iterable[T],
    requirement_of: Callable[[T], RequirementProfile],
) -> MatchBuckets[T]:
    """
    Partition arbitrary catalog items by how well ``user`` can care for them.

    Args:
        user: Capability profile, or None when no user could be resolved
        catalog: Items in display order; each lands in exactly one bucket
        requirement_of: Extracts the requirement profile from an item

    Returns:
        MatchBuckets holding the original items, catalog order preserved
    """
    buckets: MatchBuckets[T] = MatchBuckets()
    if user is None:
        return buckets

    for item in catalog:
        buckets.bucket(match_tier(user, requirement_of(item))).append(item)
    return buckets


def classify(
    user: Optional[CapabilityProfile],
    catalog: Iterable[RequirementProfile],
) -> Tuple[List[RequirementProfile], List[RequirementProfile], List[RequirementProfile], List[RequirementProfile]]:
    """
    Partition ``catalog`` into (perfect, medium, weak, none).

    A None user, or an empty catalog, gives four empty lists.
    """
    return classify_items(user, catalog, lambda plant: plant).as_tuple()
