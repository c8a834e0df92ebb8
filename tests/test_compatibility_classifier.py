"""
Tests for the compatibility classifier.

The classifier is pure, so the small attribute space (3 levels x 3 attributes)
is checked exhaustively instead of by sampling.
"""

from itertools import product

import pytest

from app.modules.plant_matching.domain.models import (
    MATCH_TYPE_LABELS,
    CapabilityProfile,
    MatchBuckets,
    MatchTier,
    RequirementProfile,
)
from app.modules.plant_matching.domain.services import classify, classify_items, match_count, match_tier
from app.shared.core.care_levels import ExperienceLevel, LightLevel, WaterLevel

LEVELS = (0, 1, 2)


def capability(experience: int, water: int, luminosity: int) -> CapabilityProfile:
    return CapabilityProfile(ExperienceLevel(experience), WaterLevel(water), LightLevel(luminosity))


def requirement(experience: int, water: int, luminosity: int) -> RequirementProfile:
    return RequirementProfile(ExperienceLevel(experience), WaterLevel(water), LightLevel(luminosity))


ALL_CAPABILITIES = [capability(*levels) for levels in product(LEVELS, repeat=3)]
ALL_REQUIREMENTS = [requirement(*levels) for levels in product(LEVELS, repeat=3)]


def bucket_of(buckets, plant) -> int:
    perfect, medium, weak, none = buckets
    for tier, bucket in zip((3, 2, 1, 0), (perfect, medium, weak, none)):
        if any(item is plant for item in bucket):
            return tier
    raise AssertionError(f"{plant} missing from every bucket")


class TestMatchCount:

    def test_counts_each_satisfied_attribute(self):
        assert match_count(capability(2, 2, 1), requirement(0, 0, 0)) == 3
        assert match_count(capability(2, 2, 1), requirement(2, 2, 2)) == 2
        assert match_count(capability(0, 0, 0), requirement(1, 1, 1)) == 0
        assert match_count(capability(1, 0, 2), requirement(1, 1, 1)) == 2

    def test_equal_levels_satisfy(self):
        for levels in product(LEVELS, repeat=3):
            assert match_count(capability(*levels), requirement(*levels)) == 3

    def test_tier_equals_count(self):
        assert match_tier(capability(0, 0, 0), requirement(2, 2, 2)) is MatchTier.NONE
        assert match_tier(capability(2, 0, 0), requirement(2, 2, 2)) is MatchTier.WEAK
        assert match_tier(capability(2, 2, 0), requirement(2, 2, 2)) is MatchTier.MEDIUM
        assert match_tier(capability(2, 2, 2), requirement(2, 2, 2)) is MatchTier.PERFECT


class TestClassify:

    def test_reference_scenario(self):
        user = capability(2, 2, 1)
        a, b, c, d = requirement(0, 0, 0), requirement(2, 2, 2), requirement(2, 0, 1), requirement(1, 1, 2)

        perfect, medium, weak, none = classify(user, [a, b, c, d])

        assert perfect == [a, c]
        assert medium == [b, d]
        assert weak == []
        assert none == []

    def test_missing_user_gives_empty_buckets(self):
        assert classify(None, ALL_REQUIREMENTS) == ([], [], [], [])

    def test_empty_catalog_gives_empty_buckets(self):
        assert classify(capability(1, 1, 1), []) == ([], [], [], [])

    @pytest.mark.parametrize("user", ALL_CAPABILITIES, ids=lambda profile: str(profile.as_tuple()))
    def test_same_inputs_give_same_buckets(self, user):
        first = classify(user, ALL_REQUIREMENTS)
        second = classify(user, ALL_REQUIREMENTS)

        assert first == second
        assert [[p.as_tuple() for p in bucket] for bucket in first] == \
            [[p.as_tuple() for p in bucket] for bucket in second]

    @pytest.mark.parametrize("user", ALL_CAPABILITIES, ids=lambda profile: str(profile.as_tuple()))
    def test_partition_is_total_and_disjoint(self, user):
        buckets = classify(user, ALL_REQUIREMENTS)

        placed = [plant for bucket in buckets for plant in bucket]
        assert len(placed) == len(ALL_REQUIREMENTS)
        assert sorted(p.as_tuple() for p in placed) == sorted(p.as_tuple() for p in ALL_REQUIREMENTS)

    @pytest.mark.parametrize("user", ALL_CAPABILITIES, ids=lambda profile: str(profile.as_tuple()))
    def test_bucket_matches_count(self, user):
        buckets = classify(user, ALL_REQUIREMENTS)
        for plant in ALL_REQUIREMENTS:
            assert bucket_of(buckets, plant) == match_count(user, plant)

    def test_catalog_order_kept_within_buckets(self):
        catalog = list(reversed(ALL_REQUIREMENTS))
        for bucket in classify(capability(1, 1, 1), catalog):
            positions = [next(i for i, item in enumerate(catalog) if item is plant) for plant in bucket]
            assert positions == sorted(positions)

    def test_duplicates_are_kept(self):
        plant = requirement(0, 0, 0)
        perfect, _, _, _ = classify(capability(0, 0, 0), [plant, plant])
        assert perfect == [plant, plant]

    def test_raising_a_capability_never_lowers_a_bucket(self):
        for user_levels in product(LEVELS, repeat=3):
            user = capability(*user_levels)
            for index in range(3):
                if user_levels[index] == 2:
                    continue
                raised_levels = list(user_levels)
                raised_levels[index] += 1
                raised = capability(*raised_levels)

                before = classify(user, ALL_REQUIREMENTS)
                after = classify(raised, ALL_REQUIREMENTS)
                for plant in ALL_REQUIREMENTS:
                    assert bucket_of(after, plant) >= bucket_of(before, plant)


class TestClassifyItems:

    def test_keeps_original_items(self):
        catalog = [{"name": "Cactus", "needs": requirement(0, 0, 2)},
                   {"name": "Fern", "needs": requirement(1, 2, 0)}]

        buckets = classify_items(capability(0, 0, 2), catalog, lambda item: item["needs"])

        assert isinstance(buckets, MatchBuckets)
        assert [item["name"] for item in buckets.perfect] == ["Cactus"]
        assert [item["name"] for item in buckets.weak] == ["Fern"]
        assert len(buckets) == 2

    def test_labels_cover_every_tier(self):
        assert set(MATCH_TYPE_LABELS) == set(MatchTier)
        assert MatchTier.PERFECT.label == "Perfect Match (3/3)"
        assert MatchTier.NONE.label == "Weak Match (0/3)"
