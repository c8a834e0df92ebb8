# 📄 File: app/modules/plant_matching/presentation/api/schemas/match_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of the "which plants suit me" answer: four lists of plants, each plant labelled
# with how good a match it is.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for GET /user/match/{user_id}.
#
# 🔗 Dependencies:
# - app.modules.plant_catalog.presentation.api.schemas.PlantResponse
# - app.modules.plant_matching.domain.models (MatchTier labels)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_matching.presentation.api.v1.matches

from typing import List

from app.modules.plant_catalog.domain.models import Plant
from app.modules.plant_catalog.presentation.api.schemas import PlantResponse
from app.modules.plant_matching.domain.models import MatchBuckets, MatchTier
from app.shared.utils.schemas import CamelModel


class MatchedPlantResponse(PlantResponse):
    match_type: str


class PlantMatchResponse(CamelModel):
    perfect_matches: List[MatchedPlantResponse] = []
    average_matches: List[MatchedPlantResponse] = []
    weak_matches: List[MatchedPlantResponse] = []
    no_matches: List[MatchedPlantResponse] = []

    @classmethod
    def from_buckets(cls, buckets: MatchBuckets[Plant]) -> "PlantMatchResponse":
        def annotate(plants: List[Plant], tier: MatchTier) -> List[MatchedPlantResponse]:
            return [
                MatchedPlantResponse(**plant.model_dump(), match_type=tier.label)
                for plant in plants
            ]

        return cls(
            perfect_matches=annotate(buckets.perfect, MatchTier.PERFECT),
            average_matches=annotate(buckets.medium, MatchTier.MEDIUM),
            weak_matches=annotate(buckets.weak, MatchTier.WEAK),
            no_matches=annotate(buckets.none, MatchTier.NONE),
        )
