from .match_schemas import MatchedPlantResponse, PlantMatchResponse

__all__ = ["MatchedPlantResponse", "PlantMatchResponse"]
