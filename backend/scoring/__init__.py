"""
Agricultural scoring package.

Public exports:
- router: FastAPI router for scoring endpoints
- ScoringPipeline: location-based orchestrator
- aggregate_climate / score_crops / score_hazards: pure scoring entry points
"""

from .scoring_router import router
from .scoring_pipeline import ScoringPipeline
from .climate_aggregator import ClimateAggregator, aggregate_climate
from .crop_scorer import CropScorer, score_crops
from .hazard_scorer import HazardScorer, score_hazards
from .crop_profiles import CROP_PROFILES, get_crop, list_crops
from .hazard_thresholds import HAZARDS, get_hazard, list_hazards

__all__ = [
    "router",
    "ScoringPipeline",
    "ClimateAggregator",
    "aggregate_climate",
    "CropScorer",
    "score_crops",
    "HazardScorer",
    "score_hazards",
    "CROP_PROFILES",
    "get_crop",
    "list_crops",
    "HAZARDS",
    "get_hazard",
    "list_hazards",
]
