"""
FastAPI router for crop suitability and hazard risk endpoints.
"""
import logging
from typing import Dict, List

from fastapi import APIRouter, HTTPException

from models import (
    ClimateObservation,
    ClimateSeries,
    CropProfile,
    CropRanking,
    CropSuggestion,
    GeocodedPlace,
    HazardAssessment,
    HazardObservation,
    HazardReport,
    HazardSummary,
    LocationRequest,
)
from .climate_aggregator import ClimateAggregator
from .crop_profiles import get_crop, list_crops
from .crop_scorer import CropScorer
from .data_sources.base import LocationNotFoundError, ProviderError
from .data_sources.registry import get_source
from .hazard_scorer import HazardScorer
from .hazard_thresholds import HAZARDS
from .scoring_pipeline import ScoringPipeline

logger = logging.getLogger(__name__)

# Initialize pipeline components
aggregator = ClimateAggregator()
crop_scorer = CropScorer()
hazard_scorer = HazardScorer()
pipeline = ScoringPipeline(
    get_source("nasa_power"),
    get_source("open_meteo"),
    geocoder=get_source("open_meteo_geocoding"),
)

# Create router
router = APIRouter(prefix="/api", tags=["scoring"])


@router.get("/crops", response_model=List[str])
async def list_available_crops():
    """List all crops in the reference table"""
    return list_crops()


@router.get("/crops/{crop_name}", response_model=CropProfile)
async def get_crop_profile(crop_name: str):
    try:
        return get_crop(crop_name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown crop: {crop_name}")


@router.get("/hazards", response_model=List[HazardSummary])
async def list_available_hazards():
    """List all hazards with their input fields"""
    return [hazard.summary() for hazard in HAZARDS.values()]


@router.get("/geocode", response_model=GeocodedPlace)
def geocode_location(name: str):
    """Resolve a place name to coordinates (best match)"""
    try:
        return pipeline.geocode(name)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProviderError as e:
        logger.warning(f"Geocoding failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/climate/aggregate", response_model=ClimateObservation)
async def aggregate_climate(series: ClimateSeries):
    """Collapse monthly samples into one multi-year observation"""
    return aggregator.aggregate(series)


@router.post("/crop-suggestions", response_model=CropRanking)
async def suggest_crops(observation: ClimateObservation):
    """Rank crops for an already-aggregated observation"""
    return crop_scorer.rank(observation)


@router.post("/crop-suggestions/series", response_model=CropSuggestion)
async def suggest_crops_from_series(series: ClimateSeries):
    return pipeline.suggest_crops_from_series(series)


@router.post("/crop-suggestions/location", response_model=CropSuggestion)
def suggest_crops_for_location(location: LocationRequest):
    """
    Fetch multi-year climate history for a coordinate and rank crops.

    This is the main entry point for the crop suggestion page.
    """
    try:
        return pipeline.suggest_crops(location)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProviderError as e:
        logger.warning(f"Location lookup failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(f"Error suggesting crops: {e}")
        raise HTTPException(status_code=500, detail="Failed to suggest crops")


@router.post("/hazard-scores", response_model=HazardAssessment)
async def score_hazards(observation: HazardObservation):
    return hazard_scorer.assess(observation)


@router.post("/hazard-scores/location", response_model=HazardReport)
def score_hazards_for_location(location: LocationRequest):
    """Fetch current conditions for a coordinate and score every hazard"""
    try:
        return pipeline.assess_hazards(location)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProviderError as e:
        logger.warning(f"Provider failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(f"Error scoring hazards: {e}")
        raise HTTPException(status_code=500, detail="Failed to score hazards")


@router.post("/clear-cache", response_model=Dict[str, str])
async def clear_cache():
    pipeline.cache.clear()
    logger.info("Provider cache cleared")
    return {"message": "Cache cleared successfully."}
