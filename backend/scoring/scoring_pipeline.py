"""
Main orchestrator for location-based scoring:
fetch provider inputs → aggregate → score → rank.
"""
import logging
from typing import Optional

from cache_manager import CacheManager, cache as default_cache, cache_or_run
from config import settings
from models import (
    ClimateObservation,
    ClimateSeries,
    CropSuggestion,
    GeocodedPlace,
    HazardReport,
    LocationRequest,
)
from .climate_aggregator import ClimateAggregator
from .crop_scorer import CropScorer
from .data_sources.base import ClimateHistorySource, ConditionsSource, GeocodingSource, ProviderError
from .hazard_scorer import HazardScorer

logger = logging.getLogger(__name__)

# ~11 m; nearby requests share provider inputs
COORD_PRECISION = 4


class ScoringPipeline:
    """Orchestrates provider fetches and the scoring engine for one location"""

    def __init__(
        self,
        history_source: ClimateHistorySource,
        conditions_source: ConditionsSource,
        cache: Optional[CacheManager] = None,
        geocoder: Optional[GeocodingSource] = None,
    ):
        self.history_source = history_source
        self.conditions_source = conditions_source
        self.geocoder = geocoder
        self.cache = cache if cache is not None else default_cache
        self.aggregator = ClimateAggregator()
        self.crop_scorer = CropScorer()
        self.hazard_scorer = HazardScorer()

    # ---------- locations ------------------------------------------------
    def geocode(self, name: str) -> GeocodedPlace:
        """
        Best match for a place name, cached per normalized name. Misses are
        not cached.

        Raises:
            ValueError: no geocoding source configured
            LocationNotFoundError: nothing matched
            ProviderError: the geocoding service failed
        """
        if self.geocoder is None:
            raise ValueError("No geocoding source configured; send latitude and longitude")
        query = name.strip()
        key = (self.geocoder.source_name, query.lower())
        return cache_or_run("geocode", key, lambda: self.geocoder.geocode(query), store=self.cache)

    def resolve_location(self, location: LocationRequest) -> LocationRequest:
        """Fill in coordinates from `name` when the request has none"""
        if location.has_coordinates:
            return location
        place = self.geocode(location.name)
        logger.info(f"Resolved '{location.name}' to {place.name} ({place.latitude}, {place.longitude})")
        return location.model_copy(update={
            "latitude": place.latitude,
            "longitude": place.longitude,
            "name": place.name,
            "country": place.country,
        })

    # ---------- crops ----------------------------------------------------
    def suggest_crops(self, location: LocationRequest) -> CropSuggestion:
        """
        Main entry point for crop suggestions at a coordinate or place name.

        A climate history failure does not fail the request: the all-fallback
        observation is scored instead and the error is reported alongside.
        Geocoding errors do propagate, since there is no point to score.
        """
        location = self.resolve_location(location)
        start_year = location.start_year or settings.CLIMATE_START_YEAR
        end_year = location.end_year or settings.CLIMATE_END_YEAR
        if start_year > end_year:
            raise ValueError(f"start_year {start_year} is after end_year {end_year}")

        key = (
            self.history_source.source_name,
            round(location.latitude, COORD_PRECISION),
            round(location.longitude, COORD_PRECISION),
            start_year,
            end_year,
        )

        provider_error = None
        try:
            series = cache_or_run(
                "climate_series",
                key,
                lambda: self.history_source.fetch_monthly_series(
                    location.latitude, location.longitude, start_year, end_year
                ),
                store=self.cache,
            )
            observation = self.aggregator.aggregate(series)
        except (ProviderError, ValueError) as e:
            logger.warning(f"Climate history unavailable, scoring fallback observation: {e}")
            provider_error = str(e)
            observation = ClimateObservation.fallback()

        ranking = self.crop_scorer.rank(observation)
        return CropSuggestion(
            location=location,
            observation=observation,
            ranking=ranking,
            provider_error=provider_error,
        )

    def suggest_crops_from_series(self, series: ClimateSeries) -> CropSuggestion:
        observation = self.aggregator.aggregate(series)
        return CropSuggestion(observation=observation, ranking=self.crop_scorer.rank(observation))

    # ---------- hazards --------------------------------------------------
    def assess_hazards(self, location: LocationRequest) -> HazardReport:
        """
        Score all hazards from current conditions. Snapshots with a failed
        provider are not cached, so the next request retries that provider.
        """
        location = self.resolve_location(location)
        key = (
            self.conditions_source.source_name,
            round(location.latitude, COORD_PRECISION),
            round(location.longitude, COORD_PRECISION),
        )
        snapshot = self.cache.get("conditions", key)
        if snapshot is None:
            snapshot = self.conditions_source.fetch_conditions(location.latitude, location.longitude)
            if not snapshot.failed_providers:
                self.cache.set("conditions", key, snapshot)
        else:
            logger.info("Using cached conditions snapshot")

        assessment = self.hazard_scorer.assess(snapshot.observation)
        return HazardReport(
            location=location,
            observation=snapshot.observation,
            assessment=assessment,
            failed_providers=snapshot.failed_providers,
        )
