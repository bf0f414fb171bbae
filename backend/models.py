# backend/models.py  –– request / response / reference records
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------#
#  0.  ENUMS
# ---------------------------------------------------------------------------#
class HazardEnum(str, Enum):
    flood = "flood"
    drought = "drought"
    heat = "heat"
    cold = "cold"
    wind = "wind"
    rain = "rain"
    air = "air"


class ScoringStatus(str, Enum):
    ok = "ok"
    failed = "failed"


class SeverityEnum(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"
    unknown = "unknown"


# ---------------------------------------------------------------------------#
#  1.  CLIMATE (crop suitability input)
# ---------------------------------------------------------------------------#
# Substituted when an aggregate is missing, non-finite or exactly zero
CLIMATE_FALLBACKS: Dict[str, float] = {
    "avg_temp": 25.0,
    "yearly_rain": 500.0,
    "soil_moisture": 0.4,
}


class ClimateSeries(_CamelModel):
    """
    Raw monthly samples keyed by period ("YYYYMM"), one mapping per variable.
    Any variable may be missing periods or be empty altogether.
    """

    precipitation: Dict[str, Optional[float]] = Field(
        default_factory=dict, description="Monthly precipitation, mm"
    )
    temperature: Dict[str, Optional[float]] = Field(
        default_factory=dict, description="Monthly mean 2 m temperature, °C"
    )
    soil_moisture: Dict[str, Optional[float]] = Field(
        default_factory=dict, description="Monthly root-zone wetness, 0..1"
    )
    start_year: Optional[int] = Field(None, ge=1900, le=2200)
    end_year: Optional[int] = Field(None, ge=1900, le=2200)

    @model_validator(mode="after")
    def _start_not_after_end(self):
        if (
            self.start_year is not None
            and self.end_year is not None
            and self.start_year > self.end_year
        ):
            raise ValueError("start_year must be <= end_year")
        return self


class ClimateObservation(_CamelModel):
    avg_temp: float = Field(..., description="Multi-year mean temperature, °C")
    yearly_rain: float = Field(..., description="Multi-year mean yearly rainfall, mm")
    soil_moisture: float = Field(..., ge=0, le=1, description="Root-zone moisture fraction, 0..1")
    fallback_fields: List[str] = Field(
        default_factory=list,
        description="Fields holding the fixed fallback value instead of a measurement",
    )

    @field_validator("avg_temp", "yearly_rain", "soil_moisture")
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("climate values must be finite")
        return v

    @field_validator("fallback_fields")
    def _known_fields(cls, v: List[str]) -> List[str]:
        unknown = [f for f in v if f not in CLIMATE_FALLBACKS]
        if unknown:
            raise ValueError(f"Unknown climate fields: {unknown}")
        return v

    @classmethod
    def fallback(cls) -> "ClimateObservation":
        """Observation made entirely of fallback values."""
        return cls(**CLIMATE_FALLBACKS, fallback_fields=list(CLIMATE_FALLBACKS))

    def is_measured(self, field: str) -> bool:
        return field not in self.fallback_fields


# ---------------------------------------------------------------------------#
#  2.  CROPS
# ---------------------------------------------------------------------------#
class CropProfile(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    min_temp: float
    max_temp: float
    min_rain: float
    max_rain: float
    moisture_ideal_min: float = Field(..., ge=0, le=1)
    moisture_ideal_max: float = Field(..., ge=0, le=1)
    season: str
    description: str = ""
    tips: str = ""

    @model_validator(mode="after")
    def _bounds_ordered(self):
        pairs: Tuple[Tuple[str, str], ...] = (
            ("min_temp", "max_temp"),
            ("min_rain", "max_rain"),
            ("moisture_ideal_min", "moisture_ideal_max"),
        )
        for lo, hi in pairs:
            if getattr(self, lo) > getattr(self, hi):
                raise ValueError(f"{lo} must be <= {hi}")
        return self


class FactorScores(_CamelModel):
    temperature: float = Field(..., ge=0, le=1)
    rainfall: float = Field(..., ge=0, le=1)
    moisture: float = Field(..., ge=0, le=1)


class CropScoreResult(_CamelModel):
    crop_name: str
    profile: CropProfile
    factor_scores: FactorScores
    combined_score: float = Field(..., ge=0, le=1)
    rank: int = Field(..., ge=1)
    suitable: bool = Field(..., description="Combined score clears the suitability threshold")


class CropRanking(_CamelModel):
    results: List[CropScoreResult] = Field(default_factory=list)
    status: ScoringStatus = ScoringStatus.ok
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status is ScoringStatus.failed


class CropSuggestion(_CamelModel):
    location: Optional[LocationRequest] = None
    observation: ClimateObservation
    ranking: CropRanking
    provider_error: Optional[str] = None


# ---------------------------------------------------------------------------#
#  3.  HAZARDS
# ---------------------------------------------------------------------------#
# Physically valid domain per field; anything outside is treated as absent
HAZARD_FIELD_DOMAINS: Dict[str, Tuple[float, float]] = {
    "river_discharge": (0.0, 500_000.0),      # m3/s
    "max_temp": (-80.0, 80.0),                # °C
    "min_temp": (-80.0, 80.0),
    "precipitation": (0.0, 2000.0),           # mm/day
    "heavy_precip_hours": (0.0, 24.0),        # h
    "wind_gust": (0.0, 500.0),                # km/h
    "wind_speed": (0.0, 500.0),
    "soil_moisture_surface": (0.0, 1.0),      # m3/m3
    "soil_moisture_root": (0.0, 1.0),
    "et0": (0.0, 30.0),                       # mm/day
    "vapor_pressure_deficit": (0.0, 20.0),    # kPa
    "pm2_5": (0.0, 5000.0),                   # µg/m3
    "pm10": (0.0, 5000.0),
    "ozone": (0.0, 5000.0),
}


class HazardObservation(_CamelModel):
    """
    Sparse single-day conditions for one location. Every field is optional;
    providers omit what they do not have.
    """

    river_discharge: Optional[float] = None
    max_temp: Optional[float] = None
    min_temp: Optional[float] = None
    precipitation: Optional[float] = None
    heavy_precip_hours: Optional[float] = None
    wind_gust: Optional[float] = None
    wind_speed: Optional[float] = None
    soil_moisture_surface: Optional[float] = None
    soil_moisture_root: Optional[float] = None
    et0: Optional[float] = None
    vapor_pressure_deficit: Optional[float] = None
    pm2_5: Optional[float] = Field(None, alias="pm2_5")
    pm10: Optional[float] = None
    ozone: Optional[float] = None

    @field_validator("*")
    def _absent_when_out_of_domain(cls, v, info):
        if v is None:
            return None
        lo, hi = HAZARD_FIELD_DOMAINS[info.field_name]
        if not math.isfinite(v) or not (lo <= v <= hi):
            logger.debug(f"Dropping out-of-domain {info.field_name}={v}")
            return None
        return v

    def present_fields(self) -> Set[str]:
        return {name for name, value in self if value is not None}


class HazardScoreResult(_CamelModel):
    hazard: HazardEnum
    percent: Optional[int] = Field(None, ge=0, le=100, description="None = insufficient data")
    severity: SeverityEnum = SeverityEnum.unknown
    inputs: Dict[str, Optional[float]] = Field(default_factory=dict)


class HazardAssessment(_CamelModel):
    results: List[HazardScoreResult] = Field(default_factory=list)
    status: ScoringStatus = ScoringStatus.ok
    error: Optional[str] = None

    @computed_field
    @property
    def scores(self) -> Dict[HazardEnum, Optional[int]]:
        return {r.hazard: r.percent for r in self.results}

    @property
    def failed(self) -> bool:
        return self.status is ScoringStatus.failed


class HazardSummary(_CamelModel):
    key: HazardEnum
    display_name: str
    description: str
    required_fields: List[str]
    optional_fields: List[str]


# ---------------------------------------------------------------------------#
#  4.  LOCATION-BASED REQUESTS
# ---------------------------------------------------------------------------#
class GeocodedPlace(_CamelModel):
    name: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    country: Optional[str] = None
    admin1: Optional[str] = Field(None, description="First-level region, e.g. state")


class LocationRequest(_CamelModel):
    """
    A point given either as coordinates or as a place name to geocode.
    When both are present the coordinates win and `name` is only echoed.
    """

    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    name: Optional[str] = Field(None, description="Place name; geocoded when coordinates are omitted")
    country: Optional[str] = None
    start_year: Optional[int] = Field(None, ge=1981, le=2200)
    end_year: Optional[int] = Field(None, ge=1981, le=2200)

    @model_validator(mode="after")
    def _coordinates_or_name(self):
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")
        if self.latitude is None and not (self.name and self.name.strip()):
            raise ValueError("either coordinates or a place name is required")
        return self

    @model_validator(mode="after")
    def _start_not_after_end(self):
        if (
            self.start_year is not None
            and self.end_year is not None
            and self.start_year > self.end_year
        ):
            raise ValueError("start_year must be <= end_year")
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class ConditionsSnapshot(_CamelModel):
    observation: HazardObservation
    failed_providers: List[str] = Field(default_factory=list)


class HazardReport(_CamelModel):
    location: LocationRequest
    observation: HazardObservation
    assessment: HazardAssessment
    failed_providers: List[str] = Field(default_factory=list)


# CropSuggestion refers forward to LocationRequest
CropSuggestion.model_rebuild()
