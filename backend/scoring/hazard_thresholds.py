"""
Single source of truth for all hazard reference constants and weights.
Adding a new hazard = add one definition here and register its scoring
function in scoring/hazards.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Tuple

from models import HazardEnum, HazardSummary


def _frozen(**values: float) -> Mapping[str, float]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class HazardDefinition:
    """Reference constants and sub-factor weights for one hazard"""
    key: HazardEnum
    display_name: str
    required_fields: Tuple[str, ...]     # all must be present, else no score
    optional_fields: Tuple[str, ...]     # treated as 0 when absent
    constants: Mapping[str, float] = field(default_factory=_frozen)
    weights: Mapping[str, float] = field(default_factory=_frozen)
    description: str = ""

    def input_fields(self) -> Tuple[str, ...]:
        """Every observation field this hazard reads"""
        return self.required_fields + self.optional_fields

    def summary(self) -> HazardSummary:
        return HazardSummary(
            key=self.key,
            display_name=self.display_name,
            description=self.description,
            required_fields=list(self.required_fields),
            optional_fields=list(self.optional_fields),
        )


# Hazard Registry
_HAZARDS = {
    HazardEnum.flood: HazardDefinition(
        key=HazardEnum.flood,
        display_name="Flood Risk",
        required_fields=(),
        optional_fields=("river_discharge", "precipitation"),
        constants=_frozen(
            discharge_threshold=50.0,   # m3/s, moderate river discharge
            precip_threshold=50.0,      # mm/day, heavy rain
            raw_ceiling=4.0,
        ),
        weights=_frozen(discharge=0.6, precipitation=0.4),
        description="River discharge plus same-day precipitation",
    ),

    HazardEnum.drought: HazardDefinition(
        key=HazardEnum.drought,
        display_name="Drought Risk",
        required_fields=("soil_moisture_surface", "soil_moisture_root", "et0"),
        optional_fields=(),
        constants=_frozen(
            safe_moisture=0.25,         # m3/m3, below this the soil is drying
            et0_reference=6.0,          # mm/day, high water demand
        ),
        weights=_frozen(root=0.55, surface=0.30, et0=0.15),
        description="Soil dryness in the surface and root zone plus evaporative demand",
    ),

    HazardEnum.heat: HazardDefinition(
        key=HazardEnum.heat,
        display_name="Heatwave Risk",
        required_fields=("max_temp",),
        optional_fields=("vapor_pressure_deficit",),
        constants=_frozen(
            stress_onset=30.0,          # °C
            extreme=45.0,               # °C
            vpd_reference=6.0,          # kPa
        ),
        weights=_frozen(temperature=0.75, vpd=0.25),
        description="Daily maximum temperature and atmospheric dryness",
    ),

    HazardEnum.cold: HazardDefinition(
        key=HazardEnum.cold,
        display_name="Cold / Frost Risk",
        required_fields=("min_temp",),
        optional_fields=(),
        constants=_frozen(
            safe=8.0,                   # °C, no chilling damage at or above
            critical=-2.0,              # °C, severe frost
        ),
        description="Daily minimum temperature against frost thresholds",
    ),

    HazardEnum.wind: HazardDefinition(
        key=HazardEnum.wind,
        display_name="Cyclone / Severe Wind Risk",
        required_fields=(),
        optional_fields=("wind_gust", "wind_speed"),
        constants=_frozen(
            gust_reference=120.0,       # km/h
            speed_reference=80.0,       # km/h
        ),
        weights=_frozen(gust=0.7, speed=0.3),
        description="Peak gusts and sustained wind",
    ),

    HazardEnum.rain: HazardDefinition(
        key=HazardEnum.rain,
        display_name="Heavy Rain / Cloudburst Risk",
        required_fields=(),
        optional_fields=("precipitation", "heavy_precip_hours"),
        constants=_frozen(
            precip_reference=100.0,     # mm/day, extreme
            hours_reference=6.0,        # h of heavy precipitation
        ),
        weights=_frozen(precipitation=0.8, hours=0.2),
        description="Daily precipitation amount and heavy-rain duration",
    ),

    HazardEnum.air: HazardDefinition(
        key=HazardEnum.air,
        display_name="Air Quality Stress",
        required_fields=(),
        optional_fields=("pm2_5", "pm10", "ozone"),
        constants=_frozen(
            pm2_5_reference=60.0,       # µg/m3
            pm10_reference=120.0,
            ozone_reference=180.0,
            ratio_ceiling=2.0,
            normalizer=2.0,
        ),
        weights=_frozen(pm2_5=0.6, pm10=0.3, ozone=0.1),
        description="Particulate matter and ozone against stress thresholds",
    ),
}

HAZARDS: Mapping[HazardEnum, HazardDefinition] = MappingProxyType(_HAZARDS)


def get_hazard(hazard_name: str) -> HazardDefinition:
    """Get hazard definition by name"""
    try:
        key = HazardEnum(hazard_name)
    except ValueError:
        raise ValueError(f"Unknown hazard: {hazard_name}. Available: {list_hazards()}")
    return HAZARDS[key]


def list_hazards() -> List[str]:
    """List all available hazard names"""
    return [h.value for h in HAZARDS]
