"""
Atmospheric hazards: severe wind and air-quality stress.
"""
from models import HazardEnum, HazardObservation
from ..hazard_thresholds import HazardDefinition
from ..normalization import clamp, ratio
from .registry import register_hazard


@register_hazard(HazardEnum.wind)
def wind_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    c, w = hazard.constants, hazard.weights
    return (
        w["gust"] * ratio(obs.wind_gust, c["gust_reference"])
        + w["speed"] * ratio(obs.wind_speed, c["speed_reference"])
    )


@register_hazard(HazardEnum.air)
def air_quality_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    """
    Weighted PM2.5, PM10 and ozone against stress references. Each ratio may
    reach the ratio ceiling, so the weighted sum is divided back into [0, 1].
    """
    c, w = hazard.constants, hazard.weights
    ceiling = c["ratio_ceiling"]
    weighted = (
        w["pm2_5"] * ratio(obs.pm2_5, c["pm2_5_reference"], hi=ceiling)
        + w["pm10"] * ratio(obs.pm10, c["pm10_reference"], hi=ceiling)
        + w["ozone"] * ratio(obs.ozone, c["ozone_reference"], hi=ceiling)
    )
    return clamp(weighted / c["normalizer"])
