"""
Temperature-driven hazards: heatwave and cold/frost.
"""
from models import HazardEnum, HazardObservation
from ..hazard_thresholds import HazardDefinition
from ..normalization import clamp, ratio
from .registry import register_hazard


@register_hazard(HazardEnum.heat)
def heat_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    """
    Heat stress from the daily maximum temperature, 0 at stress onset and 1
    at the extreme, with vapor pressure deficit adding dryness stress.
    """
    c, w = hazard.constants, hazard.weights
    t_ratio = clamp((obs.max_temp - c["stress_onset"]) / (c["extreme"] - c["stress_onset"]))
    vpd_norm = ratio(obs.vapor_pressure_deficit, c["vpd_reference"])

    return w["temperature"] * t_ratio + w["vpd"] * vpd_norm


@register_hazard(HazardEnum.cold)
def cold_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    # 0 at or above the safe minimum, 1 at or below the critical frost level
    c = hazard.constants
    return clamp((c["safe"] - obs.min_temp) / (c["safe"] - c["critical"]))
