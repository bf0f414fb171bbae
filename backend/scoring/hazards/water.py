"""
Water-driven hazards: flood, drought and heavy rain.
"""
from models import HazardEnum, HazardObservation
from ..hazard_thresholds import HazardDefinition
from ..normalization import clamp, dryness, ratio
from .registry import register_hazard


@register_hazard(HazardEnum.flood)
def flood_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    """
    Flood risk from river discharge and same-day precipitation.

    Both ratios may exceed 1; the raw value is capped at the raw ceiling and
    the scorer then saturates it at 1 rather than rescaling.
    """
    c, w = hazard.constants, hazard.weights
    discharge = obs.river_discharge or 0.0
    precip = obs.precipitation or 0.0

    raw = (
        w["discharge"] * (discharge / c["discharge_threshold"])
        + w["precipitation"] * (precip / c["precip_threshold"])
    )
    return clamp(raw, 0.0, c["raw_ceiling"])


@register_hazard(HazardEnum.drought)
def drought_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    """
    Drought risk: low soil moisture plus high evapotranspiration demand.
    The root zone carries the most weight.
    """
    c, w = hazard.constants, hazard.weights
    surface = dryness(obs.soil_moisture_surface, c["safe_moisture"])
    root = dryness(obs.soil_moisture_root, c["safe_moisture"])
    et_factor = ratio(obs.et0, c["et0_reference"])

    return w["root"] * root + w["surface"] * surface + w["et0"] * et_factor


@register_hazard(HazardEnum.rain)
def heavy_rain_risk(obs: HazardObservation, hazard: HazardDefinition) -> float:
    c, w = hazard.constants, hazard.weights
    return (
        w["precipitation"] * ratio(obs.precipitation, c["precip_reference"])
        + w["hours"] * ratio(obs.heavy_precip_hours, c["hours_reference"])
    )
