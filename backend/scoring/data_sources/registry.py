"""
Provider Data Source Registry
Factory pattern for obtaining the configured climate/conditions providers
"""
import logging
from typing import Any, Dict, List, Optional, Type, Union

from .base import ClimateHistorySource, ConditionsSource, GeocodingSource
from .geocoding import OpenMeteoGeocodingSource
from .nasa_power import NASAPowerSource
from .open_meteo import OpenMeteoSource

logger = logging.getLogger(__name__)

SourceClass = Union[Type[ClimateHistorySource], Type[ConditionsSource], Type[GeocodingSource]]

# Registry mapping source names to classes
_SOURCES: Dict[str, SourceClass] = {
    "nasa_power": NASAPowerSource,
    "open_meteo": OpenMeteoSource,
    "open_meteo_geocoding": OpenMeteoGeocodingSource,
}

# Global configuration for sources (set at app startup)
_SOURCE_CONFIGS: Dict[str, Dict[str, Any]] = {}


def register_source(name: str, source_class: SourceClass) -> None:
    """
    Register a new provider data source

    Example:
        register_source('station_csv', StationCSVSource)
    """
    if not issubclass(source_class, (ClimateHistorySource, ConditionsSource, GeocodingSource)):
        raise TypeError(
            f"{source_class.__name__} must inherit from a provider base class"
        )
    _SOURCES[name] = source_class
    logger.info(f"Registered provider source: {name}")


def configure_source(name: str, config: Dict[str, Any]) -> None:
    """
    Set configuration for a data source. Call at app startup.

    Example:
        configure_source('nasa_power', {'timeout': 30})
    """
    if name not in _SOURCES:
        raise ValueError(f"Unknown source: {name}. Register it first.")
    _SOURCE_CONFIGS[name] = config
    logger.info(f"Configured source: {name}")


def get_source(name: str, config: Optional[Dict[str, Any]] = None):
    """
    Get an instance of the specified data source

    Args:
        name: Source identifier ('nasa_power', 'open_meteo', ...)
        config: Optional config override (uses global config if not provided)

    Raises:
        ValueError: If source name is not registered
    """
    if name not in _SOURCES:
        available = ", ".join(_SOURCES.keys())
        raise ValueError(f"Unknown provider source: '{name}'. Available sources: {available}")

    instance_config = config or _SOURCE_CONFIGS.get(name, {})
    return _SOURCES[name](config=instance_config)


def list_sources() -> List[str]:
    return list(_SOURCES.keys())
