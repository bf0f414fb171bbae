"""
Provider Data Sources
Pluggable climate history and current-conditions providers
"""

from .base import (
    ClimateHistorySource,
    ConditionsSource,
    GeocodingSource,
    LocationNotFoundError,
    ProviderError,
)
from .geocoding import OpenMeteoGeocodingSource, parse_geocoding
from .nasa_power import NASAPowerSource, parse_power_monthly
from .open_meteo import OpenMeteoSource, build_observation
from .registry import (
    get_source,
    register_source,
    configure_source,
    list_sources,
)

__all__ = [
    # Base classes
    'ClimateHistorySource',
    'ConditionsSource',
    'GeocodingSource',
    'LocationNotFoundError',
    'ProviderError',

    # Implementations
    'NASAPowerSource',
    'OpenMeteoSource',
    'OpenMeteoGeocodingSource',
    'parse_power_monthly',
    'build_observation',
    'parse_geocoding',

    # Registry
    'get_source',
    'register_source',
    'configure_source',
    'list_sources',
]
