"""
Abstract interfaces for scoring input providers.
Any weather/climate provider must implement one of these.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from models import ClimateSeries, ConditionsSnapshot, GeocodedPlace


class ProviderError(RuntimeError):
    """A provider request failed or returned an unusable payload"""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class _ConfiguredSource(ABC):
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            config: Provider-specific settings (base URLs, timeouts, ...)
        """
        self.config = config or {}

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Identifier for this data source"""
        pass


class ClimateHistorySource(_ConfiguredSource):
    """Multi-year monthly climate samples for crop suitability"""

    @abstractmethod
    def fetch_monthly_series(
        self,
        latitude: float,
        longitude: float,
        start_year: int,
        end_year: int,
    ) -> ClimateSeries:
        """
        Fetch monthly precipitation, temperature and root-zone moisture.

        Raises:
            ProviderError: request failed or payload was not understood
        """
        pass


class ConditionsSource(_ConfiguredSource):
    """Current/forecast conditions for hazard scoring"""

    @abstractmethod
    def fetch_conditions(self, latitude: float, longitude: float) -> ConditionsSnapshot:
        """
        Fetch one day of conditions. Partial provider failures must not
        raise; failed providers are listed on the snapshot and their fields
        stay absent.
        """
        pass


class LocationNotFoundError(LookupError):
    """A place name matched nothing in the geocoding service"""

    def __init__(self, query: str):
        super().__init__(f"Location not found: {query}")
        self.query = query


class GeocodingSource(_ConfiguredSource):
    """Place name to coordinates"""

    @abstractmethod
    def geocode(self, name: str) -> GeocodedPlace:
        """
        Resolve a free-text place name to its best match.

        Raises:
            LocationNotFoundError: nothing matched
            ProviderError: request failed or payload was not understood
        """
        pass
