"""
In-process provider stand-ins so no test touches the network.
"""
from typing import Dict

from models import ClimateSeries, ConditionsSnapshot, GeocodedPlace
from scoring.data_sources.base import (
    ClimateHistorySource,
    ConditionsSource,
    GeocodingSource,
    LocationNotFoundError,
    ProviderError,
)


class FakeHistorySource(ClimateHistorySource):
    def __init__(self, series: ClimateSeries = None, fail: bool = False):
        super().__init__()
        self.series = series
        self.fail = fail
        self.calls = 0
        self.requested = None

    @property
    def source_name(self) -> str:
        return "fake-history"

    def fetch_monthly_series(self, latitude, longitude, start_year, end_year):
        self.calls += 1
        self.requested = (latitude, longitude, start_year, end_year)
        if self.fail:
            raise ProviderError(self.source_name, "service unavailable")
        return self.series.model_copy(update={"start_year": start_year, "end_year": end_year})


class FakeConditionsSource(ConditionsSource):
    def __init__(self, snapshot: ConditionsSnapshot):
        super().__init__()
        self.snapshot = snapshot
        self.calls = 0

    @property
    def source_name(self) -> str:
        return "fake-conditions"

    def fetch_conditions(self, latitude, longitude):
        self.calls += 1
        return self.snapshot


class FakeGeocoder(GeocodingSource):
    def __init__(self, places: Dict[str, GeocodedPlace] = None, fail: bool = False):
        super().__init__()
        self.places = places or {}
        self.fail = fail
        self.calls = 0

    @property
    def source_name(self) -> str:
        return "fake-geocoder"

    def geocode(self, name):
        self.calls += 1
        if self.fail:
            raise ProviderError(self.source_name, "service unavailable")
        try:
            return self.places[name.strip().lower()]
        except KeyError:
            raise LocationNotFoundError(name)
