import pytest

from cache_manager import CacheManager
from models import ClimateSeries, ConditionsSnapshot, GeocodedPlace, HazardObservation
from scoring.scoring_pipeline import ScoringPipeline

from fakes import FakeConditionsSource, FakeGeocoder, FakeHistorySource


def _monthly(year: int, value: float) -> dict:
    return {f"{year}{month:02d}": value for month in range(1, 13)}


@pytest.fixture
def climate_series():
    return ClimateSeries(
        precipitation={**_monthly(2023, 60.0), **_monthly(2024, 40.0)},
        temperature={**_monthly(2023, 22.0), **_monthly(2024, 26.0)},
        soil_moisture={**_monthly(2023, 0.3), **_monthly(2024, 0.4)},
    )


@pytest.fixture
def conditions_snapshot():
    # agro endpoint down: no drought inputs
    return ConditionsSnapshot(
        observation=HazardObservation(
            river_discharge=100.0,
            min_temp=3.0,
            max_temp=30.0,
            precipitation=0.0,
        ),
        failed_providers=["agro"],
    )


@pytest.fixture
def history_source(climate_series):
    return FakeHistorySource(climate_series)


@pytest.fixture
def conditions_source(conditions_snapshot):
    return FakeConditionsSource(conditions_snapshot)


@pytest.fixture
def geocoder():
    return FakeGeocoder({
        "nagpur": GeocodedPlace(
            name="Nagpur", latitude=21.1458, longitude=79.0882, country="India", admin1="Maharashtra",
        ),
    })


@pytest.fixture
def pipeline(history_source, conditions_source, geocoder):
    return ScoringPipeline(history_source, conditions_source, cache=CacheManager(), geocoder=geocoder)
