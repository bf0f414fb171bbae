"""
NASA POWER monthly point data: precipitation (PRECTOTCORR), 2 m
temperature (T2M) and root-zone wetness (GWETROOT, or GWETPROF when the
root-zone series is not served).
"""
import logging
from typing import Any, Dict, Optional

import requests

from config import settings
from models import ClimateSeries
from .base import ClimateHistorySource, ProviderError

logger = logging.getLogger(__name__)

POWER_PARAMETERS = ("PRECTOTCORR", "T2M", "GWETROOT")
MOISTURE_PARAMETERS = ("GWETROOT", "GWETPROF")


def parse_power_monthly(
    payload: Dict[str, Any],
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
) -> ClimateSeries:
    """
    Turn a NASA POWER monthly JSON payload into a ClimateSeries.

    Fill values (-999) and annual rows are left in place; the aggregator's
    validity filters drop them.
    """
    properties = payload.get("properties") if isinstance(payload, dict) else None
    parameter = properties.get("parameter") if isinstance(properties, dict) else None
    if not isinstance(parameter, dict):
        raise ProviderError("NASA POWER", "unexpected response, no properties.parameter")

    moisture_key = next((k for k in MOISTURE_PARAMETERS if parameter.get(k)), None)
    if moisture_key is None:
        logger.warning("NASA POWER returned no soil wetness series")
        moisture = {}
    else:
        moisture = parameter[moisture_key]

    return ClimateSeries(
        precipitation=parameter.get("PRECTOTCORR") or {},
        temperature=parameter.get("T2M") or {},
        soil_moisture=moisture,
        start_year=start_year,
        end_year=end_year,
    )


class NASAPowerSource(ClimateHistorySource):
    """NASA POWER agroclimatology (community=AG) monthly endpoint"""

    @property
    def source_name(self) -> str:
        return "NASA POWER"

    def fetch_monthly_series(
        self,
        latitude: float,
        longitude: float,
        start_year: int,
        end_year: int,
    ) -> ClimateSeries:
        payload = self.fetch_payload(latitude, longitude, start_year, end_year)
        return parse_power_monthly(payload, start_year, end_year)

    def fetch_payload(
        self,
        latitude: float,
        longitude: float,
        start_year: int,
        end_year: int,
    ) -> Dict[str, Any]:
        url = self.config.get("url", settings.NASA_POWER_URL)
        params = {
            "start": start_year,
            "end": end_year,
            "latitude": latitude,
            "longitude": longitude,
            "community": "AG",
            "parameters": ",".join(POWER_PARAMETERS),
            "format": "JSON",
        }
        logger.info(f"Fetching NASA POWER monthly data for ({latitude}, {longitude}) {start_year}-{end_year}")
        try:
            resp = requests.get(
                url,
                params=params,
                headers={"User-Agent": settings.USER_AGENT, "Accept": "application/json"},
                timeout=self.config.get("timeout", settings.PROVIDER_TIMEOUT_SECONDS),
            )
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(self.source_name, f"request failed: {e}") from e
