"""
Open-Meteo conditions for hazard scoring, from three independent endpoints:
 - flood: daily river discharge
 - forecast: daily temperature/precipitation/wind plus hourly air quality
 - agro: daily soil moisture, ET0 and vapor pressure deficit

The endpoints are fetched concurrently, each with its own timeout. A failed
endpoint only leaves its own fields absent.
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional

import requests

from config import settings
from models import ConditionsSnapshot, HazardObservation
from .base import ConditionsSource, ProviderError

logger = logging.getLogger(__name__)

FLOOD = "flood"
FORECAST = "forecast"
AGRO = "agro"


# ---------- payload parsing ------------------------------------------------
def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _first(values: Any) -> Optional[float]:
    if isinstance(values, list) and values:
        return _number(values[0])
    return None


def _last(values: Any) -> Optional[float]:
    if isinstance(values, list) and values:
        return _number(values[-1])
    return None


def parse_flood(payload: Dict[str, Any]) -> Dict[str, Optional[float]]:
    daily = (payload or {}).get("daily") or {}
    return {"river_discharge": _last(daily.get("river_discharge"))}


def parse_forecast(payload: Dict[str, Any]) -> Dict[str, Optional[float]]:
    """First daily value for weather, latest hourly value for pollutants"""
    daily = (payload or {}).get("daily") or {}
    hourly = (payload or {}).get("hourly") or {}
    return {
        "max_temp": _first(daily.get("temperature_2m_max")),
        "min_temp": _first(daily.get("temperature_2m_min")),
        "precipitation": _first(daily.get("precipitation_sum")),
        "heavy_precip_hours": _first(daily.get("heavy_precipitation_hours")),
        "wind_gust": _first(daily.get("windgusts_10m_max")),
        "wind_speed": _first(daily.get("windspeed_10m_max")),
        "pm2_5": _last(hourly.get("pm2_5")),
        "pm10": _last(hourly.get("pm10")),
        "ozone": _last(hourly.get("ozone")),
    }


def parse_agro(payload: Dict[str, Any]) -> Dict[str, Optional[float]]:
    daily = (payload or {}).get("daily") or {}
    return {
        "soil_moisture_surface": _first(daily.get("soil_moisture_0_7cm")),
        "soil_moisture_root": _first(daily.get("soil_moisture_7_28cm")),
        "et0": _first(daily.get("et0_fao_evapotranspiration")),
        "vapor_pressure_deficit": _first(daily.get("vapor_pressure_deficit")),
    }


PARSERS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Optional[float]]]] = {
    FLOOD: parse_flood,
    FORECAST: parse_forecast,
    AGRO: parse_agro,
}


def build_observation(payloads: Dict[str, Dict[str, Any]]) -> HazardObservation:
    """
    Merge whichever provider payloads arrived into one HazardObservation.
    Providers missing from `payloads` simply contribute nothing.
    """
    fields: Dict[str, Optional[float]] = {}
    for provider, payload in payloads.items():
        fields.update(PARSERS[provider](payload))
    return HazardObservation(**fields)


# ---------- data source ----------------------------------------------------
class OpenMeteoSource(ConditionsSource):
    """Open-Meteo flood, forecast and agrometeorology APIs"""

    @property
    def source_name(self) -> str:
        return "Open-Meteo"

    def _requests(self, latitude: float, longitude: float) -> Dict[str, Dict[str, Any]]:
        base = {"latitude": latitude, "longitude": longitude}
        return {
            FLOOD: {
                "url": self.config.get("flood_url", settings.OPEN_METEO_FLOOD_URL),
                "params": {**base, "daily": "river_discharge"},
            },
            FORECAST: {
                "url": self.config.get("forecast_url", settings.OPEN_METEO_FORECAST_URL),
                "params": {
                    **base,
                    "daily": ",".join([
                        "temperature_2m_max",
                        "temperature_2m_min",
                        "precipitation_sum",
                        "windgusts_10m_max",
                        "windspeed_10m_max",
                        "heavy_precipitation_hours",
                    ]),
                    "hourly": "pm2_5,pm10,ozone",
                    "timezone": "auto",
                },
            },
            AGRO: {
                "url": self.config.get("agro_url", settings.OPEN_METEO_AGRO_URL),
                "params": {
                    **base,
                    "daily": ",".join([
                        "soil_moisture_0_7cm",
                        "soil_moisture_7_28cm",
                        "et0_fao_evapotranspiration",
                        "vapor_pressure_deficit",
                    ]),
                    "timezone": "auto",
                },
            },
        }

    def _get_json(self, provider: str, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = requests.get(
                url,
                params=params,
                headers={"User-Agent": settings.USER_AGENT, "Accept": "application/json"},
                timeout=self.config.get("timeout", settings.PROVIDER_TIMEOUT_SECONDS),
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(f"{self.source_name} {provider}", str(e)) from e
        if not isinstance(payload, dict):
            raise ProviderError(f"{self.source_name} {provider}", "response is not a JSON object")
        return payload

    def fetch_conditions(self, latitude: float, longitude: float) -> ConditionsSnapshot:
        requests_by_provider = self._requests(latitude, longitude)
        payloads: Dict[str, Dict[str, Any]] = {}
        failed: List[str] = []

        logger.info(f"Fetching Open-Meteo conditions for ({latitude}, {longitude})")
        with ThreadPoolExecutor(max_workers=len(requests_by_provider)) as pool:
            futures = {
                provider: pool.submit(self._get_json, provider, req["url"], req["params"])
                for provider, req in requests_by_provider.items()
            }
            for provider, future in futures.items():
                try:
                    payloads[provider] = future.result()
                except ProviderError as e:
                    logger.warning(f"Provider failed, its hazards lose their inputs: {e}")
                    failed.append(provider)

        return ConditionsSnapshot(observation=build_observation(payloads), failed_providers=failed)
