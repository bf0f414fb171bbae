"""
Open-Meteo geocoding: free-text place name to coordinates, best match only.
"""
import logging
from typing import Any, Dict

import requests

from config import settings
from models import GeocodedPlace
from .base import GeocodingSource, LocationNotFoundError, ProviderError

logger = logging.getLogger(__name__)

PROVIDER = "Open-Meteo geocoding"


def parse_geocoding(payload: Dict[str, Any], query: str) -> GeocodedPlace:
    """
    Take the top result of a geocoding search. The service omits `results`
    entirely when nothing matches.
    """
    if not isinstance(payload, dict):
        raise ProviderError(PROVIDER, "response is not a JSON object")

    results = payload.get("results") or []
    if not isinstance(results, list):
        raise ProviderError(PROVIDER, "unexpected response, results is not a list")
    if not results:
        raise LocationNotFoundError(query)

    top = results[0]
    if not isinstance(top, dict):
        raise ProviderError(PROVIDER, "unexpected result entry")
    try:
        return GeocodedPlace(
            name=top.get("name") or query,
            latitude=top["latitude"],
            longitude=top["longitude"],
            country=top.get("country"),
            admin1=top.get("admin1"),
        )
    except (KeyError, ValueError) as e:
        raise ProviderError(PROVIDER, f"unusable result: {e}") from e


class OpenMeteoGeocodingSource(GeocodingSource):

    @property
    def source_name(self) -> str:
        return PROVIDER

    def geocode(self, name: str) -> GeocodedPlace:
        query = (name or "").strip()
        if not query:
            raise LocationNotFoundError(name)

        params = {
            "name": query,
            "count": 1,
            "language": self.config.get("language", "en"),
            "format": "json",
        }
        logger.info(f"Geocoding '{query}'")
        try:
            resp = requests.get(
                self.config.get("url", settings.OPEN_METEO_GEOCODING_URL),
                params=params,
                headers={"User-Agent": settings.USER_AGENT, "Accept": "application/json"},
                timeout=self.config.get("timeout", settings.PROVIDER_TIMEOUT_SECONDS),
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(self.source_name, f"request failed: {e}") from e

        return parse_geocoding(payload, query)
