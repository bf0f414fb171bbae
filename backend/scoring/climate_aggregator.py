"""
Collapse multi-year monthly climate samples into one representative
ClimateObservation for crop scoring.
"""
import logging
import math
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from models import CLIMATE_FALLBACKS, ClimateObservation, ClimateSeries

logger = logging.getLogger(__name__)

MOISTURE_ACCEPT_MAX = 1.5   # wetness readings above this are rejected, (1, 1.5] clamp to 1


def _parse_period(key: Any) -> Optional[Tuple[int, int]]:
    """'YYYYMM' -> (year, month); None for annual rows ('YYYY13') or junk."""
    text = str(key).strip()
    if len(text) != 6 or not text.isdigit():
        return None
    year, month = int(text[:4]), int(text[4:])
    if not 1 <= month <= 12:
        return None
    return year, month


def _to_frame(samples: Mapping[str, Any]) -> pd.DataFrame:
    rows = []
    for key, value in (samples or {}).items():
        period = _parse_period(key)
        if period is None or value is None:
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(number):
            rows.append((period[0], period[1], number))

    df = pd.DataFrame(rows, columns=["year", "month", "value"])
    return df.astype({"year": "int64", "month": "int64", "value": "float64"})


class ClimateAggregator:
    """Reduces monthly series to per-year values, then to multi-year means"""

    def aggregate(self, series: ClimateSeries) -> ClimateObservation:
        """
        Build a ClimateObservation from raw monthly samples.

        Per year: precipitation is summed, temperature and moisture are
        averaged over the months present. A year with no valid samples for a
        variable contributes 0 for it. The per-year values are then averaged
        over every year in the range. Aggregates that come out non-finite or
        exactly 0 are replaced with the fixed fallback and listed in
        `fallback_fields`.
        """
        frames = {
            "precipitation": _to_frame(series.precipitation),
            "temperature": _to_frame(series.temperature),
            "soil_moisture": _to_frame(series.soil_moisture),
        }
        years = self._year_range(series, frames)
        logger.info(f"Aggregating climate samples over {len(years)} year(s)")

        aggregates = {
            "yearly_rain": self._multi_year_mean(
                self.yearly_precipitation(frames["precipitation"]), years
            ),
            "avg_temp": self._multi_year_mean(
                self.yearly_temperature(frames["temperature"]), years
            ),
            "soil_moisture": self._multi_year_mean(
                self.yearly_moisture(frames["soil_moisture"]), years
            ),
        }

        values: Dict[str, float] = {}
        fallback_fields = []
        for field, value in aggregates.items():
            if not math.isfinite(value) or value == 0:
                values[field] = CLIMATE_FALLBACKS[field]
                fallback_fields.append(field)
            else:
                values[field] = value

        if fallback_fields:
            logger.warning(f"Using fallback values for: {fallback_fields}")

        return ClimateObservation(
            avg_temp=values["avg_temp"],
            yearly_rain=values["yearly_rain"],
            soil_moisture=values["soil_moisture"],
            fallback_fields=[f for f in CLIMATE_FALLBACKS if f in fallback_fields],
        )

    # ---------- per-year reductions -------------------------------------
    @staticmethod
    def yearly_precipitation(df: pd.DataFrame) -> pd.Series:
        valid = df[df["value"] >= 0]
        return valid.groupby("year")["value"].sum()

    @staticmethod
    def yearly_temperature(df: pd.DataFrame) -> pd.Series:
        valid = df[(df["value"] > -80) & (df["value"] < 80)]
        return valid.groupby("year")["value"].mean()

    @staticmethod
    def yearly_moisture(df: pd.DataFrame) -> pd.Series:
        valid = df[(df["value"] >= 0) & (df["value"] <= MOISTURE_ACCEPT_MAX)]
        clamped = valid.assign(value=valid["value"].clip(0.0, 1.0))
        return clamped.groupby("year")["value"].mean()

    # ---------- helpers --------------------------------------------------
    @staticmethod
    def _year_range(series: ClimateSeries, frames: Dict[str, pd.DataFrame]) -> range:
        present = [int(y) for df in frames.values() for y in df["year"].unique()]
        start = series.start_year if series.start_year is not None else (min(present) if present else None)
        end = series.end_year if series.end_year is not None else (max(present) if present else None)
        if start is None or end is None or start > end:
            return range(0)
        return range(start, end + 1)

    @staticmethod
    def _multi_year_mean(per_year: pd.Series, years: range) -> float:
        if len(years) == 0:
            return float("nan")
        full = per_year.reindex(list(years), fill_value=0.0)
        return float(np.mean(full.to_numpy(dtype=float)))


def aggregate_climate(series: ClimateSeries, aggregator: Optional[ClimateAggregator] = None) -> ClimateObservation:
    """Functional entry point: series -> ClimateObservation"""
    return (aggregator or ClimateAggregator()).aggregate(series)
