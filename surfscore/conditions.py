"""
Observation source backed by the bundled sample dataset.

Each CSV row is one hourly reading for one spot, with wind at the 10 m
reference height.  Callers get back an ``Observation``; the near-surface
wind is always derived from the reference reading, never read from disk.
When no reading exists for a spot/date the source substitutes a fallback
observation so a score can still be shown.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping, Optional, Tuple

import pandas as pd

from . import config
from .scoring import Observation

logger = logging.getLogger(__name__)

COLUMNS = [
    "spot_id",
    "time",
    "swell_height_m",
    "swell_period_s",
    "swell_direction_deg",
    "wave_height_m",
    "wave_period_s",
    "wind_speed_10m_kmh",
    "wind_direction_deg",
]

# Used when the dataset has nothing for the requested spot/date
FALLBACK_OBSERVATION = Observation(
    swell_height=1.2,
    swell_period=11.0,
    swell_direction=290.0,
    wave_height=1.3,
    wave_period=10.0,
    wind_speed_ref=7.0,
    wind_direction=90.0,
)
FALLBACK_NOTICE = "No recent readings for this spot; showing typical conditions."


@lru_cache(maxsize=1)
def load_conditions() -> pd.DataFrame:
    """Load the conditions CSV into a pandas DataFrame.

    The result is cached so repeated calls are cheap.  ``time`` stays a
    string (ISO 8601, UTC) so date prefixes can be matched directly.
    """
    path = config.data_path()
    df = pd.read_csv(path, dtype={"spot_id": str, "time": str})
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")
    df["spot_id"] = df["spot_id"].str.strip().str.lower()
    logger.debug("Loaded %d readings from %s", len(df), path)
    return df


def _num(row: Mapping[str, Any], key: str) -> float:
    val = row.get(key)
    if val is None or pd.isna(val):
        return 0.0
    return float(val)


def observation_from_row(row: Mapping[str, Any]) -> Observation:
    """Build an ``Observation`` from one dataset row (missing values -> 0)."""
    return Observation(
        swell_height=_num(row, "swell_height_m"),
        swell_period=_num(row, "swell_period_s"),
        swell_direction=_num(row, "swell_direction_deg"),
        wave_height=_num(row, "wave_height_m"),
        wave_period=_num(row, "wave_period_s"),
        wind_speed_ref=_num(row, "wind_speed_10m_kmh"),
        wind_direction=_num(row, "wind_direction_deg"),
    )


def readings_for_spot(spot_id: str) -> pd.DataFrame:
    """All readings for a spot, oldest first."""
    df = load_conditions()
    subset = df[df["spot_id"] == spot_id.strip().lower()].copy()
    subset.sort_values("time", inplace=True)
    return subset


def _pick_reading(readings: pd.DataFrame, date: Optional[str]) -> Optional[pd.Series]:
    """Select a representative reading.

    For a ``YYYY-MM-DD`` date, prefers 12:00Z, otherwise the first reading
    of that date.  Without a date, returns the earliest reading.
    """
    if readings.empty:
        return None
    if not date:
        return readings.iloc[0]
    on_date = readings[readings["time"].str.startswith(f"{date}T")]
    if on_date.empty:
        return None
    noon = on_date[on_date["time"].str.startswith(f"{date}T12:00")]
    return noon.iloc[0] if not noon.empty else on_date.iloc[0]


def retrieve_observation(spot_id: str, date: Optional[str] = None) -> Tuple[Observation, Optional[str]]:
    """Return the observation for a spot and an optional notice.

    The notice is ``None`` for a real reading, or a short message when the
    fallback observation had to be used.
    """
    row = _pick_reading(readings_for_spot(spot_id), date)
    if row is None:
        logger.warning("No readings for spot=%s date=%s; using fallback observation", spot_id, date)
        return FALLBACK_OBSERVATION, FALLBACK_NOTICE
    return observation_from_row(row.to_dict()), None
