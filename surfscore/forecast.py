"""
Scoring pipeline for one or many spots.

Pulls an observation from the data source, runs it through the scoring
engine for the requested ability and shapes the result for display.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .conditions import observation_from_row, readings_for_spot, retrieve_observation
from .scoring import AbilityTier, Observation, describe_score, score_spot
from .spots import Spot

logger = logging.getLogger(__name__)


def observation_fields(obs: Observation) -> Dict[str, float]:
    return {
        "swellHeight": round(obs.swell_height, 1),
        "swellPeriod": round(obs.swell_period, 1),
        "swellDirection": round(obs.swell_direction),
        "waveHeight": round(obs.wave_height, 1),
        "wavePeriod": round(obs.wave_period, 1),
        "windSpeed10m": round(obs.wind_speed_ref, 1),
        "windSpeed2m": round(obs.wind_speed_near_surface, 1),
        "windDirection": round(obs.wind_direction),
    }


def assess_spot(spot: Spot, ability: AbilityTier, date: Optional[str] = None) -> Dict[str, Any]:
    """Score one spot and return a display-ready payload.

    Args:
        spot: Catalog entry for the spot.
        ability: Already-resolved ability tier.
        date: Optional ``YYYY-MM-DD`` date; defaults to the earliest reading.

    Returns:
        Dict with spot id/name, observation fields (rounded for display),
        score (0–10, one decimal), rating, reasons and an optional notice.
    """
    obs, notice = retrieve_observation(spot.id, date)
    result = score_spot(obs, spot.profile, ability)
    logger.debug("Scored %s for %s: %.2f", spot.id, ability.value, result.score)
    payload: Dict[str, Any] = {
        "spotId": spot.id,
        "spotName": spot.name,
        **observation_fields(obs),
        "score": round(result.score, 1),
        "rating": describe_score(result.score),
        "reasons": list(result.reasons),
    }
    if notice:
        payload["notice"] = notice
    return payload


def assess_spots(
    spots: Iterable[Spot],
    ability: AbilityTier,
    date: Optional[str] = None,
    ranked: bool = False,
) -> List[Dict[str, Any]]:
    """Score several spots; with ``ranked`` the best come first (ties keep catalog order)."""
    results = [assess_spot(spot, ability, date) for spot in spots]
    if ranked:
        results.sort(key=lambda r: r["score"], reverse=True)
    return results


def outlook_for_spot(spot: Spot, ability: AbilityTier) -> pd.DataFrame:
    """Return every reading for the spot, oldest first, with scores attached.

    Adds ``wind_speed_2m_kmh``, ``score`` and ``reasons`` columns to the
    dataset rows.  Empty when the spot has no readings.
    """
    subset = readings_for_spot(spot.id)
    if subset.empty:
        return subset
    observations = [observation_from_row(r) for r in subset.to_dict("records")]
    results = [score_spot(obs, spot.profile, ability) for obs in observations]
    subset["wind_speed_2m_kmh"] = [round(obs.wind_speed_near_surface, 1) for obs in observations]
    subset["score"] = [round(r.score, 1) for r in results]
    subset["reasons"] = [list(r.reasons) for r in results]
    return subset


def outlook_hours(spot: Spot, ability: AbilityTier) -> List[Dict[str, Any]]:
    """Display-ready version of ``outlook_for_spot``, one dict per reading.

    Values come from the parsed ``Observation`` rather than raw cells, so a
    gap in the dataset shows up as 0 instead of NaN.
    """
    hours = []
    for row in outlook_for_spot(spot, ability).to_dict("records"):
        hours.append({
            "time": str(row["time"]),
            **observation_fields(observation_from_row(row)),
            "score": float(row["score"]),
            "reasons": list(row["reasons"]),
        })
    return hours
