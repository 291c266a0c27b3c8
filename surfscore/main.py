"""
FastAPI application for SurfScore.

Thin JSON routes over the scoring pipeline: current conditions and score
per spot, an hourly outlook for one spot, and the spot catalog.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from . import forecast
from .config import configure_logging
from .scoring import resolve_ability
from .spots import ALL_SPOTS, get_spot_by_id, get_spots_by_country, get_spots_by_region

configure_logging()

app = FastAPI(title="SurfScore")


def _spot_not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Spot not found"})


@app.get("/api/surf/conditions")
async def conditions(
    spot: Optional[str] = None,
    ability: Optional[str] = None,
    date: Optional[str] = None,
    ranked: bool = False,
):
    """Score one spot (``spot`` given) or every known spot.

    Unknown abilities fall back to intermediate.
    """
    tier = resolve_ability(ability)
    if spot:
        found = get_spot_by_id(spot)
        if found is None:
            return _spot_not_found()
        return forecast.assess_spot(found, tier, date)
    return forecast.assess_spots(ALL_SPOTS, tier, date, ranked=ranked)


@app.get("/api/surf/outlook")
async def outlook(spot: str, ability: Optional[str] = None):
    """Hourly scores for one spot, oldest first."""
    found = get_spot_by_id(spot)
    if found is None:
        return _spot_not_found()
    tier = resolve_ability(ability)
    hours = forecast.outlook_hours(found, tier)
    return {"spotId": found.id, "spotName": found.name, "ability": tier.value, "hours": hours}


@app.get("/api/spots")
async def spots(region: Optional[str] = None, country: Optional[str] = None):
    """List catalog spots, optionally filtered by region and/or country."""
    selected = ALL_SPOTS
    if region:
        selected = [s for s in selected if s in get_spots_by_region(region)]
    if country:
        selected = [s for s in selected if s in get_spots_by_country(country)]
    return [s.to_dict() for s in selected]
