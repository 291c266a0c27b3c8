"""
Static catalog of known surf spots.

Orientation is the compass bearing the break faces toward open water;
offshore wind blows from roughly orientation + 180.  Coordinates and
orientations are approximate and can be adjusted if needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .scoring import SpotProfile


@dataclass(frozen=True)
class Spot:
    id: str
    name: str
    lat: float
    lon: float
    orientation: float
    type: str  # 'beach' | 'reef' | 'harbour' | 'bay' | 'island'
    country: str
    county: str
    region: str

    @property
    def profile(self) -> SpotProfile:
        return SpotProfile(orientation=self.orientation)

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "orientation": self.orientation,
            "type": self.type,
            "country": self.country,
            "county": self.county,
            "region": self.region,
        }


CONNACHT_SPOTS: List[Spot] = [
    Spot("strandhill", "Strandhill", 54.2707, -8.6060, 285, "beach", "Ireland", "Sligo", "Connacht"),
    Spot("easkey", "Easkey", 54.2890, -8.9620, 340, "reef", "Ireland", "Sligo", "Connacht"),
    Spot("enniscrone", "Enniscrone", 54.2150, -9.0950, 300, "beach", "Ireland", "Sligo", "Connacht"),
    Spot("mullaghmore", "Mullaghmore Head", 54.4720, -8.4530, 320, "reef", "Ireland", "Sligo", "Connacht"),
    Spot("keel", "Keel Beach", 53.9720, -10.0750, 200, "beach", "Ireland", "Mayo", "Connacht"),
    Spot("carrowniskey", "Carrowniskey", 53.7160, -9.8900, 270, "beach", "Ireland", "Mayo", "Connacht"),
    Spot("lettergesh", "Lettergesh", 53.6130, -9.9500, 350, "beach", "Ireland", "Galway", "Connacht"),
]

# Add new regions here
ALL_SPOTS: List[Spot] = [
    *CONNACHT_SPOTS,
]


def get_spot_by_id(spot_id: str) -> Optional[Spot]:
    """Look up a spot by id (case-insensitive)."""
    key = (spot_id or "").strip().lower()
    for spot in ALL_SPOTS:
        if spot.id == key:
            return spot
    return None


def get_spots_by_region(region: str) -> List[Spot]:
    return [s for s in ALL_SPOTS if s.region.lower() == region.strip().lower()]


def get_spots_by_country(country: str) -> List[Spot]:
    return [s for s in ALL_SPOTS if s.country.lower() == country.strip().lower()]
