"""
Surf quality scoring.

Turns a single marine/wind observation for a spot into a 0–10 score plus a
short list of reasons, tuned to the surfer's ability.  Everything in here is
pure: no I/O, no logging, no shared state, so it is safe to call from any
number of threads.

Units: heights in metres, periods in seconds, wind in km/h, directions in
compass degrees (wind direction is where the wind blows *from*).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from .wind import wind_at_2m


class AbilityTier(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class AbilityProfile:
    """Ideal conditions for one ability tier."""

    height_band: Tuple[float, float]  # m
    period_band: Tuple[float, float]  # s
    wind_tolerance_kmh: float


# Beginners want small, gentle surf; advanced surfers want size and power.
ABILITY_PROFILES: Dict[AbilityTier, AbilityProfile] = {
    AbilityTier.BEGINNER: AbilityProfile(height_band=(0.5, 1.2), period_band=(7.0, 11.0), wind_tolerance_kmh=15.0),
    AbilityTier.INTERMEDIATE: AbilityProfile(height_band=(0.9, 2.0), period_band=(9.0, 14.0), wind_tolerance_kmh=25.0),
    AbilityTier.ADVANCED: AbilityProfile(height_band=(1.5, 3.5), period_band=(11.0, 18.0), wind_tolerance_kmh=35.0),
}

DEFAULT_ABILITY = AbilityTier.INTERMEDIATE

# Domain tuning constants
WEIGHTS = {
    "swell": 0.60,
    "wind": 0.25,
    "wave": 0.15,
}
BAND_FALLOFF = 1.5          # score hits 0 at 2/3 of the band edge away from it
PERIOD_IN_BAND_FLOOR = 8.5  # period score at the short edge of the ideal band
PERIOD_MULTIPLIER_FLOOR = 0.4
WIND_THRESH = {
    "light": 8.0,     # km/h at 2 m; below this direction barely matters
    "fresh": 20.0,    # km/h at 2 m; reported as strong from here
    "strong": 30.0,   # km/h at 2 m; full direction effect from here up
}
WIND_NEUTRAL_SCORE = 7.0
TOLERANCE_PENALTY_MAX = 5.0
OFFSHORE_MAX_DIFF = 45.0
CROSS_SHORE_MAX_DIFF = 90.0
CHOP_MARGIN_M = 0.5
NOTABLE_MARGIN = 0.10  # fraction of a band edge a value must clear to be reported


def resolve_ability(label: Optional[str]) -> AbilityTier:
    """Map a free-form ability label to a tier, defaulting to intermediate."""
    if isinstance(label, AbilityTier):
        return label
    if not isinstance(label, str):
        return DEFAULT_ABILITY
    try:
        return AbilityTier(label.strip().lower())
    except ValueError:
        return DEFAULT_ABILITY


@dataclass(frozen=True)
class Observation:
    """Environmental readings for one spot at one instant.

    ``wind_speed_ref`` is the 10 m reading; the near-surface speed is always
    derived from it and cannot be passed in.
    """

    swell_height: float
    swell_period: float
    swell_direction: float
    wave_height: float
    wave_period: float
    wind_speed_ref: float
    wind_direction: float

    @property
    def wind_speed_near_surface(self) -> float:
        return wind_at_2m(self.wind_speed_ref)


@dataclass(frozen=True)
class SpotProfile:
    orientation: float  # bearing the spot faces toward open water


@dataclass(frozen=True)
class ScoreResult:
    score: float
    reasons: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {"score": self.score, "reasons": list(self.reasons)}


def _non_negative(val: float) -> float:
    val = float(val)
    if not math.isfinite(val) or val < 0:
        return 0.0
    return val


def _wrap_degrees(deg: float) -> float:
    deg = float(deg)
    if not math.isfinite(deg):
        return 0.0
    return deg % 360.0


def _angular_distance(a: float, b: float) -> float:
    """Smallest absolute angular distance in degrees between two bearings."""
    diff = abs(a - b) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def offshore_bearing(spot_orientation: float) -> float:
    """Direction the wind must blow from to be straight offshore."""
    return (_wrap_degrees(spot_orientation) + 180.0) % 360.0


def classify_wind(wind_direction: float, spot_orientation: float) -> str:
    """Classify wind relative to a spot as 'offshore', 'cross-shore' or 'onshore'."""
    diff = _angular_distance(_wrap_degrees(wind_direction), offshore_bearing(spot_orientation))
    if diff < OFFSHORE_MAX_DIFF:
        return "offshore"
    if diff <= CROSS_SHORE_MAX_DIFF:
        return "cross-shore"
    return "onshore"


def _band_score(val: float, band: Tuple[float, float]) -> float:
    """Return a 0–10 score for how well ``val`` fits inside ``band``.

    - 10 inside [low, high]
    - Outside, falls off linearly with the distance to the nearest edge,
      normalized by that edge
    - Floored at 0
    """
    low, high = band
    if low <= val <= high:
        return 10.0
    if val < low:
        dist = (low - val) / low
    else:
        dist = (val - high) / high
    return max(0.0, 10.0 * (1.0 - BAND_FALLOFF * dist))


def _period_score(period: float, band: Tuple[float, float]) -> float:
    """Like ``_band_score`` but never penalizes a longer period."""
    low, high = band
    if period >= high:
        return 10.0
    if period >= low:
        return PERIOD_IN_BAND_FLOOR + (10.0 - PERIOD_IN_BAND_FLOOR) * (period - low) / (high - low)
    # Below the band, fall off from the in-band floor so the curve stays monotonic
    return PERIOD_IN_BAND_FLOOR * max(0.0, 1.0 - BAND_FALLOFF * (low - period) / low)


def _wind_strength(speed: float) -> float:
    """0 at or below the light threshold, ramping to 1 at the strong threshold."""
    light, strong = WIND_THRESH["light"], WIND_THRESH["strong"]
    return min(1.0, max(0.0, (speed - light) / (strong - light)))


def _wind_score(kind: str, speed: float, tolerance: float) -> float:
    strength = _wind_strength(speed)
    if kind == "offshore":
        score = WIND_NEUTRAL_SCORE + (10.0 - WIND_NEUTRAL_SCORE) * strength
    elif kind == "cross-shore":
        score = WIND_NEUTRAL_SCORE - 2.0 * strength
    else:
        score = WIND_NEUTRAL_SCORE * (1.0 - strength)
    # Gusty wind beyond what the surfer can handle hurts from any direction
    if speed > tolerance:
        score -= TOLERANCE_PENALTY_MAX * min(1.0, (speed - tolerance) / tolerance)
    return max(0.0, min(10.0, score))


@dataclass(frozen=True)
class _Factors:
    """Normalized inputs plus intermediate results, shared by the reason checks."""

    ability: AbilityTier
    profile: AbilityProfile
    swell_height: float
    swell_period: float
    wave_height: float
    wind_speed: float
    wind_kind: str


def _below(val: float, band: Tuple[float, float]) -> bool:
    return val < band[0] * (1.0 - NOTABLE_MARGIN)


def _above(val: float, band: Tuple[float, float]) -> bool:
    return val > band[1] * (1.0 + NOTABLE_MARGIN)


def _inside(val: float, band: Tuple[float, float]) -> bool:
    return band[0] <= val <= band[1]


def _windy(f: _Factors) -> bool:
    return f.wind_speed >= WIND_THRESH["light"]


# Evaluated in order: swell, then wind, then wave height.  Each check adds at
# most one reason.  Values just outside a band edge are not reported, so a
# rounded number never contradicts the band it is compared against.
REASON_CHECKS: Tuple[Tuple[Callable[[_Factors], bool], Callable[[_Factors], str]], ...] = (
    (
        lambda f: _inside(f.swell_height, f.profile.height_band),
        lambda f: f"Swell size ({f.swell_height:.1f}m) suits {f.ability.value} surfers",
    ),
    (
        lambda f: _below(f.swell_height, f.profile.height_band),
        lambda f: f"Swell too small ({f.swell_height:.1f}m) for {f.ability.value} surfers",
    ),
    (
        lambda f: _above(f.swell_height, f.profile.height_band),
        lambda f: f"Swell too big ({f.swell_height:.1f}m) for {f.ability.value} surfers",
    ),
    (
        lambda f: _inside(f.swell_period, f.profile.period_band),
        lambda f: f"Good swell period ({f.swell_period:.0f}s)",
    ),
    (
        lambda f: _above(f.swell_period, f.profile.period_band),
        lambda f: f"Long-period groundswell ({f.swell_period:.0f}s) with plenty of power",
    ),
    (
        lambda f: _below(f.swell_period, f.profile.period_band),
        lambda f: f"Short swell period ({f.swell_period:.0f}s), waves will be weak",
    ),
    (
        lambda f: not _windy(f),
        lambda f: f"Light wind ({f.wind_speed:.0f} km/h), clean surface",
    ),
    (
        lambda f: _windy(f) and f.wind_kind == "offshore",
        lambda f: f"Offshore wind ({f.wind_speed:.0f} km/h) grooming the wave faces",
    ),
    (
        lambda f: _windy(f) and f.wind_kind == "cross-shore",
        lambda f: f"Cross-shore wind ({f.wind_speed:.0f} km/h), some texture on the faces",
    ),
    (
        lambda f: _windy(f) and f.wind_kind == "onshore",
        lambda f: (
            f"{'Strong onshore' if f.wind_speed >= WIND_THRESH['fresh'] else 'Onshore'} "
            f"wind ({f.wind_speed:.0f} km/h) making it choppy"
        ),
    ),
    (
        lambda f: f.wind_speed > f.profile.wind_tolerance_kmh * (1.0 + NOTABLE_MARGIN),
        lambda f: f"Wind too strong ({f.wind_speed:.0f} km/h) for {f.ability.value} surfers",
    ),
    (
        lambda f: f.wave_height - f.swell_height >= CHOP_MARGIN_M,
        lambda f: f"Local wind chop on top of the swell ({f.wave_height:.1f}m seas vs {f.swell_height:.1f}m swell)",
    ),
    (
        lambda f: _above(f.wave_height, f.profile.height_band),
        lambda f: f"Overall sea state ({f.wave_height:.1f}m) is above the {f.ability.value} range",
    ),
)


def score_spot(
    observation: Observation,
    spot_orientation: Union[float, SpotProfile],
    ability: Union[AbilityTier, str],
) -> ScoreResult:
    """Score surf quality at one spot for one instant.

    Args:
        observation: Readings for the spot.  Out-of-range values are
            normalized (negative heights/periods/speeds become 0, directions
            wrap modulo 360) rather than rejected.
        spot_orientation: Bearing the spot faces, or a ``SpotProfile``.
        ability: One of the three ``AbilityTier`` values.  Labels outside the
            enum must be resolved by the caller (see ``resolve_ability``).

    Returns:
        A ``ScoreResult`` with a score in [0, 10] and reasons ordered
        swell -> wind -> wave height.

    Raises:
        ValueError: if ``ability`` is not a valid tier.
    """
    tier = AbilityTier(ability)
    profile = ABILITY_PROFILES[tier]
    if isinstance(spot_orientation, SpotProfile):
        spot_orientation = spot_orientation.orientation

    swell_height = _non_negative(observation.swell_height)
    swell_period = _non_negative(observation.swell_period)
    wave_height = _non_negative(observation.wave_height)
    wind_speed = observation.wind_speed_near_surface
    wind_kind = classify_wind(observation.wind_direction, spot_orientation)

    height_score = _band_score(swell_height, profile.height_band)
    period_score = _period_score(swell_period, profile.period_band)
    swell_score = height_score * (PERIOD_MULTIPLIER_FLOOR + (1.0 - PERIOD_MULTIPLIER_FLOOR) * period_score / 10.0)
    wind_score = _wind_score(wind_kind, wind_speed, profile.wind_tolerance_kmh)
    wave_score = _band_score(wave_height, profile.height_band)

    composite = (
        swell_score * WEIGHTS["swell"]
        + wind_score * WEIGHTS["wind"]
        + wave_score * WEIGHTS["wave"]
    )
    score = max(0.0, min(10.0, composite))

    factors = _Factors(
        ability=tier,
        profile=profile,
        swell_height=swell_height,
        swell_period=swell_period,
        wave_height=wave_height,
        wind_speed=wind_speed,
        wind_kind=wind_kind,
    )
    reasons = []
    for predicate, message in REASON_CHECKS:
        if predicate(factors):
            text = message(factors)
            if text not in reasons:
                reasons.append(text)
    return ScoreResult(score=score, reasons=tuple(reasons))


RATINGS: Tuple[Tuple[float, str], ...] = (
    (8.5, "epic"),
    (6.5, "good"),
    (4.5, "fair"),
    (2.5, "poor"),
)


def describe_score(score: float) -> str:
    """Label a raw 0–10 score for display; anything under the lowest band is "flat"."""
    for floor, label in RATINGS:
        if score >= floor:
            return label
    return "flat"
