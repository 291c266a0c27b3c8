"""
Near-surface wind estimation.

Forecast models report wind at the standard 10 m mast height, which
overstates what a breaking wave actually feels.  This module scales that
reading down to ~2 m with a power-law boundary-layer profile.
"""

from __future__ import annotations

import math

REFERENCE_HEIGHT_M = 10.0
NEAR_SURFACE_HEIGHT_M = 2.0

# Hellmann exponent for near-neutral stability over open water / flat coast
ALPHA = 0.11


def wind_at_height(speed_ref: float, height: float, ref_height: float = REFERENCE_HEIGHT_M) -> float:
    """Scale a wind speed measured at ``ref_height`` to ``height``.

    Only heights at or below the reference are supported; anything above is
    treated as the reference height so the result never exceeds the input.
    Negative or non-finite speeds are clamped to 0.
    """
    if not math.isfinite(speed_ref) or speed_ref <= 0:
        return 0.0
    if height <= 0 or ref_height <= 0:
        return 0.0
    ratio = min(1.0, height / ref_height)
    return speed_ref * ratio ** ALPHA


def wind_at_2m(speed_ref: float) -> float:
    """Estimate wind speed at 2 m from a 10 m reading (same units in and out)."""
    return wind_at_height(speed_ref, NEAR_SURFACE_HEIGHT_M)
