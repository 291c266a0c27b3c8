"""Surf quality scoring for coastal spots."""

from .scoring import (
    ABILITY_PROFILES,
    AbilityProfile,
    AbilityTier,
    Observation,
    ScoreResult,
    SpotProfile,
    describe_score,
    resolve_ability,
    score_spot,
)
from .wind import wind_at_2m

__all__ = [
    "ABILITY_PROFILES",
    "AbilityProfile",
    "AbilityTier",
    "Observation",
    "ScoreResult",
    "SpotProfile",
    "describe_score",
    "resolve_ability",
    "score_spot",
    "wind_at_2m",
]
