"""Force field implementations."""

from .base import ForceProvider
from .saturating import (
    SaturatingSineForce,
    evaluate,
    pair_force_factor,
    pair_potential,
)

__all__ = [
    "ForceProvider",
    "SaturatingSineForce",
    "evaluate",
    "pair_potential",
    "pair_force_factor",
]
