"""Integrator implementations."""

from .base import Integrator
from .velocity_verlet import VelocityVerletIntegrator, advance

__all__ = [
    "Integrator",
    "VelocityVerletIntegrator",
    "advance",
]
