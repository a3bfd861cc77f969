"""Particle state, initial conditions and the uniform generator."""

from .generator import UniformGenerator, draw, uniform_matrix
from .geometry import displacement, displacements
from .initializer import (
    ExplicitInitializer,
    Initializer,
    UniformInitializer,
    initialize,
)
from .state import ParticleEnsemble

__all__ = [
    "ParticleEnsemble",
    "UniformGenerator",
    "draw",
    "uniform_matrix",
    "displacement",
    "displacements",
    "Initializer",
    "UniformInitializer",
    "ExplicitInitializer",
    "initialize",
]
