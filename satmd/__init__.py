"""
satmd - fixed-step N-body dynamics with a saturating pair potential.

Particles interact through v(x) = sin(min(x, pi/2))^2 and are advanced
with velocity Verlet. Every step evaluates all P * (P - 1) ordered pairs.

Quick Start:
    >>> from satmd import simulate
    >>> result = simulate.run(n_particles=200, step_num=20)
    >>> print(result.summary_line())
"""

__version__ = "0.1.0"

# High-level APIs
from . import plotting, simulate
from .config import SimulationConfig
from .engines import MDEngine, SimulationResult
from .exceptions import SatmdError, SeedError
from .forcefields import SaturatingSineForce
from .integrators import VelocityVerletIntegrator

# Core components for advanced users
from .system import ParticleEnsemble, UniformGenerator

__all__ = [
    "simulate",
    "plotting",
    "SimulationConfig",
    "MDEngine",
    "SimulationResult",
    "SatmdError",
    "SeedError",
    "SaturatingSineForce",
    "VelocityVerletIntegrator",
    "ParticleEnsemble",
    "UniformGenerator",
]
