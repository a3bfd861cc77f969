"""Simulation configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

# Compiled-in defaults of the reference run.
DEFAULT_N_PARTICLES = 2000
DEFAULT_N_DIMS = 3
DEFAULT_STEP_NUM = 100
DEFAULT_DT = 0.0001
DEFAULT_MASS = 1.0
DEFAULT_SEED = 123456789
DEFAULT_BOX_LOWER = 0.0
DEFAULT_BOX_UPPER = 10.0
DEFAULT_BLOCK_SIZE = 256

# Seeds live in the signed 32-bit range of the generator.
I4_HUGE = 2147483647


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters of a fixed-step simulation run.

    The defaults reproduce the reference run: 2000 particles in three
    dimensions, 100 steps of dt = 1e-4 with unit mass, positions drawn
    over [0, 10) from seed 123456789.

    A zero seed is not rejected here. It must reach the generator, which
    raises SeedError. Seeds outside the signed 32-bit range (|seed| >=
    2^31 - 1) are rejected.

    Attributes:
        n_particles: Number of particles P.
        n_dims: Spatial dimension D.
        step_num: Number of integration steps N (N + 1 evaluations).
        dt: Integration timestep.
        mass: Mass shared by all particles.
        seed: Initial seed of the position generator.
        box_lower: Lower bound of the initial position box.
        box_upper: Upper bound of the initial position box.
        block_size: Reference particles per block in force evaluation.
    """

    n_particles: int = DEFAULT_N_PARTICLES
    n_dims: int = DEFAULT_N_DIMS
    step_num: int = DEFAULT_STEP_NUM
    dt: float = DEFAULT_DT
    mass: float = DEFAULT_MASS
    seed: int = DEFAULT_SEED
    box_lower: float = DEFAULT_BOX_LOWER
    box_upper: float = DEFAULT_BOX_UPPER
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.n_particles < 1:
            raise ValueError(f"n_particles must be >= 1, got {self.n_particles}")
        if self.n_dims < 1:
            raise ValueError(f"n_dims must be >= 1, got {self.n_dims}")
        if self.step_num < 0:
            raise ValueError(f"step_num must be >= 0, got {self.step_num}")
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not self.mass > 0.0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if not self.box_upper > self.box_lower:
            raise ValueError(
                f"box_upper ({self.box_upper}) must exceed box_lower "
                f"({self.box_lower})"
            )
        if self.block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {self.block_size}")
        if abs(self.seed) >= I4_HUGE:
            raise ValueError(f"seed must satisfy |seed| < {I4_HUGE}, got {self.seed}")

    def replace(self, **changes: Any) -> SimulationConfig:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)
