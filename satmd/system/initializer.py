"""Initial state construction."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import DEFAULT_BOX_LOWER, DEFAULT_BOX_UPPER, DEFAULT_SEED
from .generator import uniform_matrix
from .state import ParticleEnsemble


def initialize(
    n_particles: int,
    n_dims: int,
    seed: int = DEFAULT_SEED,
    lower: float = DEFAULT_BOX_LOWER,
    upper: float = DEFAULT_BOX_UPPER,
) -> tuple[NDArray[np.floating], NDArray[np.floating], NDArray[np.floating]]:
    """
    Build the initial position, velocity and acceleration fields.

    Positions are drawn one scalar at a time from the uniform generator,
    all D components of particle 0 first, then particle 1, and so on.
    Velocities and accelerations are zero.

    Args:
        n_particles: Number of particles P.
        n_dims: Spatial dimension D.
        seed: Generator seed. Must not be zero.
        lower: Lower bound of the position box.
        upper: Upper bound of the position box.

    Returns:
        Tuple of (positions, velocities, accelerations), each (P, D).

    Raises:
        SeedError: If seed is zero.
    """
    values, _ = uniform_matrix(n_dims, n_particles, lower, upper, seed)
    positions = values.reshape(n_particles, n_dims)
    velocities = np.zeros((n_particles, n_dims), dtype=np.float64)
    accelerations = np.zeros((n_particles, n_dims), dtype=np.float64)
    return positions, velocities, accelerations


def _as_field(values: ArrayLike) -> NDArray[np.floating]:
    """Convert to a (P, D) float array; a flat sequence means D = 1."""
    field = np.array(values, dtype=np.float64)
    if field.ndim == 1:
        field = field.reshape(-1, 1)
    return field


class Initializer(ABC):
    """
    Abstract base class for initial state builders.

    The engine calls an initializer exactly once, at step 0.
    """

    @abstractmethod
    def initialize(
        self, n_particles: int, n_dims: int, mass: float
    ) -> ParticleEnsemble:
        """
        Build the initial ensemble.

        Args:
            n_particles: Number of particles P.
            n_dims: Spatial dimension D.
            mass: Mass shared by all particles.

        Returns:
            New ParticleEnsemble at step 0.
        """
        ...


class UniformInitializer(Initializer):
    """
    Uniform random positions in a box, particles at rest.

    Attributes:
        seed: Generator seed.
        lower: Lower bound of the box along every axis.
        upper: Upper bound of the box along every axis.
    """

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        lower: float = DEFAULT_BOX_LOWER,
        upper: float = DEFAULT_BOX_UPPER,
    ) -> None:
        self.seed = seed
        self.lower = lower
        self.upper = upper

    def initialize(
        self, n_particles: int, n_dims: int, mass: float
    ) -> ParticleEnsemble:
        positions, velocities, accelerations = initialize(
            n_particles, n_dims, seed=self.seed, lower=self.lower, upper=self.upper
        )
        return ParticleEnsemble(
            positions=positions,
            velocities=velocities,
            accelerations=accelerations,
            forces=np.zeros_like(positions),
            mass=mass,
        )


class ExplicitInitializer(Initializer):
    """
    Start from caller-supplied positions (and optionally velocities).

    Accelerations always start at zero.
    """

    def __init__(
        self, positions: ArrayLike, velocities: ArrayLike | None = None
    ) -> None:
        """
        Initialize with fixed fields.

        Args:
            positions: Initial positions, shape (P, D).
            velocities: Initial velocities, shape (P, D). Defaults to zeros.
        """
        self._positions = _as_field(positions)
        self._velocities = None if velocities is None else _as_field(velocities)

    def initialize(
        self, n_particles: int, n_dims: int, mass: float
    ) -> ParticleEnsemble:
        if self._positions.shape != (n_particles, n_dims):
            raise ValueError(
                f"positions shape {self._positions.shape} does not match "
                f"({n_particles}, {n_dims})"
            )
        velocities = None if self._velocities is None else self._velocities.copy()
        return ParticleEnsemble.create(
            positions=self._positions.copy(), mass=mass, velocities=velocities
        )
