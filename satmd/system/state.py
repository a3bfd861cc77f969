"""Particle ensemble state representation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass
class ParticleEnsemble:
    """
    Single source of truth for the simulated particles.

    Every per-particle field is a C-ordered float64 array of shape (P, D).
    A particle's D components are therefore contiguous, and the flat view
    of a field is indexed as ``dim + particle * D``.

    Fields are mutated in place by the integrator and the force provider;
    they are never rebound during a run.

    Attributes:
        positions: Particle positions, shape (P, D).
        velocities: Particle velocities, shape (P, D).
        accelerations: Particle accelerations, shape (P, D).
        forces: Forces from the last evaluation, shape (P, D).
        mass: Mass shared by all particles.
        time: Current simulation time.
        step: Current step number.
    """

    positions: NDArray[np.floating]
    velocities: NDArray[np.floating]
    accelerations: NDArray[np.floating]
    forces: NDArray[np.floating]
    mass: float
    time: float = 0.0
    step: int = 0

    def __post_init__(self) -> None:
        """Validate and convert arrays."""
        self.positions = np.ascontiguousarray(self.positions, dtype=np.float64)
        self.velocities = np.ascontiguousarray(self.velocities, dtype=np.float64)
        self.accelerations = np.ascontiguousarray(
            self.accelerations, dtype=np.float64
        )
        self.forces = np.ascontiguousarray(self.forces, dtype=np.float64)
        self.mass = float(self.mass)

        if self.positions.ndim != 2:
            raise ValueError(
                f"positions must have shape (P, D), got {self.positions.shape}"
            )
        n_particles, n_dims = self.positions.shape
        if n_particles < 1 or n_dims < 1:
            raise ValueError(
                f"positions shape {self.positions.shape} has an empty axis"
            )
        for name in ("velocities", "accelerations", "forces"):
            shape = getattr(self, name).shape
            if shape != self.positions.shape:
                raise ValueError(
                    f"{name} shape {shape} incompatible with positions shape "
                    f"{self.positions.shape}"
                )
        if not self.mass > 0.0:
            raise ValueError(f"mass must be positive, got {self.mass}")

    @property
    def n_particles(self) -> int:
        """Return number of particles."""
        return self.positions.shape[0]

    @property
    def n_dims(self) -> int:
        """Return spatial dimension."""
        return self.positions.shape[1]

    @classmethod
    def create(
        cls,
        positions: ArrayLike,
        mass: float = 1.0,
        velocities: ArrayLike | None = None,
        accelerations: ArrayLike | None = None,
    ) -> ParticleEnsemble:
        """
        Create an ensemble with optional velocity/acceleration fields.

        Args:
            positions: Particle positions, shape (P, D).
            mass: Mass shared by all particles.
            velocities: Velocities, shape (P, D). Defaults to zeros.
            accelerations: Accelerations, shape (P, D). Defaults to zeros.

        Returns:
            New ParticleEnsemble with zeroed forces.
        """
        positions = np.asarray(positions, dtype=np.float64)
        if velocities is None:
            velocities = np.zeros_like(positions)
        if accelerations is None:
            accelerations = np.zeros_like(positions)

        return cls(
            positions=positions,
            velocities=velocities,
            accelerations=accelerations,
            forces=np.zeros_like(positions),
            mass=mass,
        )

    def copy(self) -> ParticleEnsemble:
        """Create a deep copy of this ensemble."""
        return ParticleEnsemble(
            positions=self.positions.copy(),
            velocities=self.velocities.copy(),
            accelerations=self.accelerations.copy(),
            forces=self.forces.copy(),
            mass=self.mass,
            time=self.time,
            step=self.step,
        )

    @property
    def kinetic_energy(self) -> float:
        """Compute total kinetic energy: 0.5 * m * sum(v^2)."""
        return float(np.sum(self.velocities * self.velocities)) * 0.5 * self.mass
