"""Saturating sine-squared pair potential."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import DEFAULT_BLOCK_SIZE
from ..system.geometry import displacements
from .base import ForceProvider

if TYPE_CHECKING:
    from ..system import ParticleEnsemble

HALF_PI = 3.141592653589793 / 2.0


def pair_potential(x: ArrayLike) -> NDArray[np.floating]:
    """Pair energy v(x) = sin(min(x, pi/2))^2."""
    return np.sin(np.minimum(x, HALF_PI)) ** 2


def pair_force_factor(x: ArrayLike) -> NDArray[np.floating]:
    """Derivative dv/dx = sin(2 * min(x, pi/2))."""
    return np.sin(2.0 * np.minimum(x, HALF_PI))


def evaluate(
    positions: NDArray[np.floating],
    velocities: NDArray[np.floating],
    mass: float,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> tuple[NDArray[np.floating], float, float]:
    """
    Compute forces, potential energy and kinetic energy.

    Every ordered pair (k, j) with k != j is visited, so each unordered
    pair contributes twice and carries half its energy each time. The
    clamp at pi/2 applies to the trigonometric arguments only; the force
    is projected onto the displacement with the unclamped distance:

        F_k = -sum_j dr_kj * sin(2 * min(d_kj, pi/2)) / d_kj

    Reference particles are processed in blocks of ``block_size`` rows to
    bound the size of the (B, P, D) displacement tensor.

    Args:
        positions: Positions, shape (P, D).
        velocities: Velocities, shape (P, D).
        mass: Mass shared by all particles.
        block_size: Reference particles per block.

    Returns:
        Tuple of (forces (P, D), potential energy, kinetic energy).

    Raises:
        ValueError: If block_size is less than 1.
    """
    if block_size < 1:
        raise ValueError(f"block_size must be >= 1, got {block_size}")

    positions = np.asarray(positions, dtype=np.float64)
    velocities = np.asarray(velocities, dtype=np.float64)
    n_particles = positions.shape[0]

    forces = np.empty_like(positions)
    potential = 0.0

    for start in range(0, n_particles, block_size):
        stop = min(start + block_size, n_particles)
        dr, d = displacements(positions[start:stop], positions)

        # Self pairs sit on the shifted diagonal of the block.
        rows = np.arange(stop - start)
        cols = rows + start
        d_safe = d.copy()
        d_safe[rows, cols] = 1.0

        energy = 0.5 * pair_potential(d)
        energy[rows, cols] = 0.0
        potential += float(np.sum(energy))

        factor = pair_force_factor(d)
        factor[rows, cols] = 0.0
        forces[start:stop] = -np.sum(
            dr * factor[:, :, np.newaxis] / d_safe[:, :, np.newaxis], axis=1
        )

    kinetic = float(np.sum(velocities * velocities)) * 0.5 * mass
    return forces, potential, kinetic


class SaturatingSineForce(ForceProvider):
    """
    All-pairs force from the saturating potential v(x) = sin(min(x, pi/2))^2.

    The potential is a harmonic-like well near the origin that flattens to
    its maximum of 1 at x = pi/2. Beyond that distance a pair contributes
    the constant energy 1 and, up to the rounding of sin(pi), no force.

    No cutoff and no neighbor list: the cost is O(P^2 * D) per call.

    Attributes:
        block_size: Reference particles per evaluation block.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        """
        Initialize saturating force.

        Args:
            block_size: Reference particles per evaluation block.
        """
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self.block_size = block_size

    def compute(self, ensemble: ParticleEnsemble) -> NDArray[np.floating]:
        """Compute forces on all particles."""
        forces, _ = self.compute_with_energy(ensemble)
        return forces

    def compute_with_energy(
        self, ensemble: ParticleEnsemble
    ) -> tuple[NDArray[np.floating], float]:
        """Compute forces and total potential energy."""
        forces, potential, _ = self.compute_energies(ensemble)
        return forces, potential

    def compute_energies(
        self, ensemble: ParticleEnsemble
    ) -> tuple[NDArray[np.floating], float, float]:
        """
        Compute forces, potential and kinetic energy from one snapshot.

        Args:
            ensemble: Current particle ensemble.

        Returns:
            Tuple of (forces, potential energy, kinetic energy).
        """
        return evaluate(
            ensemble.positions,
            ensemble.velocities,
            ensemble.mass,
            block_size=self.block_size,
        )
