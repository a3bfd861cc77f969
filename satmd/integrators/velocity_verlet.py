"""Velocity Verlet integrator implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from .base import Integrator

if TYPE_CHECKING:
    from ..system import ParticleEnsemble


def advance(
    positions: NDArray[np.floating],
    velocities: NDArray[np.floating],
    forces: NDArray[np.floating],
    accelerations: NDArray[np.floating],
    mass: float,
    dt: float,
) -> None:
    """
    Advance positions, velocities and accelerations by one step in place.

    Per slot, in this order:

        x += v * dt + 0.5 * a * dt * dt
        v += 0.5 * dt * (f / m + a)
        a  = f / m

    The position and velocity updates read the previous acceleration, so
    the acceleration is overwritten last.

    Args:
        positions: Positions, shape (P, D), updated in place.
        velocities: Velocities, shape (P, D), updated in place.
        forces: Forces at the current positions, shape (P, D).
        accelerations: Accelerations from the previous step, shape (P, D),
            updated in place.
        mass: Mass shared by all particles.
        dt: Timestep.
    """
    rmass = 1.0 / mass

    positions += velocities * dt
    positions += 0.5 * accelerations * dt * dt
    velocities += 0.5 * dt * (forces * rmass + accelerations)
    np.multiply(forces, rmass, out=accelerations)


class VelocityVerletIntegrator(Integrator):
    """
    Velocity Verlet integrator with stored accelerations.

    Algorithm:
        x(t + dt) = x(t) + v(t) * dt + 0.5 * a(t) * dt^2
        v(t + dt) = v(t) + 0.5 * (a(t) + a(t + dt)) * dt
        a(t + dt) = f / m

    where f is the force field stored on the ensemble by the last
    evaluation. Accelerations live on the ensemble rather than in the
    integrator, so the integrator itself is stateless.

    Attributes:
        dt: Integration timestep.
    """

    def __init__(self, dt: float) -> None:
        """
        Initialize Velocity Verlet integrator.

        Args:
            dt: Integration timestep.
        """
        if not dt > 0.0:
            raise ValueError(f"dt must be positive, got {dt}")
        self._dt = dt

    @property
    def timestep(self) -> float:
        """Return the integration timestep."""
        return self._dt

    def step(self, ensemble: ParticleEnsemble) -> ParticleEnsemble:
        """
        Perform one Velocity Verlet step.

        Args:
            ensemble: Current ensemble with forces from the last evaluation.

        Returns:
            The same ensemble with updated fields, step and time.
        """
        advance(
            ensemble.positions,
            ensemble.velocities,
            ensemble.forces,
            ensemble.accelerations,
            ensemble.mass,
            self._dt,
        )
        ensemble.time += self._dt
        ensemble.step += 1
        return ensemble
