"""Base interface for integrators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..system import ParticleEnsemble


class Integrator(ABC):
    """
    Abstract base class for time integration algorithms.

    Integrators advance the ensemble in place by one time step using the
    forces currently stored on it.
    """

    @abstractmethod
    def step(self, ensemble: ParticleEnsemble) -> ParticleEnsemble:
        """
        Advance the ensemble by one time step.

        Args:
            ensemble: Current ensemble; its forces must be up to date.

        Returns:
            The same ensemble, mutated in place.
        """
        ...

    @property
    @abstractmethod
    def timestep(self) -> float:
        """Return the integration timestep."""
        ...
