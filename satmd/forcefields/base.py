"""Base interface for force providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ..system import ParticleEnsemble


class ForceProvider(ABC):
    """
    Abstract base class for force computation modules.

    A provider reads the ensemble's positions and returns a freshly
    computed force field. It must not keep a reference to the ensemble
    between calls.
    """

    @abstractmethod
    def compute(self, ensemble: ParticleEnsemble) -> NDArray[np.floating]:
        """
        Compute forces on all particles.

        Args:
            ensemble: Current particle ensemble.

        Returns:
            Forces array of shape (P, D).
        """
        ...

    def compute_with_energy(
        self, ensemble: ParticleEnsemble
    ) -> tuple[NDArray[np.floating], float]:
        """
        Compute forces and potential energy.

        Default implementation computes forces only; subclasses should
        override when the energy is available.

        Args:
            ensemble: Current particle ensemble.

        Returns:
            Tuple of (forces array, potential energy).
        """
        forces = self.compute(ensemble)
        return forces, 0.0

    def compute_energies(
        self, ensemble: ParticleEnsemble
    ) -> tuple[NDArray[np.floating], float, float]:
        """
        Compute forces, potential energy and kinetic energy.

        Args:
            ensemble: Current particle ensemble.

        Returns:
            Tuple of (forces array, potential energy, kinetic energy).
        """
        forces, potential = self.compute_with_energy(ensemble)
        return forces, potential, ensemble.kinetic_energy
