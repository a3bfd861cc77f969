"""Simulation result container."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass
class SimulationResult:
    """Results from a simulation run."""

    # Final energies
    potential_energy: float = 0.0
    kinetic_energy: float = 0.0
    reference_energy: float = 0.0
    relative_drift: float = 0.0

    # Energy time series, one entry per evaluated step
    steps: NDArray[np.integer] = field(
        default_factory=lambda: np.array([], dtype=np.int64)
    )
    potential_history: NDArray[np.floating] = field(
        default_factory=lambda: np.array([])
    )
    kinetic_history: NDArray[np.floating] = field(default_factory=lambda: np.array([]))
    energy_fluctuation: float = 0.0

    # Metadata
    n_particles: int = 0
    n_dims: int = 0
    step_num: int = 0
    timestep: float = 0.0
    wall_time: float = 0.0

    @property
    def total_energy(self) -> float:
        """Final total energy."""
        return self.potential_energy + self.kinetic_energy

    @property
    def total_history(self) -> NDArray[np.floating]:
        """Total energy time series."""
        return self.potential_history + self.kinetic_history

    def summary_line(self) -> str:
        """Format the one-line summary: ``potential=..., kinetic=..., drift``."""
        return (
            f"potential={self.potential_energy:f}, "
            f"kinetic={self.kinetic_energy:f}, "
            f"{self.relative_drift:f}"
        )
