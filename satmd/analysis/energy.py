"""Energy analysis."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import NDArray

from .base import StreamingAnalyzer

if TYPE_CHECKING:
    from ..system import ParticleEnsemble


class EnergyAnalyzer(StreamingAnalyzer):
    """
    Energy conservation analyzer.

    Records kinetic, potential and total energy per frame and reports the
    drift of the total energy relative to the first frame.
    """

    def __init__(self) -> None:
        """Initialize energy analyzer."""
        self.reset()

    @property
    def name(self) -> str:
        """Analyzer name."""
        return "energy"

    def reset(self) -> None:
        """Reset statistics."""
        self._n_frames = 0
        self._steps: list[int] = []
        self._times: list[float] = []
        self._kinetic: list[float] = []
        self._potential: list[float] = []

    def update(self, ensemble: ParticleEnsemble, **kwargs: Any) -> None:
        """
        Update energy statistics.

        Args:
            ensemble: Current particle ensemble.
            **kwargs: Should include 'potential_energy'; 'kinetic_energy'
                defaults to the ensemble's own value.
        """
        self._steps.append(ensemble.step)
        self._times.append(ensemble.time)
        self._kinetic.append(
            float(kwargs.get("kinetic_energy", ensemble.kinetic_energy))
        )
        self._potential.append(float(kwargs.get("potential_energy", 0.0)))
        self._n_frames += 1

    def result(self) -> dict[str, Any]:
        """
        Get energy statistics.

        Returns:
            Dictionary with energy arrays and statistics.
        """
        kinetic = self.kinetic_energy
        potential = self.potential_energy
        total = kinetic + potential

        results: dict[str, Any] = {
            "step": self.steps,
            "time": self.times,
            "kinetic": kinetic,
            "potential": potential,
            "total": total,
            "n_frames": self._n_frames,
        }

        if self._n_frames > 0:
            results.update(
                {
                    "kinetic_mean": float(np.mean(kinetic)),
                    "potential_mean": float(np.mean(potential)),
                    "total_mean": float(np.mean(total)),
                    "total_std": float(np.std(total)),
                    "relative_drift": self.relative_drift,
                    "energy_fluctuation": self.energy_fluctuation,
                }
            )

        return results

    @property
    def steps(self) -> NDArray[np.integer]:
        """Step indices of the recorded frames."""
        return np.array(self._steps, dtype=np.int64)

    @property
    def times(self) -> NDArray[np.floating]:
        """Simulation times of the recorded frames."""
        return np.array(self._times, dtype=np.float64)

    @property
    def kinetic_energy(self) -> NDArray[np.floating]:
        """Kinetic energy array."""
        return np.array(self._kinetic, dtype=np.float64)

    @property
    def potential_energy(self) -> NDArray[np.floating]:
        """Potential energy array."""
        return np.array(self._potential, dtype=np.float64)

    @property
    def total_energy(self) -> NDArray[np.floating]:
        """Total energy array."""
        return self.kinetic_energy + self.potential_energy

    @property
    def relative_drift(self) -> float:
        """(E_last - E_first) / E_first; NaN if empty or E_first is zero."""
        if self._n_frames == 0:
            return float("nan")
        e0 = self._kinetic[0] + self._potential[0]
        if e0 == 0.0:
            return float("nan")
        return (self._kinetic[-1] + self._potential[-1] - e0) / e0

    @property
    def energy_fluctuation(self) -> float:
        """std(E) / |mean(E)| of the total energy; NaN if undefined."""
        total = self.total_energy
        if total.size == 0:
            return float("nan")
        mean = float(np.mean(total))
        if mean == 0.0:
            return float("nan")
        return float(np.std(total) / abs(mean))
