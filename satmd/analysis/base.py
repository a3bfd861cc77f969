"""Base classes for analysis."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..system import ParticleEnsemble


class Analyzer(ABC):
    """
    Abstract base class for all analyzers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Analyzer name for identification."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset analyzer state."""
        ...

    @abstractmethod
    def result(self) -> dict[str, Any]:
        """
        Get analysis results.

        Returns:
            Dictionary of results (varies by analyzer type).
        """
        ...


class StreamingAnalyzer(Analyzer):
    """
    Base class for streaming (online) analyzers.

    Streaming analyzers process data frame-by-frame during the run,
    without storing particle fields.

    Example:
        analyzer = EnergyAnalyzer()
        for step in simulation:
            analyzer.update(ensemble, potential_energy=pe)
        energies = analyzer.result()
    """

    @abstractmethod
    def update(self, ensemble: ParticleEnsemble, **kwargs: Any) -> None:
        """
        Update analyzer with new frame.

        Args:
            ensemble: Current particle ensemble.
            **kwargs: Additional data (e.g., energies).
        """
        ...

    @property
    def n_frames(self) -> int:
        """Number of frames processed."""
        return getattr(self, "_n_frames", 0)
