"""Reporter implementations for simulation output."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from ..system import ParticleEnsemble


class Reporter(ABC):
    """
    Abstract base class for simulation reporters.

    Reporters are called after every force evaluation whose step index is
    a multiple of their frequency, step 0 included. Energies are passed as
    keyword arguments: ``potential_energy``, ``kinetic_energy`` and
    ``reference_energy``.
    """

    @abstractmethod
    def report(self, ensemble: ParticleEnsemble, **kwargs: Any) -> None:
        """
        Generate report for current ensemble.

        Args:
            ensemble: Current particle ensemble.
            **kwargs: Energies of the current step.
        """
        ...

    @property
    @abstractmethod
    def frequency(self) -> int:
        """Return reporting frequency (every N steps)."""
        ...

    def should_report(self, step: int) -> bool:
        """Check if reporter should run at this step."""
        return step % self.frequency == 0

    def initialize(self, ensemble: ParticleEnsemble) -> None:
        """Initialize reporter (called after step 0 is built)."""
        pass

    def finalize(self, ensemble: ParticleEnsemble) -> None:
        """Finalize reporter (called after the last step)."""
        pass


class ReporterGroup:
    """
    Collection of reporters with automatic frequency handling.
    """

    def __init__(self, reporters: list[Reporter] | None = None) -> None:
        self._reporters: list[Reporter] = reporters if reporters else []

    def __len__(self) -> int:
        return len(self._reporters)

    def add(self, reporter: Reporter) -> None:
        """Add a reporter to the group."""
        self._reporters.append(reporter)

    def remove(self, reporter: Reporter) -> None:
        """Remove a reporter from the group."""
        self._reporters.remove(reporter)

    def initialize(self, ensemble: ParticleEnsemble) -> None:
        """Initialize all reporters."""
        for reporter in self._reporters:
            reporter.initialize(ensemble)

    def report(self, ensemble: ParticleEnsemble, **kwargs: Any) -> None:
        """Run all reporters that should fire at this step."""
        for reporter in self._reporters:
            if reporter.should_report(ensemble.step):
                reporter.report(ensemble, **kwargs)

    def finalize(self, ensemble: ParticleEnsemble) -> None:
        """Finalize all reporters."""
        for reporter in self._reporters:
            reporter.finalize(ensemble)


def _check_frequency(frequency: int) -> int:
    if frequency < 1:
        raise ValueError(f"frequency must be >= 1, got {frequency}")
    return frequency


def relative_drift(total: float, reference: float) -> float:
    """Return (total - reference) / reference, or NaN for a zero reference."""
    if reference == 0.0:
        return float("nan")
    return (total - reference) / reference


class StateReporter(Reporter):
    """
    Reporter that prints a table of energies to console or file.

    Outputs step, time, kinetic, potential and total energy, and the
    relative drift of the total from step 0.
    """

    def __init__(
        self,
        frequency: int = 10,
        file: TextIO | None = None,
        separator: str = "\t",
    ) -> None:
        """
        Initialize state reporter.

        Args:
            frequency: Reporting frequency (every N steps).
            file: Output stream (defaults to stdout).
            separator: Field separator.
        """
        self._frequency = _check_frequency(frequency)
        self._file = file if file is not None else sys.stdout
        self._separator = separator
        self._header_written = False

    @property
    def frequency(self) -> int:
        return self._frequency

    def initialize(self, ensemble: ParticleEnsemble) -> None:
        """Write header."""
        if not self._header_written:
            headers = ["Step", "Time", "KE", "PE", "Total", "Drift"]
            self._file.write(self._separator.join(headers) + "\n")
            self._header_written = True

    def report(self, ensemble: ParticleEnsemble, **kwargs: Any) -> None:
        pe = kwargs.get("potential_energy", 0.0)
        ke = kwargs.get("kinetic_energy", ensemble.kinetic_energy)
        total = ke + pe
        drift = relative_drift(total, kwargs.get("reference_energy", total))

        values = [
            f"{ensemble.step}",
            f"{ensemble.time:.6f}",
            f"{ke:.6f}",
            f"{pe:.6f}",
            f"{total:.6f}",
            f"{drift:.6e}",
        ]

        self._file.write(self._separator.join(values) + "\n")
        self._file.flush()


class CallbackReporter(Reporter):
    """
    Reporter that calls a user-defined function.
    """

    def __init__(
        self,
        callback: Callable[[ParticleEnsemble, dict[str, Any]], None],
        frequency: int = 1,
    ) -> None:
        """
        Initialize callback reporter.

        Args:
            callback: Function to call with (ensemble, kwargs).
            frequency: Reporting frequency.
        """
        self._callback = callback
        self._frequency = _check_frequency(frequency)

    @property
    def frequency(self) -> int:
        return self._frequency

    def report(self, ensemble: ParticleEnsemble, **kwargs: Any) -> None:
        """Call the callback function."""
        self._callback(ensemble, kwargs)

