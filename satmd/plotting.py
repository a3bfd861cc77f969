"""
Built-in plotting utilities for simulation results.

Example:
    >>> from satmd import simulate, plotting
    >>> result = simulate.run(n_particles=200, step_num=50)
    >>> plotting.energy(result)
    >>> plotting.save("energy.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .engines import SimulationResult

# matplotlib is an optional dependency
try:
    import matplotlib.pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False
    plt = None


def _check_matplotlib():
    """Check if matplotlib is available."""
    if not HAS_MATPLOTLIB:
        raise ImportError(
            "matplotlib is required for plotting. "
            "Install it with: pip install satmd[plot]"
        )


def energy(
    result: SimulationResult,
    show: bool = True,
    figsize: tuple[float, float] = (10, 6),
) -> None:
    """
    Plot energy time series.

    Left panel shows kinetic, potential and total energy versus time; the
    right panel the relative drift of the total energy from step 0.

    Args:
        result: SimulationResult from a simulation.
        show: Whether to display the plot immediately.
        figsize: Figure size (width, height) in inches.
    """
    _check_matplotlib()

    fig, axes = plt.subplots(1, 2, figsize=figsize)
    times = result.steps * result.timestep
    total = result.total_history

    ax = axes[0]
    ax.plot(times, result.kinetic_history, "b-", label="Kinetic", alpha=0.7, lw=0.8)
    ax.plot(
        times, result.potential_history, "r-", label="Potential", alpha=0.7, lw=0.8
    )
    ax.plot(times, total, "k-", label="Total", lw=1.5)
    ax.set_xlabel("Time")
    ax.set_ylabel("Energy")
    ax.set_title("Energy vs Time")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    if len(total) > 0 and result.reference_energy != 0:
        rel_error = (total - result.reference_energy) / result.reference_energy
    else:
        rel_error = np.zeros_like(total)
    ax.plot(times, rel_error, "k-", lw=1)
    ax.axhline(y=0, color="r", linestyle="--", alpha=0.5)
    ax.set_xlabel("Time")
    ax.set_ylabel("Relative Energy Drift")
    ax.set_title(f"Energy Conservation (final: {result.relative_drift:.2e})")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()

    if show:
        plt.show()


def save(filename: str | Path, dpi: int = 150) -> None:
    """
    Save the current figure to file.

    Args:
        filename: Output filename (png, pdf, svg, etc.).
        dpi: Resolution in dots per inch.
    """
    _check_matplotlib()
    plt.savefig(filename, dpi=dpi, bbox_inches="tight")
    print(f"Saved: {filename}")


def close() -> None:
    """Close all open figures."""
    _check_matplotlib()
    plt.close("all")
