"""
Simple high-level simulation API.

Example:
    >>> from satmd import simulate
    >>> result = simulate.run(n_particles=200, step_num=20, verbose=False)
    >>> print(result.summary_line())
"""

from __future__ import annotations

from typing import Any

from .config import SimulationConfig
from .engines import MDEngine, Reporter, SimulationResult
from .system import ExplicitInitializer, Initializer

__all__ = ["SimulationResult", "run", "pair"]


def run(
    config: SimulationConfig | None = None,
    initializer: Initializer | None = None,
    reporters: list[Reporter] | None = None,
    verbose: bool = True,
    **overrides: Any,
) -> SimulationResult:
    """
    Run a saturating-potential simulation.

    Without arguments this is the reference run: 2000 particles in three
    dimensions, 100 steps of dt = 1e-4.

    Args:
        config: Run parameters (default: SimulationConfig()).
        initializer: Step-0 builder (default: uniform positions from
            config.seed).
        reporters: Reporters to attach to the engine.
        verbose: Print progress (default: True).
        **overrides: Fields replaced on config, e.g. ``n_particles=100``.

    Returns:
        SimulationResult with final energies and drift.

    Example:
        >>> result = run(n_particles=100, step_num=10)
        >>> print(f"Drift: {result.relative_drift:.2e}")
    """
    config = config if config is not None else SimulationConfig()
    if overrides:
        config = config.replace(**overrides)

    engine = MDEngine(config, initializer=initializer)
    for reporter in reporters or []:
        engine.add_reporter(reporter)

    if verbose:
        print(
            f"Saturating MD: P={config.n_particles}, D={config.n_dims}, "
            f"dt={config.dt}, mass={config.mass}"
        )
        print(f"Running {config.step_num} steps...", end=" ", flush=True)

    result = engine.run()

    if verbose:
        print("done")
        print("\nResults:")
        print(f"  Potential energy: {result.potential_energy:.6f}")
        print(f"  Kinetic energy: {result.kinetic_energy:.6f}")
        print(f"  Relative drift: {result.relative_drift:.2e}")
        print(f"  Wall time: {result.wall_time:.2f} s")

    return result


def pair(
    separation: float = 2.0,
    step_num: int = 0,
    dt: float = 0.0001,
    mass: float = 1.0,
    verbose: bool = True,
) -> SimulationResult:
    """
    Run two particles at rest on a line.

    Particles start at 0 and ``separation``. Beyond pi/2 the pair sits on
    the flat part of the potential and does not move.

    Args:
        separation: Initial distance between the particles (default: 2.0).
        step_num: Number of integration steps (default: 0).
        dt: Integration timestep (default: 0.0001).
        mass: Particle mass (default: 1.0).
        verbose: Print progress (default: True).

    Returns:
        SimulationResult with final energies and drift.
    """
    config = SimulationConfig(
        n_particles=2, n_dims=1, step_num=step_num, dt=dt, mass=mass
    )
    initializer = ExplicitInitializer([[0.0], [separation]])
    return run(config, initializer=initializer, verbose=verbose)
