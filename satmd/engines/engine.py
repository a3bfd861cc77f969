"""MD simulation engine implementation."""

from __future__ import annotations

import enum
import logging
import time
from typing import TYPE_CHECKING

from ..analysis import EnergyAnalyzer
from ..config import SimulationConfig
from ..forcefields import SaturatingSineForce
from ..integrators import VelocityVerletIntegrator
from ..system import UniformInitializer
from .reporters import Reporter, ReporterGroup, relative_drift
from .result import SimulationResult

if TYPE_CHECKING:
    from ..forcefields import ForceProvider
    from ..integrators import Integrator
    from ..system import Initializer, ParticleEnsemble

logger = logging.getLogger(__name__)


class EngineStatus(enum.Enum):
    """Lifecycle of an engine."""

    UNINITIALIZED = "uninitialized"
    STEPPING = "stepping"
    DONE = "done"


class MDEngine:
    """
    Fixed-step molecular dynamics driver.

    Step 0 builds the ensemble with the initializer and evaluates forces
    and energies; the total energy of step 0 becomes the reference. Every
    later step integrates with the forces of the previous step and then
    re-evaluates forces and energies on the new positions. ``run(N)``
    performs N + 1 evaluations and reports the drift of the final total
    energy relative to the reference.

    Example usage:
        engine = MDEngine(SimulationConfig(n_particles=100, step_num=10))
        engine.add_reporter(StateReporter(frequency=1))
        result = engine.run()
        print(result.summary_line())

    Attributes:
        config: Run parameters.
        initializer: Builds the step-0 ensemble.
        integrator: Time integration algorithm.
        force_provider: Force computation module.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        initializer: Initializer | None = None,
        integrator: Integrator | None = None,
        force_provider: ForceProvider | None = None,
    ) -> None:
        """
        Initialize MD engine.

        Args:
            config: Run parameters. Defaults to SimulationConfig().
            initializer: Step-0 builder. Defaults to uniform positions drawn
                from config.seed over [config.box_lower, config.box_upper).
            integrator: Time integrator. Defaults to velocity Verlet with
                config.dt.
            force_provider: Force computation module. Defaults to the
                saturating sine potential.
        """
        self._config = config if config is not None else SimulationConfig()
        cfg = self._config

        self._initializer = (
            initializer
            if initializer is not None
            else UniformInitializer(cfg.seed, cfg.box_lower, cfg.box_upper)
        )
        self._integrator = (
            integrator if integrator is not None else VelocityVerletIntegrator(cfg.dt)
        )
        self._force_provider = (
            force_provider
            if force_provider is not None
            else SaturatingSineForce(block_size=cfg.block_size)
        )

        self._reporters = ReporterGroup()
        self._energies = EnergyAnalyzer()

        self._status = EngineStatus.UNINITIALIZED
        self._ensemble: ParticleEnsemble | None = None
        self._potential = 0.0
        self._kinetic = 0.0
        self._reference_energy = 0.0
        self._wall_time = 0.0

    @property
    def config(self) -> SimulationConfig:
        """Return run parameters."""
        return self._config

    @property
    def status(self) -> EngineStatus:
        """Return lifecycle status."""
        return self._status

    @property
    def ensemble(self) -> ParticleEnsemble:
        """Return the current ensemble."""
        if self._ensemble is None:
            raise RuntimeError("engine has not been initialized; call step() first")
        return self._ensemble

    @property
    def integrator(self) -> Integrator:
        """Return integrator."""
        return self._integrator

    @property
    def force_provider(self) -> ForceProvider:
        """Return force provider."""
        return self._force_provider

    @property
    def potential_energy(self) -> float:
        """Return last computed potential energy."""
        return self._potential

    @property
    def kinetic_energy(self) -> float:
        """Return last computed kinetic energy."""
        return self._kinetic

    @property
    def total_energy(self) -> float:
        """Return total energy."""
        return self._potential + self._kinetic

    @property
    def reference_energy(self) -> float:
        """Return the total energy of step 0."""
        return self._reference_energy

    @property
    def relative_drift(self) -> float:
        """Return (E - E0) / E0 for the last evaluated step."""
        return relative_drift(self.total_energy, self._reference_energy)

    def add_reporter(self, reporter: Reporter) -> None:
        """Add a reporter."""
        self._reporters.add(reporter)

    def remove_reporter(self, reporter: Reporter) -> None:
        """Remove a reporter."""
        self._reporters.remove(reporter)

    def _evaluate(self) -> None:
        """Recompute forces and both energies from the current snapshot."""
        ensemble = self.ensemble
        forces, potential, kinetic = self._force_provider.compute_energies(ensemble)

        ensemble.forces[...] = forces
        self._potential = potential
        self._kinetic = kinetic

    def step(self) -> None:
        """
        Perform a single simulation step.

        At step 0:
        1. Build the ensemble
        2. Compute forces and energies
        3. Record the reference energy

        Afterwards:
        1. Integration step with the stored forces
        2. Compute forces and energies for the new positions

        Every step ends by notifying the reporters.
        """
        if self._status is EngineStatus.DONE:
            raise RuntimeError("simulation already finished")

        if self._status is EngineStatus.UNINITIALIZED:
            cfg = self._config
            self._ensemble = self._initializer.initialize(
                cfg.n_particles, cfg.n_dims, cfg.mass
            )
            self._status = EngineStatus.STEPPING
            logger.debug(
                "initialized %d particles in %d dimensions",
                self._ensemble.n_particles,
                self._ensemble.n_dims,
            )
            self._evaluate()
            self._reference_energy = self.total_energy
            self._reporters.initialize(self._ensemble)
        else:
            self._integrator.step(self.ensemble)
            self._evaluate()

        ensemble = self.ensemble
        logger.debug(
            "step %d: potential=%.6f kinetic=%.6f",
            ensemble.step,
            self._potential,
            self._kinetic,
        )
        energies = {
            "potential_energy": self._potential,
            "kinetic_energy": self._kinetic,
            "reference_energy": self._reference_energy,
        }
        self._energies.update(ensemble, **energies)
        self._reporters.report(ensemble, **energies)

    def run(self, step_num: int | None = None) -> SimulationResult:
        """
        Run the full simulation: step 0 plus step_num integration steps.

        Args:
            step_num: Number of integration steps. Defaults to
                config.step_num.

        Returns:
            SimulationResult with final energies and drift.

        Raises:
            RuntimeError: If the engine has already been stepped or run.
            SeedError: If the initializer's generator seed is zero.
        """
        if self._status is not EngineStatus.UNINITIALIZED:
            raise RuntimeError(f"cannot run an engine in state {self._status.value}")

        n_steps = self._config.step_num if step_num is None else step_num
        if n_steps < 0:
            raise ValueError(f"step_num must be >= 0, got {n_steps}")

        start_time = time.perf_counter()
        try:
            for _ in range(n_steps + 1):
                self.step()
        finally:
            self._wall_time += time.perf_counter() - start_time

        self._status = EngineStatus.DONE
        self._reporters.finalize(self.ensemble)
        logger.debug(
            "finished %d steps in %.3f s, drift %.6e",
            n_steps,
            self._wall_time,
            self.relative_drift,
        )

        return SimulationResult(
            potential_energy=self._potential,
            kinetic_energy=self._kinetic,
            reference_energy=self._reference_energy,
            relative_drift=self.relative_drift,
            steps=self._energies.steps,
            potential_history=self._energies.potential_energy,
            kinetic_history=self._energies.kinetic_energy,
            energy_fluctuation=self._energies.energy_fluctuation,
            n_particles=self.ensemble.n_particles,
            n_dims=self.ensemble.n_dims,
            step_num=n_steps,
            timestep=self._integrator.timestep,
            wall_time=self._wall_time,
        )
