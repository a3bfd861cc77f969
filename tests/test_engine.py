"""Tests for the simulation engine and reporters."""

import io
import logging
import math

import numpy as np
import pytest

from satmd import simulate
from satmd.config import SimulationConfig
from satmd.engines import (
    CallbackReporter,
    EngineStatus,
    MDEngine,
    ReporterGroup,
    SimulationResult,
    StateReporter,
)
from satmd.engines.reporters import relative_drift
from satmd.exceptions import SeedError
from satmd.forcefields import ForceProvider
from satmd.system import ExplicitInitializer


@pytest.fixture
def small_config():
    """Forty particles, ten steps."""
    return SimulationConfig(n_particles=40, n_dims=3, step_num=10)


def pair_engine(separation, step_num=0, dt=0.0001):
    """Two particles on a line."""
    config = SimulationConfig(n_particles=2, n_dims=1, step_num=step_num, dt=dt)
    return MDEngine(config, initializer=ExplicitInitializer([[0.0], [separation]]))


class ZeroForce(ForceProvider):
    """Force provider that never pushes."""

    def compute(self, ensemble):
        return np.zeros_like(ensemble.positions)


class TestPairScenario:
    """Test the two-particle, one-dimensional scenario."""

    def test_step_zero_energies(self):
        """Test P=2, D=1, separation 2.0, no integration steps."""
        result = pair_engine(2.0).run()

        expected = 0.5 * math.sin(min(2.0, math.pi / 2)) ** 2 * 2
        assert result.potential_energy == pytest.approx(expected)
        assert result.potential_energy == pytest.approx(1.0)
        assert result.kinetic_energy == 0.0
        assert result.relative_drift == 0.0

    def test_summary_line(self):
        """Test the fixed-point summary format."""
        result = pair_engine(2.0).run()
        assert result.summary_line() == "potential=1.000000, kinetic=0.000000, 0.000000"

    def test_saturated_pair_stays_put(self):
        """Test a pair beyond pi/2 feels no force."""
        engine = pair_engine(2.0, step_num=50)
        result = engine.run()

        np.testing.assert_allclose(engine.ensemble.positions, [[0.0], [2.0]], atol=1e-12)
        assert result.kinetic_energy == pytest.approx(0.0, abs=1e-20)

    def test_bound_pair_attracts(self):
        """Test particles inside the well move toward each other."""
        engine = pair_engine(1.0, step_num=100, dt=0.001)
        result = engine.run()

        positions = engine.ensemble.positions[:, 0]
        assert positions[1] - positions[0] < 1.0
        assert result.kinetic_energy > 0.0
        assert result.potential_energy < math.sin(1.0) ** 2
        assert abs(result.relative_drift) < 1e-3

    def test_simulate_pair(self):
        """Test the high-level pair helper."""
        result = simulate.pair(separation=2.0, verbose=False)
        assert result.potential_energy == pytest.approx(1.0)
        assert result.relative_drift == 0.0


class TestMDEngine:
    """Test MDEngine lifecycle and bookkeeping."""

    def test_initial_status(self, small_config):
        """Test a new engine has no ensemble yet."""
        engine = MDEngine(small_config)
        assert engine.status is EngineStatus.UNINITIALIZED
        with pytest.raises(RuntimeError, match="not been initialized"):
            _ = engine.ensemble

    def test_first_step_initializes(self, small_config):
        """Test step 0 builds the ensemble and records the reference."""
        engine = MDEngine(small_config)
        engine.step()

        assert engine.status is EngineStatus.STEPPING
        assert engine.ensemble.n_particles == 40
        assert engine.ensemble.step == 0
        assert engine.reference_energy == engine.total_energy
        assert engine.relative_drift == 0.0
        assert engine.kinetic_energy == 0.0

    def test_step_zero_forces_stored(self, small_config):
        """Test forces of step 0 are stored on the ensemble."""
        engine = MDEngine(small_config)
        engine.step()

        forces = engine.force_provider.compute(engine.ensemble)
        np.testing.assert_array_equal(engine.ensemble.forces, forces)

    def test_evaluations_per_run(self, small_config):
        """Test run(N) evaluates N + 1 times, steps 0..N."""
        seen = []
        engine = MDEngine(small_config)
        engine.add_reporter(CallbackReporter(lambda e, kw: seen.append(e.step)))

        engine.run()

        assert seen == list(range(small_config.step_num + 1))

    def test_run_overrides_step_num(self, small_config):
        """Test an explicit step count wins over the config."""
        result = MDEngine(small_config).run(step_num=3)
        assert result.step_num == 3
        assert list(result.steps) == [0, 1, 2, 3]

    def test_run_twice_raises(self, small_config):
        """Test an engine runs only once."""
        engine = MDEngine(small_config)
        engine.run()

        assert engine.status is EngineStatus.DONE
        with pytest.raises(RuntimeError):
            engine.run()
        with pytest.raises(RuntimeError, match="finished"):
            engine.step()

    def test_negative_step_num_raises(self, small_config):
        """Test a negative step count is rejected."""
        with pytest.raises(ValueError, match="step_num"):
            MDEngine(small_config).run(step_num=-1)

    def test_result_fields(self, small_config):
        """Test SimulationResult bookkeeping."""
        result = MDEngine(small_config).run()

        assert isinstance(result, SimulationResult)
        assert result.n_particles == 40
        assert result.n_dims == 3
        assert result.timestep == small_config.dt
        assert len(result.potential_history) == small_config.step_num + 1
        assert result.potential_history[0] + result.kinetic_history[0] == (
            result.reference_energy
        )
        assert result.potential_history[-1] == result.potential_energy
        assert result.total_energy == pytest.approx(
            result.potential_energy + result.kinetic_energy
        )
        assert result.relative_drift == pytest.approx(
            (result.total_energy - result.reference_energy) / result.reference_energy
        )
        assert result.wall_time > 0.0

    def test_energy_drift_small(self, small_config):
        """Test total energy is nearly conserved."""
        result = MDEngine(small_config.replace(step_num=50)).run()
        assert abs(result.relative_drift) < 0.05

    def test_time_advances(self, small_config):
        """Test simulation time after N steps."""
        engine = MDEngine(small_config)
        engine.run()
        assert engine.ensemble.step == 10
        assert engine.ensemble.time == pytest.approx(10 * small_config.dt)

    def test_zero_seed_is_fatal(self, small_config):
        """Test the generator's fatal error propagates out of run."""
        engine = MDEngine(small_config.replace(seed=0))
        with pytest.raises(SeedError):
            engine.run()

    def test_custom_force_provider(self, small_config):
        """Test a provider without kinetic energy support."""
        engine = MDEngine(small_config, force_provider=ZeroForce())
        engine.step()
        start = engine.ensemble.positions.copy()

        for _ in range(5):
            engine.step()

        np.testing.assert_array_equal(engine.ensemble.positions, start)
        assert engine.potential_energy == 0.0
        assert engine.kinetic_energy == 0.0

    def test_debug_logging(self, small_config, caplog):
        """Test engine transitions are logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="satmd.engines.engine"):
            MDEngine(small_config.replace(step_num=1)).run()

        messages = [record.getMessage() for record in caplog.records]
        assert any("initialized 40 particles" in m for m in messages)
        assert any(m.startswith("finished 1 steps") for m in messages)


class TestReporters:
    """Test reporter output."""

    def test_state_reporter_table(self, small_config):
        """Test header and one row per reported step."""
        buffer = io.StringIO()
        engine = MDEngine(small_config)
        engine.add_reporter(StateReporter(frequency=5, file=buffer))

        engine.run()

        lines = buffer.getvalue().splitlines()
        assert lines[0].split("\t") == ["Step", "Time", "KE", "PE", "Total", "Drift"]
        assert [line.split("\t")[0] for line in lines[1:]] == ["0", "5", "10"]
        assert float(lines[1].split("\t")[5]) == 0.0

    def test_reporter_group_frequency(self):
        """Test ReporterGroup only fires due reporters."""
        calls = []
        group = ReporterGroup()
        group.add(CallbackReporter(lambda e, kw: calls.append(e.step), frequency=3))
        assert len(group) == 1

        class Stub:
            step = 0

        stub = Stub()
        for step in range(7):
            stub.step = step
            group.report(stub)

        assert calls == [0, 3, 6]

    @pytest.mark.parametrize("frequency", [0, -5])
    def test_invalid_frequency(self, frequency):
        """Test reporters refuse a frequency below one."""
        with pytest.raises(ValueError, match="frequency"):
            StateReporter(frequency=frequency, file=io.StringIO())
        with pytest.raises(ValueError, match="frequency"):
            CallbackReporter(lambda e, kw: None, frequency=frequency)

    def test_remove_reporter(self, small_config):
        """Test removed reporters are not called."""
        calls = []
        reporter = CallbackReporter(lambda e, kw: calls.append(e.step))
        engine = MDEngine(small_config)
        engine.add_reporter(reporter)
        engine.remove_reporter(reporter)

        engine.run()

        assert calls == []

    def test_callback_receives_energies(self, small_config):
        """Test energies are passed as keyword arguments."""
        payloads = []
        engine = MDEngine(small_config.replace(step_num=1))
        engine.add_reporter(CallbackReporter(lambda e, kw: payloads.append(kw)))

        engine.run()

        assert set(payloads[0]) == {
            "potential_energy",
            "kinetic_energy",
            "reference_energy",
        }

    def test_relative_drift_zero_reference(self):
        """Test a zero reference gives NaN rather than raising."""
        assert math.isnan(relative_drift(1.0, 0.0))
        assert relative_drift(1.1, 1.0) == pytest.approx(0.1)
