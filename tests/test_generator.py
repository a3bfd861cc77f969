"""Tests for the deterministic uniform generator."""

import numpy as np
import pytest

from satmd.exceptions import SatmdError, SeedError
from satmd.system.generator import (
    I4_HUGE,
    UniformGenerator,
    draw,
    uniform_matrix,
)


class TestDraw:
    """Test single draws."""

    def test_first_draw_from_reference_seed(self):
        """Test the first step of the recursion from seed 123456789."""
        value, seed = draw(123456789, 0.0, 10.0)

        assert seed == 469049721
        assert value == pytest.approx(10.0 * 469049721 / I4_HUGE, rel=1e-15)

    @pytest.mark.parametrize(
        "seed", [1, 2, 12345, 123456789, I4_HUGE - 1, -1, -98765, -(I4_HUGE - 1)]
    )
    def test_matches_modular_product(self, seed):
        """Test Schrage decomposition against exact big-integer arithmetic."""
        _, new_seed = draw(seed, 0.0, 1.0)
        assert new_seed == (16807 * seed) % I4_HUGE

    def test_value_in_range(self):
        """Test drawn values stay inside [lower, upper]."""
        seed = 42
        for _ in range(1000):
            value, seed = draw(seed, -3.0, 5.0)
            assert -3.0 <= value <= 5.0

    def test_seed_never_reaches_zero(self):
        """Test a nonzero seed stays nonzero."""
        seed = 7
        for _ in range(1000):
            _, seed = draw(seed, 0.0, 1.0)
            assert 0 < seed < I4_HUGE

    def test_zero_seed_is_fatal(self):
        """Test a zero seed raises instead of returning a value."""
        with pytest.raises(SeedError) as excinfo:
            draw(0, 0.0, 1.0)

        assert excinfo.value.seed == 0
        assert "SEED = 0" in str(excinfo.value)

    @pytest.mark.parametrize("seed", [I4_HUGE, -I4_HUGE, 2**40, -(2**40)])
    def test_out_of_range_seed_rejected(self, seed):
        """Test seeds outside the signed 32-bit range raise ValueError."""
        with pytest.raises(ValueError, match="seed"):
            draw(seed, 0.0, 10.0)

    def test_extreme_valid_seeds_stay_in_range(self):
        """Test the largest admissible seeds draw inside [lower, upper)."""
        for seed in (I4_HUGE - 1, -(I4_HUGE - 1)):
            value, new_seed = draw(seed, 0.0, 10.0)
            assert 0.0 <= value < 10.0
            assert 0 < new_seed < I4_HUGE

    def test_seed_error_is_satmd_error(self):
        """Test the exception hierarchy."""
        assert issubclass(SeedError, SatmdError)
        assert issubclass(SatmdError, RuntimeError)


class TestUniformMatrix:
    """Test matrix fills."""

    def test_column_major_draw_order(self):
        """Test element (i, j) is the (i + j*m)-th draw."""
        m, n = 3, 4
        values, final_seed = uniform_matrix(m, n, 0.0, 10.0, 123456789)

        seed = 123456789
        expected = []
        for _ in range(m * n):
            value, seed = draw(seed, 0.0, 10.0)
            expected.append(value)

        np.testing.assert_array_equal(values, np.array(expected))
        assert final_seed == seed

    def test_shape_and_dtype(self):
        """Test the result is a flat float64 array."""
        values, _ = uniform_matrix(2, 5, 0.0, 1.0, 99)
        assert values.shape == (10,)
        assert values.dtype == np.float64

    def test_zero_seed_is_fatal(self):
        """Test a zero seed raises before any draw."""
        with pytest.raises(SeedError):
            uniform_matrix(3, 3, 0.0, 1.0, 0)

    @pytest.mark.parametrize("seed", [I4_HUGE, 2 * I4_HUGE, 2**40])
    def test_out_of_range_seed_rejected(self, seed):
        """Test a seed that would collapse to zero is refused up front."""
        with pytest.raises(ValueError, match="seed"):
            uniform_matrix(3, 2, 0.0, 10.0, seed)

    def test_values_inside_box(self):
        """Test every filled value lies in [lower, upper)."""
        values, seed = uniform_matrix(3, 200, 0.0, 10.0, -(I4_HUGE - 1))
        assert np.all((values >= 0.0) & (values < 10.0))
        assert seed != 0


class TestUniformGenerator:
    """Test the stateful generator object."""

    def test_determinism(self):
        """Test two generators with the same seed give identical sequences."""
        gen1 = UniformGenerator(2024)
        gen2 = UniformGenerator(2024)

        seq1 = [gen1.draw(0.0, 1.0) for _ in range(500)]
        seq2 = [gen2.draw(0.0, 1.0) for _ in range(500)]

        assert seq1 == seq2
        assert gen1.seed == gen2.seed

    def test_different_seeds_differ(self):
        """Test different seeds give different sequences."""
        gen1 = UniformGenerator(1)
        gen2 = UniformGenerator(2)
        assert gen1.draw() != gen2.draw()

    def test_seed_advances(self):
        """Test the seed property tracks the recursion."""
        gen = UniformGenerator(123456789)
        gen.draw()
        assert gen.seed == 469049721

    def test_matrix_continues_sequence(self):
        """Test matrix() and draw() share one stream."""
        gen1 = UniformGenerator(31337)
        block = gen1.matrix(2, 3, 0.0, 10.0)

        gen2 = UniformGenerator(31337)
        singles = [gen2.draw(0.0, 10.0) for _ in range(6)]

        np.testing.assert_array_equal(block, singles)
        assert gen1.seed == gen2.seed

    def test_zero_seed_fails_on_draw(self):
        """Test a zero seed is rejected on first use."""
        gen = UniformGenerator(0)
        with pytest.raises(SeedError):
            gen.draw()
        with pytest.raises(SeedError):
            gen.matrix(1, 1)
