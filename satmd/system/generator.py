"""
Deterministic uniform pseudorandom generator.

Park-Miller minimal standard generator:

    seed = 16807 * seed mod (2^31 - 1)
    unif = seed / (2^31 - 1)

The modular product is formed with Schrage's decomposition, so no
intermediate ever needs more than 32 bits including the sign bit. Given the
same seed the sequence is bit-for-bit reproducible.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ..config import I4_HUGE  # 2^31 - 1
from ..exceptions import SeedError

_MULTIPLIER = 16807
_QUOTIENT = 127773  # I4_HUGE // _MULTIPLIER
_REMAINDER = 2836  # I4_HUGE % _MULTIPLIER
_SCALE = 1.0 / I4_HUGE


def _truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (b > 0)."""
    q = abs(a) // b
    return q if a >= 0 else -q


def _next_seed(seed: int) -> int:
    k = _truncated_div(seed, _QUOTIENT)
    seed = _MULTIPLIER * (seed - k * _QUOTIENT) - k * _REMAINDER
    if seed < 0:
        seed += I4_HUGE
    return seed


def _check_seed(seed: int, routine: str) -> None:
    if seed == 0:
        raise SeedError(seed, routine)
    if abs(seed) >= I4_HUGE:
        raise ValueError(f"seed must satisfy |seed| < {I4_HUGE}, got {seed}")


def draw(seed: int, lower: float, upper: float) -> tuple[float, int]:
    """
    Draw one uniform value in [lower, upper).

    Args:
        seed: Current generator seed. Must be nonzero with |seed| < 2^31 - 1.
        lower: Lower limit of the range.
        upper: Upper limit of the range.

    Returns:
        Tuple of (value, new_seed).

    Raises:
        SeedError: If seed is zero.
        ValueError: If seed is outside the signed 32-bit range.
    """
    _check_seed(seed, "UNIFORM")
    seed = _next_seed(seed)
    return lower + (upper - lower) * float(seed) * _SCALE, seed


def uniform_matrix(
    m: int, n: int, lower: float, upper: float, seed: int
) -> tuple[NDArray[np.floating], int]:
    """
    Fill an M x N matrix with uniform values.

    Values are drawn column by column: all M rows of column j before
    column j + 1. The result is returned flat in draw order, so element
    (i, j) sits at index i + j * m. With m = D and n = P this is exactly a
    C-ordered (P, D) position array.

    Args:
        m: Number of rows.
        n: Number of columns.
        lower: Lower limit of the range.
        upper: Upper limit of the range.
        seed: Initial seed. Must be nonzero with |seed| < 2^31 - 1.

    Returns:
        Tuple of (flat values of length m * n, new_seed).

    Raises:
        SeedError: If seed is zero, or becomes zero during the fill.
        ValueError: If seed is outside the signed 32-bit range.
    """
    _check_seed(seed, "UNIFORM_MATRIX")

    values = np.empty(m * n, dtype=np.float64)
    width = upper - lower
    for j in range(n):
        for i in range(m):
            _check_seed(seed, "UNIFORM_MATRIX")
            seed = _next_seed(seed)
            values[i + j * m] = lower + width * float(seed) * _SCALE
    return values, seed


class UniformGenerator:
    """
    Seeded uniform generator holding its seed as the only mutable state.

    Example:
        gen = UniformGenerator(123456789)
        x = gen.draw(0.0, 10.0)
        block = gen.matrix(3, 2000, 0.0, 10.0)
    """

    def __init__(self, seed: int) -> None:
        """
        Initialize generator.

        Args:
            seed: Initial seed. A zero seed is accepted here and rejected
                on the first draw.
        """
        self._seed = int(seed)

    @property
    def seed(self) -> int:
        """Return the current seed."""
        return self._seed

    def draw(self, lower: float = 0.0, upper: float = 1.0) -> float:
        """Draw one value in [lower, upper) and advance the seed."""
        value, self._seed = draw(self._seed, lower, upper)
        return value

    def matrix(
        self, m: int, n: int, lower: float = 0.0, upper: float = 1.0
    ) -> NDArray[np.floating]:
        """Draw an M x N matrix in column-major order, returned flat."""
        values, self._seed = uniform_matrix(m, n, lower, upper, self._seed)
        return values
