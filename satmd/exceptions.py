"""Exception types raised by satmd."""

from __future__ import annotations


class SatmdError(RuntimeError):
    """Base class for unrecoverable simulation errors."""


class SeedError(SatmdError):
    """
    Raised when the uniform generator is asked to draw with a zero seed.

    A zero seed is a fixed point of the multiplicative recursion, so no
    draw can ever advance it. The condition is fatal: callers must not
    continue the simulation after catching it.

    Attributes:
        seed: The offending seed value.
        routine: Name of the routine that detected the condition.
    """

    def __init__(self, seed: int, routine: str = "UNIFORM") -> None:
        self.seed = seed
        self.routine = routine
        super().__init__(f"{routine} - Fatal error!\n  Input value of SEED = {seed}.")
