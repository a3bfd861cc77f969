"""Simulation engine implementations."""

from .engine import EngineStatus, MDEngine
from .reporters import CallbackReporter, Reporter, ReporterGroup, StateReporter
from .result import SimulationResult

__all__ = [
    "MDEngine",
    "EngineStatus",
    "SimulationResult",
    "Reporter",
    "ReporterGroup",
    "StateReporter",
    "CallbackReporter",
]
