"""Analysis of simulation output."""

from .base import Analyzer, StreamingAnalyzer
from .energy import EnergyAnalyzer

__all__ = [
    "Analyzer",
    "StreamingAnalyzer",
    "EnergyAnalyzer",
]
