"""
ReadsAnalyzer v0.1.0

Synthetic read generation.
"""

from .read_simulator import (
    SimulatorConfig,
    SimpleReadsSimulator,
    delete_random_positions,
    substitute_random_positions,
)

__all__ = [
    "SimulatorConfig",
    "SimpleReadsSimulator",
    "delete_random_positions",
    "substitute_random_positions",
]
