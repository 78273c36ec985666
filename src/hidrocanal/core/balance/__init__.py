"""
Módulo de balance hídrico canal/superficie.
"""

from .state import SimulationState
from .severity import classify_severity, DEFAULT_THRESHOLDS
from .policies import (
    BALANCE_POLICIES,
    StepFlows,
    continuity_ponding,
    partition_then_fill,
)
from .simulator import WaterBalanceSimulator

__all__ = [
    "SimulationState",
    "classify_severity",
    "DEFAULT_THRESHOLDS",
    "BALANCE_POLICIES",
    "StepFlows",
    "continuity_ponding",
    "partition_then_fill",
    "WaterBalanceSimulator",
]
