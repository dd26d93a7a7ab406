"""
engine/
-------
State stores, live driver, step recorder, playback and sessions.

    from engine import Workspace, GraphSession, Settings
"""

from engine.settings import Settings
from engine.timing   import SPEED_PRESETS, PACES, delay_ms, playback_delay_ms, clamp_speed
from engine.state    import (
    VisualizationState, SortingState, GraphState, TreeState, SearchState, StackState, QueueState,
)
from engine.drivers  import LiveDriver, record
from engine.stepper  import Stepper, StepperState
from engine.registry import AlgorithmBundle, AlgorithmRegistry
from engine.session  import (
    Session, SortingSession, GraphSession, TreeSession, SearchSession, StackSession, QueueSession,
    SESSION_TYPES, Workspace,
)

__all__ = [
    "Settings",
    "SPEED_PRESETS", "PACES", "delay_ms", "playback_delay_ms", "clamp_speed",
    "VisualizationState", "SortingState", "GraphState", "TreeState",
    "SearchState", "StackState", "QueueState",
    "LiveDriver", "record",
    "Stepper", "StepperState",
    "AlgorithmBundle", "AlgorithmRegistry",
    "Session", "SortingSession", "GraphSession", "TreeSession",
    "SearchSession", "StackSession", "QueueSession",
    "SESSION_TYPES", "Workspace",
]
