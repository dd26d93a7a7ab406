"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper scrubs a pre-computed step timeline against a session's store.
It owns the immutable list of Steps produced by the recorder and a cursor
into it, and exposes a play/stop/next/prev/goto API.

Cursor:
    step_index ∈ [-1, len(steps) - 1]      -1 = before the first step

Transitions:
    next_step()      cursor + 1, apply step, narrate its description
    previous_step()  cursor - 1, apply step (undo is not narrated)
    goto_step(i)     bounds-checked jump, apply step
    play()           timer task; each tick calls next_step()
    stop()           cancels the timer; idempotent

Applying a step overwrites every observable field of the store.  Only one
playback task may be alive per Stepper; play() while playing is a no-op.
"""

import asyncio
import logging
from enum import Enum
from typing import List, Optional

from engine.settings import Settings
from engine.state import VisualizationState
from engine.timing import playback_delay_ms

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"        # nothing loaded
    READY    = "ready"       # steps loaded, timer stopped
    PLAYING  = "playing"
    FINISHED = "finished"    # cursor on the last step


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state      : The store steps are applied to.
        settings   : Supplies time_scale and the playback delay floor.
        steps      : The loaded timeline (never mutated after load()).
        step_index : Cursor; -1 before the first step.
        is_playing : Timer guard.
    """

    def __init__(self, state: VisualizationState, settings: Settings):
        self.state:      VisualizationState     = state
        self.settings:   Settings               = settings
        self.steps:      List                   = []
        self.step_index: int                    = -1
        self.is_playing: bool                   = False
        self._task:      Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: List) -> None:
        """Replace the timeline; the cursor goes back before the first step."""
        self.stop()
        self.steps      = list(steps)
        self.step_index = -1

    def clear(self) -> None:
        self.load([])

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.step_index >= len(self.steps) - 1:
            return False
        self.step_index += 1
        step = self.steps[self.step_index]
        self.state.apply(step)
        if step.description:
            self.state.narrate(step.description)
        return True

    def previous_step(self) -> bool:
        """Rewind one step.  Returns False if already at the first step."""
        if self.step_index <= 0:
            return False
        self.step_index -= 1
        self.state.apply(self.steps[self.step_index])
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if not 0 <= idx < len(self.steps):
            return False
        self.step_index = idx
        self.state.apply(self.steps[idx])
        return True

    # ------------------------------------------------------------------
    # Play / Stop
    # ------------------------------------------------------------------
    def play(self) -> Optional[asyncio.Task]:
        """Start auto-advancing.  Without a running event loop this is a no-op."""
        if self.is_playing or not self.steps:
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("play() ignored, no running event loop")
            return None
        self.is_playing = True
        self._task = loop.create_task(self._run())
        return self._task

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.is_playing = False

    async def _run(self) -> None:
        try:
            while self.step_index < len(self.steps) - 1:
                delay = playback_delay_ms(self.state.speed, self.settings.min_playback_delay_ms)
                await asyncio.sleep(delay * self.settings.time_scale / 1000)
                self.next_step()
        finally:
            self.is_playing = False

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return bool(self.steps) and self.step_index == len(self.steps) - 1

    @property
    def status(self) -> StepperState:
        if self.is_playing:
            return StepperState.PLAYING
        if not self.steps:
            return StepperState.IDLE
        if self.is_finished:
            return StepperState.FINISHED
        return StepperState.READY

    def to_dict(self) -> dict:
        return {
            "step_index":  self.step_index,
            "total_steps": self.total_steps,
            "is_playing":  self.is_playing,
            "status":      self.status.value,
        }
