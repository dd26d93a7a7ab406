"""
drivers.py — Event Consumers
=============================
The two ways of consuming an algorithm's event stream.

LiveDriver
    Runs against the session's shared store.  For every event it waits
    out any pause, appends the event's narration and then sleeps for the
    event's pace, so observers see the state exactly as the algorithm
    left it at that instant.  Pausing is a cooperative polling loop;
    partial progress lives in the suspended generator, so resume picks up
    exactly where the run stopped.

record()
    Runs against a scratch copy of the store and turns every event into a
    Step snapshot.  Synchronous, no timers.
"""

import asyncio
from typing import Any, Generator, List

from algorithms.events import Event
from engine.settings import Settings
from engine.state import VisualizationState
from engine.timing import delay_ms


class LiveDriver:
    """
    Attributes:
        state    : The shared store the generator mutates.
        settings : Supplies time_scale and the pause poll interval.
    """

    def __init__(self, state: VisualizationState, settings: Settings):
        self.state:    VisualizationState = state
        self.settings: Settings           = settings

    async def drive(self, events: Generator[Event, None, Any]) -> Any:
        """Consume the stream to the end; returns the generator's return value."""
        while True:
            try:
                event = next(events)
            except StopIteration as stop:
                return stop.value
            await self.checkpoint(event)

    async def checkpoint(self, event: Event) -> None:
        await self.wait_while_paused()
        if event.description:
            self.state.narrate(event.description)
        if event.pace is not None:
            await self.sleep(delay_ms(event.pace, self.state.speed))
        else:
            await asyncio.sleep(0)
            await self.wait_while_paused()

    # ------------------------------------------------------------------
    # Cooperative waiting
    # ------------------------------------------------------------------
    @property
    def poll_seconds(self) -> float:
        return self.settings.pause_poll_ms * self.settings.time_scale / 1000

    async def wait_while_paused(self) -> None:
        while self.state.is_paused and self.state.is_running:
            await asyncio.sleep(self.poll_seconds)

    async def sleep(self, ms: float) -> None:
        """Sleep `ms` (scaled), re-checking the pause flag every poll interval."""
        remaining = ms * self.settings.time_scale / 1000
        poll = self.poll_seconds
        if remaining <= 0 or poll <= 0:
            await asyncio.sleep(max(0.0, remaining))
            await self.wait_while_paused()
            return
        while remaining > 0:
            await self.wait_while_paused()
            chunk = min(remaining, poll)
            await asyncio.sleep(chunk)
            remaining -= chunk
        await self.wait_while_paused()


def record(state: VisualizationState, events: Generator[Event, None, Any]) -> List:
    """Exhaust the stream against `state`, snapshotting after every event."""
    return [state.snapshot(description=event.description) for event in events]
