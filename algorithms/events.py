"""
events.py — Algorithm Events
=============================
Every algorithm is ONE generator.  It mutates the state object it was
handed and yields an Event at each visually significant instant:

    def bubble_sort(state):
        ...
        state.active = [j, j + 1]
        yield Event(EventKind.COMPARE, f"Comparing {a} and {b}.", pace="bar")

Two drivers consume the very same stream (see engine/drivers.py):

  • the live driver narrates the description and sleeps for the event's
    pace, so the shared state is observed mid-run;
  • the step recorder snapshots the (scratch) state after every event.

An event with ``pace=None`` is narration only: it still becomes a step,
but the live driver does not wait on it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class EventKind(Enum):
    INFO      = "info"        # narration, no visual change worth waiting on
    WARN      = "warn"        # overflow / underflow / negative cycle
    COMPARE   = "compare"
    SWAP      = "swap"
    WRITE     = "write"       # merge overwrite / insertion shift
    MARK      = "mark"        # index or node confirmed
    VISIT     = "visit"
    EXPLORE   = "explore"     # walking an edge to an unseen neighbour
    ENQUEUE   = "enqueue"
    BACKTRACK = "backtrack"
    SELECT    = "select"      # min-distance / min-f pick
    RELAX     = "relax"
    UPDATE    = "update"      # distance improved
    ACCEPT    = "accept"      # MST edge taken
    REJECT    = "reject"      # MST edge would close a cycle
    FOUND     = "found"
    PATH      = "path"
    ENTER     = "enter"       # tree call frame pushed
    DESCEND   = "descend"     # tree edge walked
    EMIT      = "emit"        # tree value appended to the result
    PROBE     = "probe"       # search comparison
    PUSH      = "push"
    POP       = "pop"
    PEEK      = "peek"


@dataclass(frozen=True)
class Event:
    kind:        EventKind
    description: str           = ""
    pace:        Optional[str] = None     # key into engine.timing.PACES


EventStream = Iterator[Event]


def info(description: str) -> Event:
    return Event(EventKind.INFO, description)
