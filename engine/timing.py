"""
timing.py — Speed → Delay
==========================
Speed is a user-facing 1…100 slider where higher means faster, so every
delay is an inverted linear function of it:

    delay_ms = max(floor, base - factor * speed)

Each event names a pace; the table below keeps the classroom timings.
"""

from typing import Dict, Tuple


MIN_SPEED = 1
MAX_SPEED = 100

# pace → (base_ms, factor, floor_ms)
PACES: Dict[str, Tuple[int, int, int]] = {
    "node":        (1000, 9, 10),    # graph node visit / selection
    "edge":        (500, 4, 10),     # graph edge walk / relaxation
    "sweep":       (300, 2, 50),     # Bellman-Ford relaxation pass
    "detect":      (200, 2, 50),     # Bellman-Ford negative-cycle pass
    "bar":         (101, 1, 1),      # sorting compare / swap / write
    "enter":       (500, 4, 10),     # tree call frame pushed
    "descend":     (300, 2, 10),     # tree edge walked
    "emit":        (700, 6, 10),     # tree value emitted
    "probe":       (1550, 15, 50),   # search comparison: (100 - s) * 15 + 50
    "phase_short": (301, 1, 1),      # stack / queue animation phases
    "phase":       (401, 1, 1),
    "phase_long":  (601, 1, 1),
}

PLAYBACK_PACE: Tuple[int, int] = (1000, 9)

# ---------------------------------------------------------------------------
# Speed presets (slider values)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   10,    # teaching mode
    "medium": 50,
    "fast":   90,    # demo mode
    "turbo":  100,
}


def clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def delay_ms(pace: str, speed: int) -> int:
    """Live-run delay for one event of the given pace."""
    base, factor, floor = PACES[pace]
    return max(floor, base - factor * speed)


def playback_delay_ms(speed: int, floor: int = 50) -> int:
    """Interval between auto-play ticks of the step timeline."""
    base, factor = PLAYBACK_PACE
    return max(floor, base - factor * speed)
