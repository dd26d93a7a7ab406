"""
settings.py — Runtime Configuration
====================================
One flat dataclass.  Defaults reproduce the classroom behaviour; every
field can be overridden from the environment with an ``ALGOVIZ_`` prefix:

    ALGOVIZ_DEFAULT_SPEED=80 ALGOVIZ_TIME_SCALE=0.5 flask --app main run

``time_scale`` multiplies every live-run and playback sleep.  Tests run
with ``time_scale=0`` so a whole animation completes in one event-loop
pass while keeping every cooperative yield point.
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


ENV_PREFIX = "ALGOVIZ_"


@dataclass
class Settings:
    default_speed:          int           = 50     # 1 … 100, higher = faster
    time_scale:             float         = 1.0
    pause_poll_ms:          int           = 100
    min_playback_delay_ms:  int           = 50
    bar_count:              int           = 30
    search_size:            int           = 10
    stack_max_size:         int           = 10
    queue_max_size:         int           = 10
    max_workspaces:         int           = 256    # per-process browser sessions kept
    secret_key:             Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.name == "secret_key":
                values[f.name] = raw
            elif f.name == "time_scale":
                values[f.name] = float(raw)
            else:
                values[f.name] = int(raw)
        return cls(**values)
