import asyncio
import random

import pytest

from engine import Settings
from models import Graph


@pytest.fixture
def settings():
    """Instant timings: every sleep is scaled to zero."""
    return Settings(time_scale=0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_session(settings):
    def _make(session_type, seed=7):
        return session_type(settings, random.Random(seed))
    return _make


@pytest.fixture
def run_live():
    """Drive a live run to completion on a fresh event loop."""
    def _run(session, key, *args):
        return asyncio.run(session.registry.run(key, *args))
    return _run


@pytest.fixture
def triangle():
    """0-1 (2), 1-2 (3), 0-2 (10)."""
    return Graph.from_edges(3, [(0, 1, 2), (1, 2, 3), (0, 2, 10)])
