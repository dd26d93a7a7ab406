"""
registry.py — Runnable Algorithm Bundles
=========================================
A session binds every catalogue card of its domain to itself, producing an
AlgorithmBundle: the card plus the four callables the input surface needs.

    bundle.run(*args)            live, paced run (coroutine)
    bundle.generate_steps(*args) → List[Step]
    bundle.prepare_steps(*args)  load the timeline into playback
    bundle.init()                select the card and seed matching data

AlgorithmRegistry maps keys to bundles.  Registration overwrites, so new
algorithms never touch existing entries.  Unknown keys are logged and
ignored; nothing here raises on a bad key.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from algorithms import AlgoInfo

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmBundle:
    key:            str
    info:           AlgoInfo
    run:            Callable      # coroutine function
    generate_steps: Callable
    prepare_steps:  Callable
    init:           Callable


class AlgorithmRegistry:

    def __init__(self):
        self._bundles: Dict[str, AlgorithmBundle] = {}

    def register(self, bundle: AlgorithmBundle) -> None:
        self._bundles[bundle.key] = bundle

    def get(self, key: str) -> Optional[AlgorithmBundle]:
        return self._bundles.get(key)

    def has(self, key: str) -> bool:
        return key in self._bundles

    def list_all(self) -> List[AlgorithmBundle]:
        return list(self._bundles.values())

    def keys(self) -> List[str]:
        return list(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    # ------------------------------------------------------------------
    # By-key dispatch
    # ------------------------------------------------------------------
    def _lookup(self, key: str, action: str) -> Optional[AlgorithmBundle]:
        bundle = self._bundles.get(key)
        if bundle is None:
            logger.warning("Algorithm %r not found; %s ignored", key, action)
        return bundle

    async def run(self, key: str, *args) -> Any:
        bundle = self._lookup(key, "run")
        if bundle is None:
            return None
        return await bundle.run(*args)

    def init(self, key: str) -> bool:
        bundle = self._lookup(key, "init")
        if bundle is None:
            return False
        bundle.init()
        return True

    def prepare_steps(self, key: str, *args, **kwargs) -> int:
        """Returns the number of prepared steps (0 for an unknown key)."""
        bundle = self._lookup(key, "prepare")
        if bundle is None:
            return 0
        return bundle.prepare_steps(*args, **kwargs)
