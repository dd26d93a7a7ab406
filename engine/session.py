"""
session.py — One Open Visualization
====================================
A Session is the context object for one domain: it owns the state store,
the live driver, the playback stepper, a random source for sample data and
a registry of runnable bundles (one per catalogue card of its domain).

    session = GraphSession(Settings(time_scale=0), random.Random(7))
    session.select(start=0, target=3)
    await session.registry.run("dijkstra")
    session.registry.prepare_steps("bfs")
    session.playback.next_step()

Every entry point honours the single-run guard: while a live run is in
flight, run/init/reset/generate_data are refused (logged at DEBUG, no
exception).  Invalid input (no data, missing start, unknown target node,
missing push value) is refused the same way.

A Workspace groups one session per domain; the Flask layer keeps one
workspace per browser session.
"""

import logging
import random
from functools import partial
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from algorithms import AlgoInfo, DOMAINS, SORTING, GRAPH, TREE, SEARCH, STACK, QUEUE, algorithms_for
from engine.drivers import LiveDriver, record
from engine.registry import AlgorithmBundle, AlgorithmRegistry
from engine.settings import Settings
from engine.state import (
    VisualizationState, SortingState, GraphState, TreeState, SearchState, StackState, QueueState,
)
from engine.stepper import Stepper
from engine.timing import SPEED_PRESETS, clamp_speed
from models import Graph, BinaryTree

logger = logging.getLogger(__name__)


class Session:
    """
    Attributes:
        settings : Timing and sizing configuration.
        rng      : Random source for generate_data().
        state    : The shared store observers read.
        driver   : Paces live runs against `state`.
        playback : Scrubs prepared step timelines against `state`.
        registry : key → AlgorithmBundle for this domain.
    """

    domain:     str  = ""
    state_type: type = VisualizationState

    def __init__(self, settings: Optional[Settings] = None, rng: Optional[random.Random] = None):
        self.settings: Settings           = settings or Settings()
        self.rng:      random.Random      = rng or random.Random()
        self.state:    VisualizationState = self.state_type()
        self.state.speed = clamp_speed(self.settings.default_speed)
        self.configure()

        self.driver:   LiveDriver         = LiveDriver(self.state, self.settings)
        self.playback: Stepper            = Stepper(self.state, self.settings)
        self.registry: AlgorithmRegistry  = AlgorithmRegistry()
        for info in algorithms_for(self.domain):
            self.registry.register(self.bind(info))

        self.generate_data()

    def configure(self) -> None:
        """Hook for sessions that size their store from settings."""

    def bind(self, info: AlgoInfo) -> AlgorithmBundle:
        return AlgorithmBundle(
            key=info.key,
            info=info,
            run=partial(self.run, info),
            generate_steps=partial(self.generate_steps, info),
            prepare_steps=partial(self.prepare_steps, info),
            init=partial(self.init, info),
        )

    # ------------------------------------------------------------------
    # Argument resolution
    # ------------------------------------------------------------------
    def _arguments(self, info: AlgoInfo, args: Tuple) -> Optional[Tuple]:
        """Positional arguments for info.fn after the state, or None to refuse."""
        return () if self.state.has_data() else None

    def request_args(self, info: AlgoInfo, params: Mapping[str, Any]) -> Tuple:
        """Translate a JSON request body into positional run arguments."""
        return ()

    # ------------------------------------------------------------------
    # Live run
    # ------------------------------------------------------------------
    async def run(self, info: AlgoInfo, *args) -> Any:
        state = self.state
        if state.is_running:
            logger.debug("%s: %s refused, a run is already in progress", self.domain, info.key)
            return None
        resolved = self._arguments(info, args)
        if resolved is None:
            logger.debug("%s: %s refused, invalid input %r", self.domain, info.key, args)
            return None

        self.playback.stop()
        state.is_running = True
        state.is_paused  = False
        state.reset_run()
        state.set_algorithm(info)
        logger.debug("%s: live run of %s started", self.domain, info.key)
        try:
            return await self.driver.drive(info.fn(state, *resolved))
        finally:
            state.is_running = False
            state.is_paused  = False
            logger.debug("%s: live run of %s finished", self.domain, info.key)

    def pause(self) -> None:
        if self.state.is_running:
            self.state.is_paused = True

    def resume(self) -> None:
        self.state.is_paused = False

    def toggle_pause(self) -> None:
        if self.state.is_paused:
            self.resume()
        else:
            self.pause()

    # ------------------------------------------------------------------
    # Step timeline
    # ------------------------------------------------------------------
    def generate_steps(self, info: AlgoInfo, *args) -> List:
        resolved = self._arguments(info, args)
        if resolved is None:
            return []
        scratch = self.state.scratch()
        scratch.reset_run()
        scratch.algorithm = info
        return record(scratch, info.fn(scratch, *resolved))

    def prepare_steps(self, info: AlgoInfo, *args, auto_play: bool = False) -> int:
        """Load a fresh timeline; auto_play only starts inside a running event loop."""
        if self.state.is_running:
            logger.debug("%s: prepare of %s refused, a run is in progress", self.domain, info.key)
            return 0
        self.playback.stop()
        steps = self.generate_steps(info, *args)
        self.state.reset_run()
        self.state.set_algorithm(info)
        self.state.narrate(f"Prepared {len(steps)} steps. Use Next or Play to walk through them.")
        self.playback.load(steps)
        if auto_play:
            self.playback.play()
        return len(steps)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def init(self, info: AlgoInfo) -> None:
        """Select an algorithm and seed data shaped for it."""
        if self.state.is_running:
            logger.debug("%s: init of %s refused, a run is in progress", self.domain, info.key)
            return
        self.state.set_algorithm(info)
        self.generate_data(**info.seed)

    def reset(self) -> None:
        if self.state.is_running:
            logger.debug("%s: reset refused, a run is in progress", self.domain)
            return
        self.playback.clear()
        self.state.reset_run()
        self.state.explanation = list(self.state.info_lines)

    def generate_data(self, **options) -> None:
        if self.state.is_running:
            logger.debug("%s: generate refused, a run is in progress", self.domain)
            return
        self.playback.clear()
        self.state.reset_run()
        self.seed(**options)
        self.state.explanation = list(self.state.info_lines)

    def seed(self, **options) -> None:
        """Fill the store's input data; overridden per domain."""

    def set_speed(self, speed: Union[int, str]) -> int:
        if isinstance(speed, str) and speed in SPEED_PRESETS:
            speed = SPEED_PRESETS[speed]
        self.state.speed = clamp_speed(speed)
        return self.state.speed

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain":     self.domain,
            "state":      self.state.to_dict(),
            "playback":   self.playback.to_dict(),
            "algorithms": self.registry.keys(),
        }


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
class SortingSession(Session):
    domain     = SORTING
    state_type = SortingState

    def seed(self, count: Optional[int] = None, **_) -> None:
        count = count or self.settings.bar_count
        self.state.bars = [self.rng.randint(10, 99) for _ in range(count)]


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
class GraphSession(Session):
    domain     = GRAPH
    state_type = GraphState

    def __init__(self, settings: Optional[Settings] = None, rng: Optional[random.Random] = None):
        self.directed: bool = False
        self.weighted: bool = True
        super().__init__(settings, rng)

    def seed(self, directed: Optional[bool] = None, weighted: Optional[bool] = None,
             num_nodes: Optional[int] = None, **_) -> None:
        if directed is not None:
            self.directed = directed
        if weighted is not None:
            self.weighted = weighted
        self.state.graph = Graph.generate_random(
            rng=self.rng, num_nodes=num_nodes, directed=self.directed, weighted=self.weighted,
        )
        self.state.selected_start_node  = None
        self.state.selected_target_node = None

    def load_graph(self, graph: Graph) -> None:
        """Replace the graph with a caller-built one (clears selections)."""
        if self.state.is_running:
            return
        self.playback.clear()
        self.state.reset_run()
        self.state.graph = graph
        self.directed = graph.directed
        self.state.selected_start_node  = None
        self.state.selected_target_node = None

    def select(self, start: Optional[int] = None, target: Optional[int] = None) -> None:
        """Set the start/target pickers; ids that are not nodes clear the picker."""
        graph = self.state.graph
        self.state.selected_start_node  = start if graph.has_node(start) else None
        self.state.selected_target_node = target if graph.has_node(target) else None

    def _arguments(self, info: AlgoInfo, args: Tuple) -> Optional[Tuple]:
        graph = self.state.graph
        if graph.node_count() == 0:
            return None
        start  = args[0] if len(args) > 0 and args[0] is not None else self.state.selected_start_node
        target = args[1] if len(args) > 1 and args[1] is not None else self.state.selected_target_node

        if info.requires_start and not graph.has_node(start):
            return None
        if info.requires_target and not graph.has_node(target):
            return None
        if not graph.has_node(target):
            target = None

        resolved: Tuple = ()
        if info.requires_start:
            resolved += (start,)
        if info.accepts_target:
            resolved += (target,)
        return resolved

    def request_args(self, info: AlgoInfo, params: Mapping[str, Any]) -> Tuple:
        return (_optional_int(params.get("start")), _optional_int(params.get("target")))


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------
class TreeSession(Session):
    domain     = TREE
    state_type = TreeState

    def seed(self, values: Optional[List[int]] = None, **_) -> None:
        if values is not None:
            self.state.tree = BinaryTree.from_values(values)
        else:
            self.state.tree = BinaryTree.generate_random(self.rng)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
class SearchSession(Session):
    domain     = SEARCH
    state_type = SearchState

    def seed(self, **options) -> None:
        ascending = options.get("sorted")
        if ascending is None:
            algorithm = self.state.algorithm
            ascending = bool(algorithm and algorithm.seed.get("sorted"))
        numbers = [self.rng.randint(1, 99) for _ in range(self.settings.search_size)]
        if ascending:
            numbers.sort()
        self.state.numbers = numbers
        self.state.target  = self.rng.choice(numbers)

    def set_target(self, target: Optional[int]) -> None:
        if not self.state.is_running:
            self.state.target = target

    def _arguments(self, info: AlgoInfo, args: Tuple) -> Optional[Tuple]:
        if not self.state.numbers:
            return None
        target = args[0] if args and args[0] is not None else self.state.target
        if target is None:
            return None
        return (target,)

    def request_args(self, info: AlgoInfo, params: Mapping[str, Any]) -> Tuple:
        return (_optional_int(params.get("target")),)


# ---------------------------------------------------------------------------
# Stack / Queue
# ---------------------------------------------------------------------------
class _ContainerSession(Session):

    def _arguments(self, info: AlgoInfo, args: Tuple) -> Optional[Tuple]:
        if not info.requires_value:
            return ()
        if not args or args[0] is None:
            return None
        return (args[0],)

    def request_args(self, info: AlgoInfo, params: Mapping[str, Any]) -> Tuple:
        if not info.requires_value:
            return ()
        return (_optional_int(params.get("value")),)

    def _random_values(self) -> List[int]:
        count = self.rng.randint(2, max(2, self.state.max_size - 1))
        return [self.rng.randint(1, 99) for _ in range(count)]


class StackSession(_ContainerSession):
    domain     = STACK
    state_type = StackState

    def configure(self) -> None:
        self.state.max_size = self.settings.stack_max_size

    def seed(self, **_) -> None:
        self.state.stack     = self._random_values()
        self.state.top_index = len(self.state.stack) - 1

    def clear(self) -> None:
        if self.state.is_running:
            return
        self.playback.clear()
        self.state.reset_run()
        self.state.stack     = []
        self.state.top_index = -1
        self.state.explanation = ["Stack cleared."]

    async def push(self, value: int) -> Optional[int]:
        return await self.registry.run("push", value)

    async def pop(self) -> Optional[int]:
        return await self.registry.run("pop")

    async def peek(self) -> Optional[int]:
        return await self.registry.run("peek")


class QueueSession(_ContainerSession):
    domain     = QUEUE
    state_type = QueueState

    def configure(self) -> None:
        self.state.max_size = self.settings.queue_max_size

    def seed(self, **_) -> None:
        self.state.queue       = self._random_values()
        self.state.front_index = 0
        self.state.rear_index  = len(self.state.queue) - 1

    def clear(self) -> None:
        if self.state.is_running:
            return
        self.playback.clear()
        self.state.reset_run()
        self.state.queue       = []
        self.state.front_index = -1
        self.state.rear_index  = -1
        self.state.explanation = ["Queue cleared."]

    async def enqueue(self, value: int) -> Optional[int]:
        return await self.registry.run("enqueue", value)

    async def dequeue(self) -> Optional[int]:
        return await self.registry.run("dequeue")

    async def peek(self) -> Optional[int]:
        return await self.registry.run("peek")


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


SESSION_TYPES: Dict[str, type] = {
    SORTING: SortingSession,
    GRAPH:   GraphSession,
    TREE:    TreeSession,
    SEARCH:  SearchSession,
    STACK:   StackSession,
    QUEUE:   QueueSession,
}


# ---------------------------------------------------------------------------
# Workspace
# ---------------------------------------------------------------------------
class Workspace:
    """One session per domain, sharing settings; each gets its own rng."""

    def __init__(self, settings: Optional[Settings] = None, seed: Optional[int] = None):
        self.settings = settings or Settings()
        master = random.Random(seed)
        self.sessions: Dict[str, Session] = {
            domain: SESSION_TYPES[domain](self.settings, random.Random(master.random()))
            for domain in DOMAINS
        }

    def get(self, domain: str) -> Optional[Session]:
        return self.sessions.get(domain)

    def __getitem__(self, domain: str) -> Session:
        return self.sessions[domain]

    def to_dict(self) -> Dict[str, Any]:
        return {domain: session.to_dict() for domain, session in self.sessions.items()}
