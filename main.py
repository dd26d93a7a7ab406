"""
main.py — Algorithm Visualizer Flask App
=========================================
The JSON API in front of the visualization engine.  The browser renders;
this process owns the state.

Routes:
  GET  /api/algorithms                  – catalogue (optional ?domain=)
  GET  /api/<domain>/state              – state store + playback cursor
  POST /api/<domain>/generate           – fresh sample data
  POST /api/graph/load                  – replace the graph with a posted one
  POST /api/<domain>/select             – start/target (graph), target (search)
  POST /api/<domain>/speed              – 1 … 100 or a preset name
  POST /api/<domain>/init               – select an algorithm, seed its data
  POST /api/<domain>/prepare            – build the step timeline
  POST /api/<domain>/step/next          – advance one step
  POST /api/<domain>/step/prev          – rewind one step
  POST /api/<domain>/step/goto          – jump to step N
  POST /api/<domain>/reset              – clear run state and timeline

State management:
  Each browser session gets a Workspace (one engine session per domain)
  held in this process; the Flask session cookie only stores the token
  that finds it.  Workspaces are kept least-recently-used, capped by
  Settings.max_workspaces.  Live runs are an in-process async API and are
  not exposed here.
"""

import logging
import secrets
from collections import OrderedDict
from typing import Any, Dict

from flask import Flask, request, jsonify, session

from algorithms import DOMAINS, algorithms_for, list_algorithms
from models import Graph
from engine import Settings, Workspace, SPEED_PRESETS


settings = Settings.from_env()

app = Flask(__name__)
app.secret_key = settings.secret_key or secrets.token_hex(32)

MAX_BAR_COUNT   = 100
MAX_GRAPH_NODES = 15

# token → Workspace, least recently used first
_WORKSPACES: "OrderedDict[str, Workspace]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_workspace() -> Workspace:
    """The caller's workspace, created on first use.

    Only `settings.max_workspaces` are kept; creating one more evicts the
    least recently used.  An evicted client silently gets a fresh one.
    """
    token = session.get("workspace")
    if token is not None and token in _WORKSPACES:
        _WORKSPACES.move_to_end(token)
        return _WORKSPACES[token]

    token = secrets.token_hex(16)
    session["workspace"] = token
    _WORKSPACES[token] = Workspace(settings)
    while len(_WORKSPACES) > max(1, settings.max_workspaces):
        evicted, _ = _WORKSPACES.popitem(last=False)
        app.logger.debug("Evicted workspace %s", evicted)
    return _WORKSPACES[token]


def get_session(domain: str):
    if domain not in DOMAINS:
        return None
    return get_workspace()[domain]


def body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error(message: str, status: int = 400):
    app.logger.info("API error (%s %s): %s", request.method, request.path, message)
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# API: Catalogue
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    return jsonify({
        "domains":       list(DOMAINS),
        "speed_presets": SPEED_PRESETS,
    })


@app.route("/api/algorithms")
def api_algorithms():
    domain = request.args.get("domain")
    if domain is None:
        cards = list_algorithms()
    elif domain in DOMAINS:
        cards = algorithms_for(domain)
    else:
        return error(f"Unknown domain: {domain}", 404)
    return jsonify({"algorithms": [card.to_dict() for card in cards]})


# ---------------------------------------------------------------------------
# API: State & Data
# ---------------------------------------------------------------------------
@app.route("/api/<domain>/state")
def api_state(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/generate", methods=["POST"])
def api_generate(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    if viz.state.is_running:
        return error("A run is in progress")

    try:
        options = _generate_options(body())
    except (TypeError, ValueError) as e:
        return error(f"Invalid options: {e}")
    viz.generate_data(**options)
    return jsonify(viz.to_dict())


@app.route("/api/graph/load", methods=["POST"])
def api_graph_load():
    viz = get_workspace()["graph"]
    if viz.state.is_running:
        return error("A run is in progress")
    try:
        graph = Graph.from_dict(body())
    except (KeyError, TypeError, ValueError) as e:
        return error(f"Invalid graph: {e}")
    viz.load_graph(graph)
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/select", methods=["POST"])
def api_select(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)

    data = body()
    try:
        if domain == "graph":
            viz.select(
                start=_as_int(data.get("start")),
                target=_as_int(data.get("target")),
            )
        elif domain == "search":
            viz.set_target(_as_int(data.get("target")))
        else:
            return error(f"Nothing to select for {domain}")
    except (TypeError, ValueError):
        return error("Node ids and targets must be integers")
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/speed", methods=["POST"])
def api_speed(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    speed = body().get("speed", "medium")
    try:
        value = viz.set_speed(speed)
    except (TypeError, ValueError):
        return error(f"Invalid speed: {speed!r}")
    return jsonify({"speed": value})


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/<domain>/init", methods=["POST"])
def api_init(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    key = body().get("algo")
    if not viz.registry.has(key):
        return error(f"Unknown algorithm: {key}", 404)
    if viz.state.is_running:
        return error("A run is in progress")
    viz.registry.init(key)
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/prepare", methods=["POST"])
def api_prepare(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    data = body()
    bundle = viz.registry.get(data.get("algo"))
    if bundle is None:
        return error(f"Unknown algorithm: {data.get('algo')}", 404)
    try:
        args = viz.request_args(bundle.info, data)
    except (TypeError, ValueError):
        return error("Arguments must be integers")

    count = bundle.prepare_steps(*args)
    payload = viz.to_dict()
    payload["prepared"] = count
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/<domain>/step/next", methods=["POST"])
def api_step_next(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    if not viz.playback.next_step():
        return error("Already at last step")
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/step/prev", methods=["POST"])
def api_step_prev(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    if not viz.playback.previous_step():
        return error("Already at first step")
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/step/goto", methods=["POST"])
def api_step_goto(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    try:
        idx = int(body().get("index", 0))
    except (TypeError, ValueError):
        return error("Invalid step index")
    if not viz.playback.goto_step(idx):
        return error("Invalid step index")
    return jsonify(viz.to_dict())


@app.route("/api/<domain>/reset", methods=["POST"])
def api_reset(domain):
    viz = get_session(domain)
    if viz is None:
        return error(f"Unknown domain: {domain}", 404)
    if viz.state.is_running:
        return error("A run is in progress")
    viz.reset()
    return jsonify(viz.to_dict())


def _as_int(value):
    if value is None or value == "":
        return None
    return int(value)


def _generate_options(data: Dict[str, Any]) -> Dict[str, Any]:
    """Type-check the sample-data options; unknown keys are dropped."""
    options: Dict[str, Any] = {}
    for key in ("directed", "weighted", "sorted"):
        if data.get(key) is not None:
            if not isinstance(data[key], bool):
                raise ValueError(f"{key} must be true or false")
            options[key] = data[key]

    for key, limit in (("count", MAX_BAR_COUNT), ("num_nodes", MAX_GRAPH_NODES)):
        value = _as_int(data.get(key))
        if value is not None:
            if not 1 <= value <= limit:
                raise ValueError(f"{key} must be between 1 and {limit}")
            options[key] = value

    values = data.get("values")
    if values is not None:
        if not isinstance(values, list) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in values
        ):
            raise ValueError("values must be a list of integers")
        options["values"] = values
    return options


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("=" * 60)
    print("  Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
