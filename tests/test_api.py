from collections import OrderedDict
from dataclasses import replace

import pytest

import main
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_catalogue(client):
    res = client.get("/api/algorithms?domain=graph")

    assert res.status_code == 200
    keys = [a["key"] for a in res.get_json()["algorithms"]]
    assert keys == ["bfs", "dfs", "dijkstra", "astar", "prims", "kruskals", "bellman_ford"]


def test_unknown_domain_is_404(client):
    assert client.get("/api/algorithms?domain=heap").status_code == 404
    assert client.get("/api/heap/state").status_code == 404
    assert client.post("/api/heap/reset").status_code == 404


def test_state_is_kept_per_browser_session(client):
    first = client.get("/api/sorting/state").get_json()
    second = client.get("/api/sorting/state").get_json()

    assert first["state"]["bars"] == second["state"]["bars"]
    assert len(first["state"]["bars"]) == 30
    assert first["playback"]["step_index"] == -1


def test_prepare_and_walk_sorting_steps(client):
    res = client.post("/api/sorting/prepare", json={"algo": "bubble"})
    assert res.status_code == 200
    total = res.get_json()["prepared"]
    assert total > 0

    assert client.post("/api/sorting/step/prev").status_code == 400

    res = client.post("/api/sorting/step/next")
    assert res.status_code == 200
    assert res.get_json()["playback"]["step_index"] == 0

    res = client.post("/api/sorting/step/goto", json={"index": total - 1})
    data = res.get_json()
    assert data["state"]["bars"] == sorted(data["state"]["bars"])
    assert client.post("/api/sorting/step/next").status_code == 400
    assert client.post("/api/sorting/step/goto", json={"index": total}).status_code == 400
    assert client.post("/api/sorting/step/goto", json={"index": "x"}).status_code == 400


def test_graph_select_and_prepare(client):
    client.post("/api/graph/generate", json={"num_nodes": 6})
    res = client.post("/api/graph/select", json={"start": 0, "target": 5})
    assert res.get_json()["state"]["selected_target_node"] == 5

    res = client.post("/api/graph/prepare", json={"algo": "dijkstra"})
    assert res.status_code == 200
    assert res.get_json()["prepared"] > 0

    res = client.post("/api/graph/prepare", json={"algo": "astar", "start": 0, "target": 99})
    assert res.get_json()["prepared"] == 0


def test_unknown_algorithm_is_404(client):
    assert client.post("/api/graph/init", json={"algo": "nope"}).status_code == 404
    assert client.post("/api/graph/prepare", json={"algo": "nope"}).status_code == 404


def test_init_seeds_domain_data(client):
    res = client.post("/api/search/init", json={"algo": "binary"})

    numbers = res.get_json()["state"]["numbers"]
    assert numbers == sorted(numbers)
    assert res.get_json()["state"]["algorithm"] == "binary"


def test_stack_push_timeline(client):
    client.post("/api/stack/generate")
    before = client.get("/api/stack/state").get_json()["state"]["stack"]

    res = client.post("/api/stack/prepare", json={"algo": "push", "value": 77})
    assert res.get_json()["prepared"] == 3
    client.post("/api/stack/step/goto", json={"index": 2})

    after = client.get("/api/stack/state").get_json()["state"]["stack"]
    assert after == before + [77]


def test_speed(client):
    assert client.post("/api/graph/speed", json={"speed": "turbo"}).get_json()["speed"] == 100
    assert client.post("/api/graph/speed", json={"speed": 20}).get_json()["speed"] == 20
    assert client.post("/api/graph/speed", json={"speed": "warp"}).status_code == 400


def test_reset(client):
    client.post("/api/sorting/prepare", json={"algo": "merge"})
    client.post("/api/sorting/step/next")

    res = client.post("/api/sorting/reset")

    assert res.get_json()["playback"]["total_steps"] == 0
    assert res.get_json()["state"]["sorted"] == []


def test_select_rejects_non_integer_ids(client):
    assert client.post("/api/graph/select", json={"start": "a"}).status_code == 400
    assert client.post("/api/sorting/select", json={}).status_code == 400


def test_graph_load_replaces_graph(client):
    payload = {
        "graph_type": "directed",
        "nodes": [{"id": 0, "x": 80, "y": 300}, {"id": 1, "x": 180, "y": 300}],
        "edges": [{"from": 0, "to": 1, "weight": 4}],
    }

    res = client.post("/api/graph/load", json=payload)

    graph = res.get_json()["state"]["graph"]
    assert res.status_code == 200
    assert len(graph["nodes"]) == 2
    assert res.get_json()["state"]["selected_start_node"] is None

    res = client.post("/api/graph/prepare", json={"algo": "dijkstra", "start": 0, "target": 1})
    client.post("/api/graph/step/goto", json={"index": res.get_json()["prepared"] - 1})
    state = client.get("/api/graph/state").get_json()["state"]
    assert state["target_found"] is True


def test_graph_load_rejects_malformed_payload(client):
    assert client.post("/api/graph/load", json={"nodes": [{"x": 1}]}).status_code == 400


@pytest.mark.parametrize("edges", [
    [{"from": 0, "to": 1}, {"from": 1, "to": 7}],
    [{"from": 0, "to": 1, "weight": "3"}],
])
def test_graph_load_rejects_bad_edges(client, edges):
    before = client.get("/api/graph/state").get_json()["state"]["graph"]
    payload = {"nodes": [{"id": 0}, {"id": 1}], "edges": edges}

    res = client.post("/api/graph/load", json=payload)

    assert res.status_code == 400
    assert "Invalid graph" in res.get_json()["error"]
    assert client.get("/api/graph/state").get_json()["state"]["graph"] == before


def test_generate_coerces_and_checks_options(client):
    res = client.post("/api/sorting/generate", json={"count": "5"})
    assert res.status_code == 200
    assert len(res.get_json()["state"]["bars"]) == 5

    assert client.post("/api/sorting/generate", json={"count": "five"}).status_code == 400
    assert client.post("/api/sorting/generate", json={"count": 0}).status_code == 400
    assert client.post("/api/graph/generate", json={"num_nodes": [6]}).status_code == 400
    assert client.post("/api/graph/generate", json={"num_nodes": 500}).status_code == 400
    assert client.post("/api/graph/generate", json={"directed": "yes"}).status_code == 400
    assert client.post("/api/tree/generate", json={"values": [5, "x"]}).status_code == 400
    assert client.post("/api/tree/generate", json={"values": 5}).status_code == 400

    res = client.post("/api/graph/generate", json={"num_nodes": "7", "directed": True})
    assert res.status_code == 200
    assert len(res.get_json()["state"]["graph"]["nodes"]) == 7
    assert res.get_json()["state"]["graph"]["graph_type"] == "directed"


def test_workspaces_are_capped_least_recently_used_first(monkeypatch):
    monkeypatch.setattr(main, "settings", replace(main.settings, max_workspaces=2))
    monkeypatch.setattr(main, "_WORKSPACES", OrderedDict())
    app.config["TESTING"] = True

    def token(client):
        with client.session_transaction() as sess:
            return sess["workspace"]

    first, second, third = app.test_client(), app.test_client(), app.test_client()
    first.get("/api/sorting/state")
    second.get("/api/sorting/state")
    first.get("/api/sorting/state")
    third.get("/api/sorting/state")

    assert len(main._WORKSPACES) == 2
    assert token(second) not in main._WORKSPACES
    assert token(first) in main._WORKSPACES
    assert token(third) in main._WORKSPACES

    second.get("/api/sorting/state")
    assert len(main._WORKSPACES) == 2
    assert token(second) in main._WORKSPACES
    assert token(first) not in main._WORKSPACES
