from skyroute.engine.walk import (
    advance,
    initialize,
    is_clickable,
    is_traced,
    is_winning,
    reset,
    traced_connections,
)
from skyroute.models.graph import GameState, GraphConfig
from skyroute.regions.africa import AFRICA
from skyroute.regions.australia import AUSTRALIA
from skyroute.regions.catalog import REGIONS


def make_config() -> GraphConfig:
    airports = [
        {"code": "S", "name": "Start", "latitude": 0.0, "longitude": 0.0},
        {"code": "A", "name": "A", "latitude": 1.0, "longitude": 1.0},
        {"code": "B", "name": "B", "latitude": 2.0, "longitude": 2.0},
        {"code": "D", "name": "Dead end", "latitude": 3.0, "longitude": 3.0},
        {"code": "G", "name": "Goal", "latitude": 4.0, "longitude": 4.0},
    ]
    connections = [
        {"a": "S", "b": "A", "weight": 1},
        {"a": "S", "b": "B", "weight": 4},
        {"a": "A", "b": "D", "weight": 2},
        {"a": "B", "b": "G", "weight": 3},
        {"a": "A", "b": "B", "weight": 2},
    ]
    return GraphConfig(
        region_id="demo",
        title="Demo",
        airports=airports,
        connections=connections,
        origin="S",
        goal="G",
        winning_total=6,
    )


def walk(config: GraphConfig, codes: list[str]) -> GameState:
    state = initialize(config)
    for code in codes:
        state = advance(state, config, code)
    return state


def test_initialize_every_region():
    for config in list(REGIONS.values()) + [make_config()]:
        state = initialize(config)
        assert state.visited == (config.origin,)
        assert state.total == 0
        assert state.completed is False
        assert set(state.frontier) == set(config.neighbors(config.origin))


def test_initial_frontier_keeps_declaration_order():
    assert initialize(AFRICA).frontier == ("ABM", "ABU", "AEG", "ACJ", "ACZ")
    assert initialize(AUSTRALIA).frontier == ("ACZ", "ABU", "AEA")


def test_illegal_click_returns_unchanged_state():
    config = make_config()
    state = initialize(config)
    for code in ["G", "D", "S", "nope", ""]:
        after = advance(state, config, code)
        assert after is state
        assert after == state
        # Repeating the same illegal click changes nothing either.
        assert advance(after, config, code) == state


def test_legal_click_grows_path_by_one_and_adds_weight():
    config = make_config()
    state = initialize(config)
    for code in ["A", "B", "G"]:
        before = state
        state = advance(state, config, code)
        assert state.visited == before.visited + (code,)
        assert state.total == before.total + config.edge_weight(before.last_visited, code)
    assert state.completed is True


def test_advance_does_not_mutate_input():
    config = make_config()
    state = initialize(config)
    snapshot = state.model_dump()
    advance(state, config, "A")
    assert state.model_dump() == snapshot


def test_frontier_excludes_visited():
    config = make_config()
    state = walk(config, ["A"])
    assert state.frontier == ("D", "B")
    state = advance(state, config, "B")
    assert "S" not in state.frontier
    assert "A" not in state.frontier
    assert state.frontier == ("G",)


def test_dead_end_leaves_empty_frontier():
    config = make_config()
    state = walk(config, ["A", "D"])
    assert state.frontier == ()
    assert state.completed is False
    assert advance(state, config, "G") is state


def test_goal_is_terminal():
    config = make_config()
    state = walk(config, ["B", "G"])
    assert state.completed is True
    assert state.total == 7
    for code in ["A", "S", "B", "G", "D"]:
        assert advance(state, config, code) is state


def test_winning_requires_completion_and_exact_total():
    config = make_config()
    assert is_winning(walk(config, ["A", "B", "G"]), config) is True
    assert is_winning(walk(config, ["B", "G"]), config) is False
    unfinished = GameState(visited=("S", "A", "B"), frontier=("G",), total=6)
    assert is_winning(unfinished, config) is False


def test_africa_long_route_loses():
    state = walk(AFRICA, ["ACZ", "AAE", "AFD"])
    assert state.visited == ("HND", "ACZ", "AAE", "AFD")
    assert state.total == 54
    assert state.completed is True
    assert is_winning(state, AFRICA) is False


def test_africa_shortest_route_wins():
    state = walk(AFRICA, ["AEG", "AFD"])
    assert state.total == 36
    assert is_winning(state, AFRICA) is True


def test_africa_route_via_kabri_dar_loses():
    state = walk(AFRICA, ["ACZ", "ABK", "AFD"])
    assert state.total == 42
    assert state.completed is True
    assert is_winning(state, AFRICA) is False


def test_australia_no_direct_edge_to_goal():
    state = initialize(AUSTRALIA)
    assert advance(state, AUSTRALIA, "ADO") is state


def test_australia_both_shortest_routes_win():
    for route in (["AEA", "ABU", "ADO"], ["ABU", "ADO"]):
        state = walk(AUSTRALIA, route)
        assert state.total == 11
        assert is_winning(state, AUSTRALIA) is True


def test_reset_after_goal():
    for config, route in ((AFRICA, ["ACZ", "AAE", "AFD"]), (AUSTRALIA, ["ACZ", "ACJ", "ADO"])):
        finished = walk(config, route)
        assert finished.completed is True
        fresh = reset(config)
        assert fresh.visited == (config.origin,)
        assert fresh.total == 0
        assert fresh.completed is False
        assert fresh == initialize(config)


def test_traced_connections_and_styling_helpers():
    state = walk(AFRICA, ["ACZ", "ABK"])
    legs = traced_connections(state, AFRICA)
    assert [(leg.from_code, leg.to_code, leg.weight) for leg in legs] == [
        ("HND", "ACZ", 12),
        ("ACZ", "ABK", 5),
    ]
    assert is_traced(state, "ABK", "ACZ") is True
    assert is_traced(state, "HND", "ABK") is False
    assert is_clickable(state, "AFD") is True
    assert is_clickable(state, "HND") is False
