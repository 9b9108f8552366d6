"""Path-accumulation walk over a region graph.

Every function here is pure: states go in, new states come out, and an
illegal click hands back the very same state object.
"""
from __future__ import annotations

from typing import List, Tuple

from skyroute.models.graph import GameState, GraphConfig, TracedLeg


def _frontier(config: GraphConfig, code: str, visited: Tuple[str, ...]) -> Tuple[str, ...]:
    seen = set(visited)
    return tuple(neighbor for neighbor in config.neighbors(code) if neighbor not in seen)


def initialize(config: GraphConfig) -> GameState:
    """Return the origin-only state for `config`."""
    visited = (config.origin,)
    return GameState(
        visited=visited,
        frontier=_frontier(config, config.origin, visited),
        total=0,
        completed=False,
    )


def reset(config: GraphConfig) -> GameState:
    return initialize(config)


def advance(state: GameState, config: GraphConfig, clicked: str) -> GameState:
    """Move to `clicked` if it is on the frontier; otherwise return `state` unchanged."""
    if state.completed or clicked not in state.frontier:
        return state
    weight = config.edge_weight(state.last_visited, clicked)
    if weight is None:
        return state
    visited = state.visited + (clicked,)
    return GameState(
        visited=visited,
        frontier=_frontier(config, clicked, visited),
        total=state.total + weight,
        completed=clicked == config.goal,
    )


def is_winning(state: GameState, config: GraphConfig) -> bool:
    return state.completed and state.total == config.winning_total


def is_clickable(state: GameState, code: str) -> bool:
    return not state.completed and code in state.frontier


def traced_connections(state: GameState, config: GraphConfig) -> List[TracedLeg]:
    """Connections walked so far, in order."""
    legs: List[TracedLeg] = []
    for from_code, to_code in zip(state.visited, state.visited[1:]):
        weight = config.edge_weight(from_code, to_code)
        if weight is None:
            continue
        legs.append(TracedLeg(from_code=from_code, to_code=to_code, weight=weight))
    return legs


def is_traced(state: GameState, a: str, b: str) -> bool:
    """True when a and b were visited back to back, in either order."""
    for from_code, to_code in zip(state.visited, state.visited[1:]):
        if {from_code, to_code} == {a, b}:
            return True
    return False
