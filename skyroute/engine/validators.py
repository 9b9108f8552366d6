"""Move validators and route analysis for region graphs."""
from __future__ import annotations

from collections import deque
import heapq
from typing import Dict, List, Optional, Set, Tuple

from skyroute.models.graph import GameState, GraphConfig


def build_graph(config: GraphConfig) -> Dict[str, Set[str]]:
    """Unweighted adjacency sets keyed by airport code."""
    return {code: set(config.neighbors(code)) for code in config.airport_codes()}


def reachable_from(graph: Dict[str, Set[str]], start: str) -> Set[str]:
    """Every airport connected to `start` by some route, `start` included."""
    if start not in graph:
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        for neighbor in graph[queue.popleft()] - seen:
            seen.add(neighbor)
            queue.append(neighbor)
    return seen


def is_reachable(graph: Dict[str, Set[str]], start: str, goal: str) -> bool:
    return goal in reachable_from(graph, start)


def validate_move(state: GameState, config: GraphConfig, clicked: str) -> Tuple[bool, str]:
    if state.completed:
        return False, "game already completed"
    if clicked not in config.airport_codes():
        return False, "unknown airport"
    if clicked in state.visited:
        return False, "already visited"
    if clicked not in state.frontier:
        return False, "not in frontier"
    if config.edge_weight(state.last_visited, clicked) is None:
        return False, f"no connection from {state.last_visited}"
    return True, "ok"


def shortest_path(
    config: GraphConfig,
    start: Optional[str] = None,
    goal: Optional[str] = None,
) -> Optional[Tuple[int, List[str]]]:
    """Dijkstra over connection weights. Returns (total, path) or None if unreachable."""
    start = config.origin if start is None else start
    goal = config.goal if goal is None else goal
    codes = config.airport_codes()
    if start not in codes or goal not in codes:
        return None

    best: Dict[str, int] = {start: 0}
    previous: Dict[str, str] = {}
    queue: List[Tuple[int, str]] = [(0, start)]
    done: Set[str] = set()
    while queue:
        dist, node = heapq.heappop(queue)
        if node in done:
            continue
        done.add(node)
        if node == goal:
            break
        for neighbor in config.neighbors(node):
            weight = config.edge_weight(node, neighbor)
            if weight is None or neighbor in done:
                continue
            candidate = dist + weight
            if candidate < best.get(neighbor, candidate + 1):
                best[neighbor] = candidate
                previous[neighbor] = node
                heapq.heappush(queue, (candidate, neighbor))

    if goal not in best:
        return None
    path = [goal]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return best[goal], path


def audit_winning_total(config: GraphConfig) -> List[str]:
    """Warnings for a region whose winning total is not the shortest route total.

    The win rule only compares sums, so any completed route that happens to
    add up to ``winning_total`` wins.
    """
    warnings: List[str] = []
    if not is_reachable(build_graph(config), config.origin, config.goal):
        warnings.append(f"{config.region_id}: goal {config.goal} unreachable from {config.origin}")
        return warnings
    total, path = shortest_path(config)  # type: ignore[misc]
    if total != config.winning_total:
        warnings.append(
            f"{config.region_id}: winning_total={config.winning_total} "
            f"but shortest route {'->'.join(path)} totals {total}"
        )
    return warnings
