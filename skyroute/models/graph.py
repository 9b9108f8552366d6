"""Canonical data contracts for region graphs and game state."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Set, Tuple
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class Airport(BaseModel):
    """Airport node placed on the map by its coordinates."""

    model_config = ConfigDict(extra="forbid")

    code: str = Field(..., min_length=1, description="IATA-style code like HND")
    name: str
    country: str = ""
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Connection(BaseModel):
    """Undirected weighted route between two airports."""

    model_config = ConfigDict(extra="forbid")

    a: str
    b: str
    weight: int = Field(..., ge=0)

    def key(self) -> Tuple[str, str]:
        return tuple(sorted((self.a, self.b)))  # type: ignore[return-value]

    def other(self, code: str) -> Optional[str]:
        if code == self.a:
            return self.b
        if code == self.b:
            return self.a
        return None

    @model_validator(mode="after")
    def _validate_endpoints(self) -> "Connection":
        if self.a == self.b:
            raise ValueError(f"connection must join two different airports: {self.a}")
        return self


class GraphConfig(BaseModel):
    """Static graph for one region: airports, routes, origin, goal."""

    model_config = ConfigDict(extra="forbid")

    region_id: str
    title: str
    airports: List[Airport]
    connections: List[Connection]
    origin: str
    goal: str
    winning_total: int = Field(..., ge=0)

    _adjacency: Dict[str, List[Tuple[str, int]]] = PrivateAttr(default_factory=dict)

    def airport_codes(self) -> Set[str]:
        return {airport.code for airport in self.airports}

    def get_airport(self, code: str) -> Optional[Airport]:
        for airport in self.airports:
            if airport.code == code:
                return airport
        return None

    def role_of(self, code: str) -> Literal["origin", "goal", "stop"]:
        if code == self.origin:
            return "origin"
        if code == self.goal:
            return "goal"
        return "stop"

    def neighbors(self, code: str) -> List[str]:
        """Codes joined to `code` by any connection, in declaration order."""
        return [neighbor for neighbor, _weight in self._adjacency.get(code, [])]

    def edge_weight(self, a: str, b: str) -> Optional[int]:
        for neighbor, weight in self._adjacency.get(a, []):
            if neighbor == b:
                return weight
        return None

    @model_validator(mode="after")
    def _validate_graph(self) -> "GraphConfig":
        codes = self.airport_codes()
        if len(codes) != len(self.airports):
            raise ValueError("airport code must be unique")
        if self.origin not in codes:
            raise ValueError("origin must exist in airports")
        if self.goal not in codes:
            raise ValueError("goal must exist in airports")
        if self.origin == self.goal:
            raise ValueError("origin and goal must differ")
        seen: Set[Tuple[str, str]] = set()
        adjacency: Dict[str, List[Tuple[str, int]]] = {code: [] for code in codes}
        for conn in self.connections:
            bad = [code for code in (conn.a, conn.b) if code not in codes]
            if bad:
                raise ValueError(f"connection references unknown airport: {bad}")
            key = conn.key()
            if key in seen:
                raise ValueError(f"duplicate connection: {key[0]}-{key[1]}")
            seen.add(key)
            adjacency[conn.a].append((conn.b, conn.weight))
            adjacency[conn.b].append((conn.a, conn.weight))
        self._adjacency = adjacency
        return self


class GameState(BaseModel):
    """Immutable snapshot of one walk through a region graph."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    visited: Tuple[str, ...]
    frontier: Tuple[str, ...] = ()
    total: int = Field(0, ge=0)
    completed: bool = False

    @property
    def last_visited(self) -> str:
        return self.visited[-1]

    @model_validator(mode="after")
    def _validate_state(self) -> "GameState":
        if not self.visited:
            raise ValueError("visited must start with the origin")
        if len(set(self.visited)) != len(self.visited):
            raise ValueError("visited must not contain duplicates")
        overlap = set(self.frontier) & set(self.visited)
        if overlap:
            raise ValueError(f"frontier contains visited airports: {sorted(overlap)}")
        return self


class TracedLeg(BaseModel):
    """One connection walked between two consecutively visited airports."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    from_code: str
    to_code: str
    weight: int


class GameOutcome(BaseModel):
    """Result shown once the goal is reached."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    region_id: str
    path: List[str]
    total: int
    winning_total: int
    is_winner: bool
