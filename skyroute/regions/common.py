"""Airports shared by every region."""
from __future__ import annotations

from skyroute.models.graph import Airport

HANEDA = Airport(
    code="HND",
    name="Tokyo Haneda Airport",
    country="Japan",
    latitude=35.6895,
    longitude=139.6917,
)


def connections_from_rows(rows: list[tuple[str, str, int]]) -> list[dict]:
    return [{"a": a, "b": b, "weight": weight} for a, b, weight in rows]
