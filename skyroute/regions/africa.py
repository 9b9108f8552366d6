"""Africa region: Haneda to Port Alfred."""
from __future__ import annotations

from skyroute.models.graph import Airport, GraphConfig
from skyroute.regions.common import HANEDA, connections_from_rows

AIRPORTS = [
    HANEDA,
    Airport(code="ACZ", name="Zabol Airport", country="Iran", latitude=31.0983, longitude=61.5438),
    Airport(code="AAE", name="Rabah Bitat Airport", country="Algeria", latitude=36.8222, longitude=7.8092),
    Airport(code="ABM", name="Northern Peninsula Airport", country="Australia", latitude=-10.9508, longitude=142.4590),
    Airport(code="ABU", name="Haliwen Airport", country="Indonesia", latitude=-9.3333, longitude=124.9000),
    Airport(code="AEG", name="Aek Godang Airport", country="Indonesia", latitude=1.4001, longitude=99.4305),
    Airport(code="ACJ", name="Anuradhapura Air Force Base", country="Sri Lanka", latitude=8.3014, longitude=80.4279),
    Airport(code="ABK", name="Kabri Dar Airport", country="Ethiopia", latitude=6.7340, longitude=44.2530),
    Airport(code="AFD", name="Port Alfred Airport", country="South Africa", latitude=-33.5500, longitude=26.8833),
]

CONNECTIONS = [
    ("HND", "ABM", 6), ("HND", "ABU", 6), ("HND", "AEG", 6), ("HND", "ACJ", 7),
    ("HND", "ACZ", 12), ("ACZ", "AAE", 7), ("ACZ", "ABK", 5), ("ABM", "ABU", 12),
    ("ABU", "AEG", 6), ("AEG", "ACJ", 12), ("ACJ", "ABK", 8), ("ABK", "AAE", 25),
    ("ABM", "AFD", 40), ("ABU", "AFD", 35), ("AEG", "AFD", 30), ("ACJ", "AFD", 30),
    ("ABK", "AFD", 25), ("AAE", "AFD", 35),
]

# Shortest weighted route: HND -> AEG -> AFD (6 + 30).
WINNING_TOTAL = 36

AFRICA = GraphConfig(
    region_id="africa",
    title="Africa",
    airports=AIRPORTS,
    connections=connections_from_rows(CONNECTIONS),
    origin="HND",
    goal="AFD",
    winning_total=WINNING_TOTAL,
)
