"""Australia region: Haneda to Andamooka."""
from __future__ import annotations

from skyroute.models.graph import Airport, GraphConfig
from skyroute.regions.common import HANEDA, connections_from_rows

AIRPORTS = [
    HANEDA,
    Airport(code="AEA", name="Abemama Atoll Airport", country="Kiribati", latitude=0.4908, longitude=173.8289),
    Airport(code="ABU", name="Haliwen Airport", country="Indonesia", latitude=-9.3333, longitude=124.9000),
    Airport(code="ACZ", name="Zabol Airport", country="Iran", latitude=31.0983, longitude=61.5438),
    Airport(code="ACJ", name="Anuradhapura Air Force Base", country="Sri Lanka", latitude=8.3014, longitude=80.4279),
    Airport(code="ADO", name="Andamooka Airport", country="Australia", latitude=-30.4491, longitude=137.1637),
]

CONNECTIONS = [
    ("HND", "ACZ", 4), ("HND", "ABU", 8), ("HND", "AEA", 3), ("ACZ", "ACJ", 2),
    ("ACZ", "ABU", 9),
    ("ABU", "ADO", 3), ("ACJ", "ADO", 9),
    ("AEA", "ABU", 5), ("AEA", "ADO", 9),
]

# Two routes tie: HND -> ABU -> ADO and HND -> AEA -> ABU -> ADO.
WINNING_TOTAL = 11

AUSTRALIA = GraphConfig(
    region_id="australia",
    title="Australia",
    airports=AIRPORTS,
    connections=connections_from_rows(CONNECTIONS),
    origin="HND",
    goal="ADO",
    winning_total=WINNING_TOTAL,
)
