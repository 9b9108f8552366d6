"""Registry of playable regions."""
from __future__ import annotations

from typing import Dict, List

from skyroute.models.graph import GraphConfig
from skyroute.regions.africa import AFRICA
from skyroute.regions.australia import AUSTRALIA

REGIONS: Dict[str, GraphConfig] = {
    AFRICA.region_id: AFRICA,
    AUSTRALIA.region_id: AUSTRALIA,
}


def list_regions() -> List[str]:
    return list(REGIONS.keys())


def get_region(region_id: str) -> GraphConfig:
    """Return the region graph for `region_id` (case-insensitive)."""
    key = (region_id or "").strip().lower()
    if key not in REGIONS:
        known = ", ".join(list_regions())
        raise KeyError(f"unknown region: {region_id!r} (known: {known})")
    return REGIONS[key]
