"""SVG drawing of a region graph and the current walk."""
from __future__ import annotations

import html
from typing import Dict, Tuple

from skyroute.engine.walk import is_clickable, is_traced
from skyroute.models.graph import GameState, GraphConfig

TRACED_COLOR = "#0000FF"
UNTRACED_COLOR = "#FF0000"
VISITED_FILL = "#0000FF"
GOAL_FILL = "#FFA500"
STOP_FILL = "#FF0000"


def project_airports(
    config: GraphConfig,
    width: int,
    height: int,
    margin: int = 64,
) -> Dict[str, Tuple[float, float]]:
    """Equirectangular projection of airport coordinates fitted into the canvas."""
    if not config.airports:
        return {}
    lons = [airport.longitude for airport in config.airports]
    lats = [airport.latitude for airport in config.airports]
    min_lon, max_lon = min(lons), max(lons)
    min_lat, max_lat = min(lats), max(lats)
    span_lon = max(max_lon - min_lon, 1e-6)
    span_lat = max(max_lat - min_lat, 1e-6)
    # Same scale on both axes keeps shapes undistorted.
    scale = min((width - 2 * margin) / span_lon, (height - 2 * margin) / span_lat)
    x_pad = (width - 2 * margin - span_lon * scale) / 2
    y_pad = (height - 2 * margin - span_lat * scale) / 2

    positions: Dict[str, Tuple[float, float]] = {}
    for airport in config.airports:
        x = margin + x_pad + (airport.longitude - min_lon) * scale
        y = margin + y_pad + (max_lat - airport.latitude) * scale
        positions[airport.code] = (round(x, 2), round(y, 2))
    return positions


def node_fill(state: GameState, config: GraphConfig, code: str) -> str:
    if code in state.visited:
        return VISITED_FILL
    if config.role_of(code) == "goal":
        return GOAL_FILL
    return STOP_FILL


def svg_map(config: GraphConfig, state: GameState, width: int = 1200, height: int = 760) -> str:
    positions = project_airports(config, width, height)

    edge_lines: list[str] = []
    edge_labels: list[str] = []
    for conn in config.connections:
        x1, y1 = positions[conn.a]
        x2, y2 = positions[conn.b]
        traced = is_traced(state, conn.a, conn.b)
        color = TRACED_COLOR if traced else UNTRACED_COLOR
        dash = "0" if traced else "4 2"
        edge_lines.append(
            f"<line x1='{x1:.1f}' y1='{y1:.1f}' x2='{x2:.1f}' y2='{y2:.1f}' "
            f"stroke='{color}' stroke-width='3' stroke-dasharray='{dash}' />"
        )
        mx, my = (x1 + x2) / 2, (y1 + y2) / 2
        edge_labels.append(
            f"<text x='{mx:.1f}' y='{my:.1f}' text-anchor='middle' font-size='22' "
            f"fill='{TRACED_COLOR}' font-weight='700'>{conn.weight}</text>"
        )

    node_shapes: list[str] = []
    for airport in config.airports:
        x, y = positions[airport.code]
        fill = node_fill(state, config, airport.code)
        cursor = "pointer" if is_clickable(state, airport.code) else "not-allowed"
        radius = 12 if airport.code == state.last_visited else 8
        node_shapes.append(
            f"<circle cx='{x:.1f}' cy='{y:.1f}' r='{radius}' fill='{fill}' stroke='#102a43' "
            f"stroke-width='2' style='cursor:{cursor}' />"
        )
        node_shapes.append(
            f"<text x='{x:.1f}' y='{y - 14:.1f}' text-anchor='middle' font-size='16' "
            "fill='#000000' font-weight='700'>"
            f"{html.escape(airport.name)}</text>"
        )

    return "".join(
        [
            f"<svg id='route-map' width='{width}' height='{height}' viewBox='0 0 {width} {height}' "
            "xmlns='http://www.w3.org/2000/svg'>",
            f"<rect x='0' y='0' width='{width}' height='{height}' fill='#e8f4ea' rx='24' />",
            "<g id='viewport'>",
            "".join(edge_lines),
            "".join(node_shapes),
            "".join(edge_labels),
            "</g>",
            "</svg>",
        ]
    )
