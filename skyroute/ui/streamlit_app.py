"""Streamlit UI for the route tracing game."""
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st
import streamlit.components.v1 as components

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skyroute.config import configure_logging, load_config
from skyroute.engine.session import GameSession
from skyroute.engine.walk import traced_connections
from skyroute.regions.catalog import get_region, list_regions
from skyroute.ui.map_svg import svg_map


st.set_page_config(page_title="SkyRoute", layout="wide")


def _render_interactive_map(svg_markup: str, height: int = 560) -> None:
    html_block = f"""
<style>
  .map-shell {{
    border: 1px solid #e6eef5;
    border-radius: 12px;
    overflow: hidden;
  }}
  .map-toolbar {{
    display: flex;
    gap: 8px;
    padding: 8px 10px;
    border-bottom: 1px solid #e6eef5;
    font-family: sans-serif;
    font-size: 12px;
  }}
  .map-toolbar button {{
    border: 1px solid #cbd7e2;
    background: #fff;
    border-radius: 6px;
    min-width: 28px;
    height: 28px;
    cursor: pointer;
  }}
  .map-stage {{
    width: 100%;
    height: {height - 44}px;
    overflow: hidden;
    cursor: grab;
  }}
  #route-map {{
    width: 100%;
    height: 100%;
    display: block;
  }}
</style>
<div class="map-shell">
  <div class="map-toolbar">
    <button id="zoom-in">+</button>
    <button id="zoom-out">-</button>
    <button id="zoom-reset">Fit</button>
    <span>Scroll to zoom, drag to pan</span>
  </div>
  <div class="map-stage" id="map-stage">
    {svg_markup}
  </div>
</div>
<script>
(() => {{
  const stage = document.getElementById("map-stage");
  const viewport = document.getElementById("viewport");
  if (!stage || !viewport) return;

  let scale = 1, tx = 0, ty = 0, dragging = false, lastX = 0, lastY = 0;
  const apply = () => viewport.setAttribute("transform", `translate(${{tx}} ${{ty}}) scale(${{scale}})`);
  const zoomBy = (factor) => {{ scale = Math.max(0.5, Math.min(4, scale * factor)); apply(); }};

  document.getElementById("zoom-in").addEventListener("click", () => zoomBy(1.15));
  document.getElementById("zoom-out").addEventListener("click", () => zoomBy(0.87));
  document.getElementById("zoom-reset").addEventListener("click", () => {{ scale = 1; tx = 0; ty = 0; apply(); }});
  stage.addEventListener("wheel", (event) => {{
    event.preventDefault();
    zoomBy(event.deltaY < 0 ? 1.08 : 0.92);
  }}, {{ passive: false }});
  stage.addEventListener("mousedown", (event) => {{ dragging = true; lastX = event.clientX; lastY = event.clientY; }});
  window.addEventListener("mousemove", (event) => {{
    if (!dragging) return;
    tx += event.clientX - lastX;
    ty += event.clientY - lastY;
    lastX = event.clientX;
    lastY = event.clientY;
    apply();
  }});
  window.addEventListener("mouseup", () => {{ dragging = false; }});
  apply();
}})();
</script>
"""
    components.html(html_block, height=height, scrolling=False)


def _render_route_panel(session: GameSession) -> None:
    state = session.state
    config = session.config
    legs = traced_connections(state, config)
    st.markdown(f"**Route so far**: {' → '.join(state.visited)}")
    if legs:
        st.caption(" + ".join(str(leg.weight) for leg in legs) + f" = {state.total}")
    st.metric("Total", state.total)

    if state.completed:
        return
    st.markdown("**Fly to**")
    if not state.frontier:
        st.write("No unvisited airport is connected here. Undo or reset to continue.")
        return
    cols = st.columns(max(1, min(3, len(state.frontier))))
    for idx, code in enumerate(state.frontier):
        airport = config.get_airport(code)
        label = f"{airport.name} ({code})" if airport else code
        weight = config.edge_weight(state.last_visited, code)
        with cols[idx % len(cols)]:
            if st.button(f"{label} +{weight}", key=f"fly_{session.session_id}_{len(state.visited)}_{code}"):
                session.click(code)
                st.rerun()


def _render_result(session: GameSession) -> None:
    outcome = session.outcome()
    if outcome is None:
        return
    st.markdown("---")
    st.header("Goal reached")
    st.write(f"Your total: **{outcome.total}**")
    if outcome.is_winner:
        st.success("You found the shortest route!")
    else:
        st.error(f"Not quite. The winning total is {outcome.winning_total}.")
    if st.button("Play again", key=f"again_{session.session_id}"):
        session.reset()
        st.rerun()


cfg = load_config(str(PROJECT_ROOT / "configs" / "config.yaml")).resolve_paths(PROJECT_ROOT)
if "logging_ready" not in st.session_state:
    configure_logging(cfg)
    st.session_state.logging_ready = True
if "game" not in st.session_state:
    st.session_state.game = GameSession.start(app_config=cfg)

game: GameSession = st.session_state.game

st.title("SkyRoute")

with st.sidebar:
    st.header("Region")
    region_ids = list_regions()
    selected = st.selectbox(
        "Choose a region",
        region_ids,
        index=region_ids.index(game.config.region_id) if game.config.region_id in region_ids else 0,
        format_func=lambda region_id: get_region(region_id).title,
    )
    if selected != game.config.region_id:
        game.switch_region(selected)
        st.rerun()
    col_undo, col_reset = st.columns([1, 1])
    with col_undo:
        if st.button("Undo", disabled=game.state.completed or not game.history):
            game.undo()
            st.rerun()
    with col_reset:
        if st.button("Reset"):
            game.reset()
            st.rerun()
    st.caption(f"Session: {game.session_id}")

origin = game.config.get_airport(game.config.origin)
goal = game.config.get_airport(game.config.goal)
st.write(
    f"Fly from **{origin.name if origin else game.config.origin}** to "
    f"**{goal.name if goal else game.config.goal}** with the smallest total."
)
_render_interactive_map(svg_map(game.config, game.state))
_render_route_panel(game)
_render_result(game)
