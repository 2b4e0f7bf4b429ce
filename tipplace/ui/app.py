"""
Streamlit playground: sidebar (viewport, trigger, content, margin, hover rules),
main area with the placement image and a live TooltipCoordinator driven by a hover toggle.
Run from repo root: streamlit run tipplace/ui/app.py
"""

from __future__ import annotations

import io
import logging
import os

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

import streamlit as st

from tipplace.core.config import DEFAULT_MARGIN, HIDE_ON_NO_HOVER, SHOW_ON_HOVER
from tipplace.core.coordinator import TooltipCoordinator
from tipplace.core.error_codes import ViewportTooSmall, user_message
from tipplace.core.observers import BoxObserver, HoverObserver, ViewportObserver
from tipplace.core.placement import run_placement
from tipplace.core.portal import OverlayLayer
from tipplace.core.render import render_debug, render_placement
from tipplace.core.reporting import placement_to_dict
from tipplace.core.text_metrics import measure_content_size
from tipplace.core.types import BoundingBox, Size, TooltipConfig

TRIGGER_ID = "playground-trigger"


def _sidebar() -> dict:
    st.sidebar.header("Viewport")
    vw = st.sidebar.number_input("Width", min_value=1.0, value=800.0, step=10.0)
    vh = st.sidebar.number_input("Height", min_value=1.0, value=600.0, step=10.0)
    st.sidebar.header("Trigger")
    tx = st.sidebar.slider("x", 0.0, float(vw), min(100.0, float(vw)))
    ty = st.sidebar.slider("y", 0.0, float(vh), min(100.0, float(vh)))
    tw = st.sidebar.number_input("Trigger width", min_value=0.0, value=50.0)
    th = st.sidebar.number_input("Trigger height", min_value=0.0, value=20.0)
    st.sidebar.header("Content")
    text = st.sidebar.text_area("Tooltip text", value="Hello from the tooltip")
    st.sidebar.header("Behaviour")
    margin = st.sidebar.number_input("Margin", min_value=0.0, value=DEFAULT_MARGIN)
    show_on_hover = st.sidebar.checkbox("Show on hover", value=SHOW_ON_HOVER)
    hide_on_no_hover = st.sidebar.checkbox("Hide on no hover", value=HIDE_ON_NO_HOVER)
    return {
        "viewport": Size(vw, vh),
        "trigger": BoundingBox.of(tx, ty, tw, th),
        "text": text,
        "config": TooltipConfig(margin=margin, show_on_hover=show_on_hover, hide_on_no_hover=hide_on_no_hover),
    }


def _content_provider(text: str):
    def provide() -> str:
        return text
    return provide


def _coordinator() -> TooltipCoordinator:
    """One coordinator per session, fed by observers kept in session state."""
    if "coordinator" not in st.session_state:
        hover, box, viewport = HoverObserver(), BoxObserver(), ViewportObserver()
        coord = TooltipCoordinator(
            _content_provider(""),
            hover=hover,
            trigger_box=box,
            viewport=viewport,
            layer=OverlayLayer(measure=measure_content_size),
        )
        coord.ref(TRIGGER_ID)
        st.session_state.update(coordinator=coord, hover=hover, box=box, viewport=viewport, text=None)
    return st.session_state["coordinator"]


def main() -> None:
    st.set_page_config(page_title="Tooltip placement", layout="wide")
    st.title("Tooltip placement playground")
    inputs = _sidebar()

    coord = _coordinator()
    if st.session_state["text"] != inputs["text"]:
        st.session_state["text"] = inputs["text"]
        coord.set_content_provider(_content_provider(inputs["text"]))
    if coord.config != inputs["config"]:
        coord.set_config(inputs["config"])

    try:
        st.session_state["viewport"].set(inputs["viewport"])
        st.session_state["box"].set(inputs["trigger"])
        hovered = st.checkbox("Pointer over trigger", value=st.session_state["hover"].value)
        st.session_state["hover"].set(hovered)
        c1, c2 = st.columns(2)
        if c1.button("Open"):
            coord.set_visible(True)
        if c2.button("Close"):
            coord.set_visible(False)
    except ViewportTooSmall as e:
        st.error(f"{user_message(e.error_key)} ({e})")
        return

    st.write(f"Phase: **{coord.phase}**, visible: **{coord.is_visible}**, origin: {coord.origin}")

    content_size = measure_content_size(inputs["text"])
    if content_size.is_zero:
        st.info("Enter some tooltip text to see a placement.")
        return
    try:
        result = run_placement(inputs["trigger"], content_size, inputs["viewport"], inputs["config"].margin)
    except ViewportTooSmall as e:
        st.error(f"{user_message(e.error_key)} ({e})")
        return

    left, right = st.columns(2)
    with left:
        buf = io.BytesIO()
        render_placement(result, buf, label=inputs["text"])
        st.image(buf.getvalue(), caption=f"Placement: {result.side}")
    with right:
        buf = io.BytesIO()
        render_debug(result, buf)
        st.image(buf.getvalue(), caption="Candidates")
    with st.expander("placement.json"):
        st.json(placement_to_dict(result))


main()
