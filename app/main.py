import logging

import streamlit as st

from ingress_inventory.loader import InventoryFormatError, parse_document
from ingress_inventory.session import (
    Session,
    clear_session,
    load_session,
    session_filter_options,
    with_filters,
    with_key_search,
    with_key_sort,
    with_location,
)
from ingress_inventory.view import build_sections
from widgets import (
    display_section,
    filter_section,
    key_search_section,
    key_sort_section,
    location_section,
)

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="wide", page_title="Ingress Inventory Viewer")

if "session" not in st.session_state:
    st.session_state["session"] = Session()
    st.session_state["upload_counter"] = 0


# --------- Main App ---------

session: Session = st.session_state["session"]

with st.sidebar:
    uploaded = st.file_uploader(
        "Inventory export",
        type=["json"],
        key=f"upload_{st.session_state['upload_counter']}",
    )
    if uploaded is not None and uploaded.name != session.source_name:
        try:
            data = parse_document(uploaded.getvalue().decode("utf-8", errors="replace"))
            session = load_session(data, source_name=uploaded.name)
            session = with_location(session, st.session_state["session"].location)
        except InventoryFormatError as exc:
            st.error(str(exc))

    if session.loaded:
        options = session_filter_options(session)
        session = with_filters(session, filter_section(options.rarities, session.filters))
    session = with_location(session, location_section(session.location))

    if session.loaded and st.button("Clear", key="clear_btn", use_container_width=True):
        session = clear_session(session)
        st.session_state["upload_counter"] += 1

if not session.loaded:
    st.info("Upload an inventory export (.json) to get started.", icon="📂")
else:
    st.info(f"Loaded: {session.source_name} · {session.total_count} items", icon="🎒")
    mode, direction = key_sort_section(session.key_sort)
    session = with_key_sort(session, mode, direction)
    session = with_key_search(session, key_search_section(session.key_search))

    for section in build_sections(session):
        display_section(section)

st.session_state["session"] = session
