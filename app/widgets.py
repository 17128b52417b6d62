from __future__ import annotations

from typing import Iterable, Optional

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from ingress_inventory.config import FilterConfig, KeySortConfig, Location
from ingress_inventory.constants import SEARCH_DEBOUNCE_MS
from ingress_inventory.types import KeySortMode, SortDirection
from ingress_inventory.utils.rarity import rarity_label
from ingress_inventory.view import Card, Section, rarity_choices

SORT_LABELS = {
    KeySortMode.ALPHA: ("A→Z", "Z→A"),
    KeySortMode.COUNT: ("Least→Most", "Most→Least"),
    KeySortMode.TIME: ("Oldest→Youngest", "Youngest→Oldest"),
    KeySortMode.DISTANCE: ("Closest→Farthest", "Farthest→Closest"),
}


def filter_section(rarities: Iterable[str], current: FilterConfig) -> FilterConfig:
    choices = [""] + rarity_choices(rarities)
    index = choices.index(current.rarity) if current.rarity in choices else 0
    rarity = st.selectbox(
        "Rarity",
        choices,
        index=index,
        format_func=lambda r: rarity_label(r) if r else "All rarities",
        key="filter_rarity",
    )
    hide_capsuled = st.checkbox(
        "Hide capsuled items", value=current.hide_capsuled, key="hide_capsuled"
    )
    return FilterConfig(rarity=rarity or None, hide_capsuled=hide_capsuled)


def location_section(current: Optional[Location]) -> Optional[Location]:
    st.subheader("Your location")
    enabled = st.checkbox(
        "Use location for key distances", value=current is not None, key="use_location"
    )
    if not enabled:
        return None
    lat = st.number_input(
        "Latitude", -90.0, 90.0, current.lat if current else 0.0, format="%.6f"
    )
    lon = st.number_input(
        "Longitude", -180.0, 180.0, current.lon if current else 0.0, format="%.6f"
    )
    return Location(lat=float(lat), lon=float(lon))


def key_sort_section(current: KeySortConfig) -> tuple[KeySortMode, SortDirection]:
    modes = list(KeySortMode)
    cols = st.columns(2)
    with cols[0]:
        mode = st.radio(
            "Sort keys",
            modes,
            index=modes.index(current.mode),
            format_func=lambda m: m.value.capitalize(),
            horizontal=True,
            key="key_sort_mode",
        )
    with cols[1]:
        labels = SORT_LABELS[mode]
        descending = st.radio(
            "Direction",
            [False, True],
            index=int(current.direction(mode) == SortDirection.DESC),
            format_func=lambda d: labels[int(d)],
            horizontal=True,
            key=f"key_sort_direction_{mode}",
        )
    return mode, SortDirection.DESC if descending else SortDirection.ASC


def key_search_section(current: str) -> str:
    value: str = (
        st_keyup(
            "Search keys",
            value=current,
            debounce=SEARCH_DEBOUNCE_MS,
            key="key_search",
            placeholder="Portal name or address",
        )
        or ""
    )
    return value


def display_card(card: Card) -> None:
    badges = []
    if card.count > 1:
        badges.append(f"×{card.count}")
    if card.capsuled:
        badges.append("📦")
    if card.diamonds is not None:
        badges.append("◆" * card.diamonds.count)
    heading = card.label if card.compact and card.label else card.title
    st.markdown(f"**{heading}** {' '.join(badges)}")
    for line in card.info:
        st.caption(line)


def display_section(section: Section) -> None:
    with st.expander(f"{section.category} ({section.total})", expanded=True):
        columns = st.columns(4)
        for i, card in enumerate(section.cards):
            with columns[i % len(columns)]:
                display_card(card)


__all__ = [
    "display_section",
    "filter_section",
    "key_search_section",
    "key_sort_section",
    "location_section",
]
