from __future__ import annotations

from typing import Sequence

import streamlit as st

from quote_desk.presentation import DisplayRow


# Markdown colors for the status badge
BADGE_COLORS = {
    "neutral": "gray",
    "accent": "blue",
    "positive": "green",
    "negative": "red",
}


def render_quotation_card(row: DisplayRow):
    with st.container(border=True):
        head, badge = st.columns([3, 1])
        head.markdown(f"#### 📍 {row.destination}")
        head.caption(row.customer_name)
        color = BADGE_COLORS.get(row.status_class, "gray")
        badge.markdown(f":{color}[**{row.status_label}**]")

        c1, c2 = st.columns(2)
        c1.write(f"📅 {row.start_date_label}")
        c2.write(f"👥 {row.party_size}")

        st.markdown(f"**{row.amount_label}**")

        if st.button("View Details", key=f"view-{row.id}", use_container_width=True):
            st.session_state.selected_quotation_id = row.id
            st.rerun()


def render_quotation_grid(rows: Sequence[DisplayRow], columns: int = 3):
    if not rows:
        st.markdown("### No quotations yet")
        st.caption("Create your first quotation to get started")
        return

    for start in range(0, len(rows), columns):
        cols = st.columns(columns)
        for col, row in zip(cols, rows[start:start + columns]):
            with col:
                render_quotation_card(row)
