from __future__ import annotations

import sys
import os
import logging

# --- Add project root to sys.path ---
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

import streamlit as st

from db.database import get_supabase_client
from db.store import SupabaseStore
from quote_desk.config import load_config
from quote_desk.presentation import present
from quote_desk.quotation_cards import render_quotation_grid
from quote_desk.quotation_dialog import new_quotation_dialog
from quote_desk.quotation_table import render_quotation_table
from quote_desk.service import find_quotation, refresh_quotations


def _init_app_state():
    if "quotation_rows" not in st.session_state:
        st.session_state.quotation_rows = []
    if "listing_stale" not in st.session_state:
        st.session_state.listing_stale = True
    if "listing_owner" not in st.session_state:
        st.session_state.listing_owner = None
    if "selected_quotation_id" not in st.session_state:
        st.session_state.selected_quotation_id = None
    if "flash" not in st.session_state:
        st.session_state.flash = None


def bind_listing_owner(state, owner_id: str) -> bool:
    """Drop listing state loaded for another owner. Returns True if it was reset."""
    if state["listing_owner"] == owner_id:
        return False

    state["quotation_rows"] = []
    state["listing_stale"] = True
    state["selected_quotation_id"] = None
    state["listing_owner"] = owner_id
    return True


def main():
    st.set_page_config(
        page_title="Travel Quotations",
        page_icon="✈️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    cfg = load_config()
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    _init_app_state()

    store = SupabaseStore(get_supabase_client(cfg.supabase))

    with st.sidebar:
        st.title("Navigation")
        menu = st.radio("Go to", ["Quotations", "Table View"])
        st.divider()
        owner_id = cfg.owner_id or st.text_input("Owner ID")

    if not owner_id:
        st.info("Enter your owner ID in the sidebar to see your quotations.")
        return

    bind_listing_owner(st.session_state, owner_id)

    if menu == "Quotations":
        run_quotations_page(store, owner_id, cfg.display.currency_symbol)
    else:
        render_quotation_table(store, owner_id, cfg.display.currency_symbol)


def run_quotations_page(store, owner_id: str, currency_symbol: str):
    if st.session_state.flash:
        kind, text = st.session_state.flash
        st.toast(text, icon="✅" if kind == "success" else "⚠️")
        st.session_state.flash = None

    if st.session_state.selected_quotation_id:
        render_quotation_details(store, owner_id, st.session_state.selected_quotation_id, currency_symbol)
        return

    head, action = st.columns([4, 1])
    head.title("Quotations")
    head.caption("Manage your travel quotations")
    if action.button("➕ New Quotation", type="primary", use_container_width=True):
        new_quotation_dialog(store, owner_id)

    if st.session_state.listing_stale:
        with st.spinner("Loading quotations..."):
            st.session_state.quotation_rows = refresh_quotations(
                store,
                owner_id,
                previous=st.session_state.quotation_rows,
                currency_symbol=currency_symbol,
            )
        st.session_state.listing_stale = False

    render_quotation_grid(st.session_state.quotation_rows)

    if st.button("🔄 Refresh"):
        st.session_state.listing_stale = True
        st.rerun()


def render_quotation_details(store, owner_id: str, quotation_id: str, currency_symbol: str):
    if st.button("← Back to quotations"):
        st.session_state.selected_quotation_id = None
        st.rerun()

    item = find_quotation(store, owner_id, quotation_id)
    if item is None:
        st.warning("Quotation not found.")
        return

    row = present(item, currency_symbol)
    q = item.quotation

    st.title(f"📍 {row.destination}")
    st.caption(f"Status: **{row.status_label}** · Created {row.created_at_label}")

    c1, c2, c3 = st.columns(3)
    c1.metric("Travel", f"{row.start_date_label} – {row.end_date_label}")
    c2.metric("Party", row.party_size)
    c3.metric("Total", row.amount_label)

    st.subheader("Customer")
    st.write(f"**{item.customer_name}**")
    if item.customer_email:
        st.write(item.customer_email)

    if q.notes:
        st.subheader("Notes")
        st.write(q.notes)


if __name__ == "__main__":
    main()
