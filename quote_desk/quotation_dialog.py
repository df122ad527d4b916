from __future__ import annotations

import streamlit as st

from quote_desk.service import ValidationFailed, submit_quotation


FORM_DEFAULTS = {
    "customer_name": "",
    "customer_email": "",
    "customer_phone": "",
    "destination": "",
    "start_date": None,
    "end_date": None,
    "adults": 2,
    "children": 0,
    "notes": "",
}


@st.dialog("Create New Quotation", width="large")
def new_quotation_dialog(store, owner_id: str):
    st.caption("Enter customer details and travel requirements")

    with st.form("new_quotation", clear_on_submit=False, border=False):
        c1, c2 = st.columns(2)
        with c1:
            customer_name = st.text_input("Customer Name *", value=FORM_DEFAULTS["customer_name"])
            customer_phone = st.text_input("Customer Phone", value=FORM_DEFAULTS["customer_phone"])
            start_date = st.date_input("Start Date *", value=FORM_DEFAULTS["start_date"])
            adults = st.number_input("Number of Adults *", min_value=1, step=1, value=FORM_DEFAULTS["adults"])
        with c2:
            customer_email = st.text_input("Customer Email", value=FORM_DEFAULTS["customer_email"])
            destination = st.text_input(
                "Destination *", value=FORM_DEFAULTS["destination"], placeholder="e.g., Dubai, UAE"
            )
            end_date = st.date_input("End Date *", value=FORM_DEFAULTS["end_date"])
            children = st.number_input("Number of Children", min_value=0, step=1, value=FORM_DEFAULTS["children"])

        notes = st.text_area(
            "Notes", value=FORM_DEFAULTS["notes"], placeholder="Any special requirements or notes...", height=90
        )

        submitted = st.form_submit_button("Create Quotation", type="primary")

    if not submitted:
        return

    raw = {
        "customer_name": customer_name,
        "customer_email": customer_email,
        "customer_phone": customer_phone,
        "destination": destination,
        "start_date": start_date or "",
        "end_date": end_date or "",
        "adults": int(adults),
        "children": int(children),
        "notes": notes,
    }

    with st.spinner("Creating..."):
        outcome = submit_quotation(store, raw, owner_id)

    if outcome.ok:
        st.session_state.flash = ("success", outcome.message)
        st.session_state.listing_stale = True
        st.rerun()
    elif isinstance(outcome, ValidationFailed):
        st.error(f"Validation error: {outcome.message}")
    else:
        st.error(f"Error: {outcome.message}")
