from decimal import Decimal

import pandas as pd
import streamlit as st

from quote_desk.presentation import format_amount, format_party_size
from quote_desk.service import fetch_quotations


def quotations_frame(items) -> pd.DataFrame:
    records = []
    for item in items:
        q = item.quotation
        records.append({
            "id": q.id,
            "customer": item.customer_name,
            "email": item.customer_email,
            "destination": q.destination,
            "start": q.travel_start_date,
            "end": q.travel_end_date,
            "party": format_party_size(q.number_of_adults, q.number_of_children),
            "status": q.status,
            "total": float(q.total_amount),
            "created_at": q.created_at,
        })
    return pd.DataFrame(records, columns=[
        "id", "customer", "email", "destination", "start", "end",
        "party", "status", "total", "created_at",
    ])


def pipeline_total(items) -> Decimal:
    return sum((item.quotation.total_amount for item in items), Decimal("0"))


def render_quotation_table(store, owner_id: str, currency_symbol: str = "$"):
    st.title("📋 Quotation Table")

    # --- Fetch Data ---
    items = fetch_quotations(store, owner_id)

    if not items:
        st.info("No quotations found in the database.")
        return

    df = quotations_frame(items)

    # --- KPI Metrics ---
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Quotations", len(df))
    col2.metric("Approved", int((df["status"] == "approved").sum()))
    col3.metric("Pipeline", format_amount(pipeline_total(items), currency_symbol))

    # --- Filters ---
    st.divider()
    status_filter = st.multiselect(
        "Filter by Status",
        options=df["status"].unique(),
        default=df["status"].unique(),
    )

    if status_filter:
        filtered_df = df[df["status"].isin(status_filter)]
    else:
        filtered_df = df

    st.dataframe(filtered_df, use_container_width=True, hide_index=True)

    # --- Export ---
    csv = filtered_df.to_csv(index=False).encode('utf-8')
    st.download_button(
        "📥 Download as CSV",
        csv,
        "quotations.csv",
        "text/csv",
        key='download-csv'
    )
