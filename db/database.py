# db/database.py

from supabase import create_client, Client
import streamlit as st

from quote_desk.config import SupabaseConfig


def create_supabase_client(cfg: SupabaseConfig) -> Client:
    return create_client(cfg.url, cfg.service_key)


def get_supabase_client(cfg: SupabaseConfig) -> Client:
    """
    Returns a cached Supabase client.
    Uses service_role_key so the app can write customers and quotations
    on behalf of the owner passed in explicitly.
    """

    if "supabase_client" not in st.session_state:
        st.session_state.supabase_client = create_supabase_client(cfg)

    return st.session_state.supabase_client
