"""
Session-scoped state shared by the pages.
"""

import streamlit as st

from gpt_insight.storage.history import HistoryStore


def get_history_store():
    """History is read from disk once per session and kept in session state."""
    if 'history_store' not in st.session_state:
        st.session_state['history_store'] = HistoryStore().load()
    return st.session_state['history_store']
