from __future__ import annotations
import streamlit as st
import pandas as pd
from datetime import datetime as dt

from hostel.config import LOG_MAX_LINES, LOG_TIME_FMT
from hostel.projections import room_filter_values, to_csv_bytes
from hostel.store import RosterStore

# ----------------- Session helpers -----------------

def ensure_session_keys() -> None:
    """Create all session_state keys used by the app if missing."""
    defaults = [
        ("store",                RosterStore.seeded),
        ("log_lines",            list),
        ("add_student_error",    str),
        ("assign_room_error",    str),
        ("new_student_name",     str),
        ("new_student_id",       str),
        ("selected_student_id",  str),
        ("selected_room_number", str),
    ]
    for k, factory in defaults:
        if k not in st.session_state:
            st.session_state[k] = factory()

def current_store() -> RosterStore:
    return st.session_state["store"]

def append_log(msg: str) -> None:
    """Timestamp a line into the session log, keeping only the newest LOG_MAX_LINES."""
    lines = st.session_state.setdefault("log_lines", [])
    lines.append(f"[{dt.now().strftime(LOG_TIME_FMT)}] {msg}")
    if len(lines) > LOG_MAX_LINES:
        del lines[: len(lines) - LOG_MAX_LINES]

# ----------------- DataFrame helpers -----------------

def highlight_full(row):
    """Row-level highlight: red when the room is at capacity, green when it has free beds."""
    if "full" not in row.index:
        return [""] * len(row)
    color = "background-color: #ffe6e6" if bool(row["full"]) else "background-color: #e6ffed"
    return [color] * len(row)

def highlight_assigned(row):
    """Row-level highlight: green for students with a room, no color for unassigned ones."""
    if "room" not in row.index or not str(row["room"]).strip():
        return [""] * len(row)
    return ["background-color: #e6ffed"] * len(row)

def csv_download(label: str, df: pd.DataFrame, file_name: str, key: str) -> None:
    st.download_button(label, to_csv_bytes(df), file_name=file_name, mime="text/csv", key=key)

# ----------------- Filters UI -----------------

def student_filters_ui(store: RosterStore, key_prefix: str):
    c1, c2 = st.columns([2, 1])
    with c1:
        sel = st.multiselect("Filter by room", room_filter_values(store), key=f"room_sel_{key_prefix}")
    with c2:
        q = st.text_input("Search name or ID", key=f"student_q_{key_prefix}", placeholder="type to search…")
    return sel, q

__all__ = [
    "ensure_session_keys",
    "current_store",
    "append_log",
    "highlight_full",
    "highlight_assigned",
    "csv_download",
    "student_filters_ui",
]
