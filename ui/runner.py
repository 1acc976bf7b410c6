# ui/runner.py
from __future__ import annotations
import streamlit as st

from hostel.allocation import add_student, assign_room
from hostel.errors import Outcome
from .helpers import append_log

# Form-submit callbacks. They run before the script reruns, so the rerun
# renders the new snapshot and any widget values reset here.

def _commit(outcome: Outcome) -> None:
    if outcome.ok:
        st.session_state["store"] = outcome.store

def handle_add_student() -> Outcome:
    st.session_state["add_student_error"] = ""

    outcome = add_student(
        st.session_state["store"],
        st.session_state.get("new_student_name", ""),
        st.session_state.get("new_student_id", ""),
        log_func=append_log,
    )
    _commit(outcome)
    if outcome.ok:
        st.session_state["new_student_name"] = ""
        st.session_state["new_student_id"] = ""
    else:
        st.session_state["add_student_error"] = outcome.error.message
    return outcome

def handle_assign_room() -> Outcome:
    st.session_state["assign_room_error"] = ""

    outcome = assign_room(
        st.session_state["store"],
        st.session_state.get("selected_student_id", ""),
        st.session_state.get("selected_room_number", ""),
        log_func=append_log,
    )
    _commit(outcome)
    if outcome.ok:
        st.session_state["selected_student_id"] = ""
        st.session_state["selected_room_number"] = ""
    else:
        st.session_state["assign_room_error"] = outcome.error.message
    return outcome
