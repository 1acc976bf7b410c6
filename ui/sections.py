from __future__ import annotations
import streamlit as st

from hostel.config import ROOM_PLACEHOLDER, STUDENT_PLACEHOLDER
from hostel.projections import (
    room_option_label,
    rooms_frame,
    student_option_label,
    student_options,
    students_frame,
    summary,
)
from .helpers import current_store, highlight_assigned, highlight_full
from .runner import handle_add_student, handle_assign_room


# ---------- Summary metrics ---------------------------------------------------
def render_summary():
    s = summary(current_store())
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Students", s["students"])
    c2.metric("Assigned", s["assigned"])
    c3.metric("Unassigned", s["unassigned"])
    c4.metric("Free beds", s["free_beds"])


# ---------- Add student -------------------------------------------------------
def render_add_student_form():
    st.markdown("## ➕ Add New Student")
    with st.form("add_student_form"):
        st.text_input("Student Name:", key="new_student_name", placeholder="e.g., Alice Smith")
        st.text_input("Student ID:", key="new_student_id", placeholder="e.g., GH001")
        if st.session_state["add_student_error"]:
            st.error(st.session_state["add_student_error"])
        st.form_submit_button("Add Student", on_click=handle_add_student)


# ---------- Assign room -------------------------------------------------------
def render_assign_room_form():
    st.markdown("## 🛏️ Assign Student to Room")
    store = current_store()

    def fmt_student(sid: str) -> str:
        if not sid:
            return STUDENT_PLACEHOLDER
        s = store.find_student(sid)
        return student_option_label(s) if s is not None else sid

    def fmt_room(num: str) -> str:
        if not num:
            return ROOM_PLACEHOLDER
        r = store.find_room(num)
        return room_option_label(r) if r is not None else num

    with st.form("assign_room_form"):
        st.selectbox(
            "Select Student:",
            [""] + student_options(store),
            format_func=fmt_student,
            key="selected_student_id",
        )
        st.selectbox(
            "Select Room:",
            [""] + store.room_numbers,
            format_func=fmt_room,
            key="selected_room_number",
        )
        if st.session_state["assign_room_error"]:
            st.error(st.session_state["assign_room_error"])
        st.form_submit_button("Assign Room", on_click=handle_assign_room)


# ---------- Student list ------------------------------------------------------
def render_students_list():
    st.markdown("## 👩‍🎓 All Students")
    df = students_frame(current_store())
    if df.empty:
        st.info("No students registered yet.")
        return
    st.dataframe(
        df.style.apply(highlight_assigned, axis=1),
        use_container_width=True,
        hide_index=True,
        column_order=["name", "id", "status"],
        column_config={"name": "Name", "id": "ID", "status": "Room"},
    )


# ---------- Rooms overview ----------------------------------------------------
def render_rooms_overview():
    st.markdown("## 🏠 Rooms Overview")
    df = rooms_frame(current_store())
    view = df[["room", "occupancy", "occupants", "full"]]
    st.dataframe(
        view.style.apply(highlight_full, axis=1),
        use_container_width=True,
        hide_index=True,
        column_config={
            "room": "Room",
            "occupancy": "Occupancy",
            "occupants": "Occupants",
            "full": st.column_config.CheckboxColumn("Full"),
        },
    )
