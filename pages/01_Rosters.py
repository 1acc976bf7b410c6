import streamlit as st
import sys
from pathlib import Path

# Make sure we can import local packages when running from /pages
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hostel.projections import filter_students, rooms_frame, students_frame
from hostel.validate import validate_store
from ui.helpers import (
    ensure_session_keys,
    current_store,
    csv_download,
    student_filters_ui,
)

st.set_page_config(page_title="Rosters", layout="wide")
st.title("📋 Rosters")

ensure_session_keys()
store = current_store()

st.subheader("👩‍🎓 Students")
students = students_frame(store)
if students.empty:
    st.info("No students registered yet. Add some on the Home page.")
else:
    room_sel, q = student_filters_ui(store, key_prefix="rosters")
    view = filter_students(students, room_sel, q)
    if not view.empty:
        st.dataframe(view, use_container_width=True, hide_index=True)
        csv_download("📥 Download Students (filtered)", view, "students_filtered.csv", key="dl_students")
    else:
        st.info("📭 No rows match the current filters.")

st.subheader("🏠 Rooms")
rooms = rooms_frame(store)
st.dataframe(rooms, use_container_width=True, hide_index=True)
csv_download("📥 Download Rooms", rooms, "rooms.csv", key="dl_rooms")

st.markdown("---")
with st.expander("🔎 Consistency check", expanded=False):
    ok, violations = validate_store(store)
    if ok:
        st.success("All student and room records are consistent.")
    else:
        st.error(f"{len(violations)} inconsistency(ies) found:")
        for v in violations:
            st.write(f"• {v}")
