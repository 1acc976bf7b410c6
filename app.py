import streamlit as st

# --- Ensure local packages (ui/, hostel/) are importable ---------------------
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# -----------------------------------------------------------------------------

from hostel.config import APP_TITLE
from ui.helpers import ensure_session_keys
from ui.sections import (
    render_summary,
    render_add_student_form,
    render_assign_room_form,
    render_students_list,
    render_rooms_overview,
)

st.set_page_config(
    page_title=APP_TITLE,
    layout="wide",
)

st.title(f"🏠 {APP_TITLE}")

# init session keys (seeds the fixed room set on first load)
ensure_session_keys()

render_summary()

col1, col2 = st.columns(2)
with col1:
    render_add_student_form()
with col2:
    render_assign_room_form()

st.markdown("---")

col3, col4 = st.columns(2)
with col3:
    render_students_list()
with col4:
    render_rooms_overview()
