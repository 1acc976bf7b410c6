import streamlit as st
import sys
from pathlib import Path

# Make sure we can import local packages when running from /pages
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hostel.projections import LOG_OUTCOMES, log_frame, outcome_counts, rejections_by_error
from ui.helpers import ensure_session_keys, csv_download

st.set_page_config(page_title="Activity", layout="wide")
st.title("🧾 Allocation Activity")

ensure_session_keys()

activity = log_frame(st.session_state.get("log_lines", []))
if activity.empty:
    st.info("Nothing recorded yet. Add a student or assign a room on the Home page.")
    st.stop()

counts = outcome_counts(activity)
cols = st.columns(len(LOG_OUTCOMES))
for col, outcome in zip(cols, LOG_OUTCOMES):
    col.metric(outcome.capitalize(), counts[outcome])

rejected = rejections_by_error(activity)
if not rejected.empty:
    st.subheader("❌ Rejections by reason")
    st.dataframe(rejected, use_container_width=True, hide_index=True)

st.subheader("Events")
shown = st.multiselect("Show outcomes", LOG_OUTCOMES, default=LOG_OUTCOMES, key="activity_outcomes")
view = activity[activity["outcome"].isin(shown)].iloc[::-1]
if view.empty:
    st.info("📭 No events match the selected outcomes.")
else:
    st.dataframe(view, use_container_width=True, hide_index=True)
    csv_download("📥 Download events", view, "allocation_activity.csv", key="dl_activity")
