# hostel/config.py
from __future__ import annotations
from typing import List, Tuple

# -------------------------- Configuration / Globals --------------------------

APP_TITLE = "Girls Hostel Management System"

# Fixed room set, loaded once per session: (room number, capacity)
DEFAULT_ROOMS: List[Tuple[str, int]] = [
    ("101", 2),
    ("102", 3),
    ("103", 2),
    ("201", 4),
]

LOG_MAX_LINES = 1000
LOG_TIME_FMT = "%H:%M:%S"

STUDENT_PLACEHOLDER = "-- Select Student --"
ROOM_PLACEHOLDER = "-- Select Room --"
