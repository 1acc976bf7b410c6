# hostel/projections.py

from __future__ import annotations
import re
from typing import Dict, Iterable, List
import pandas as pd

from .models import Room, Student, UNASSIGNED
from .store import RosterStore
from .utils import _room_sort_key

STUDENT_COLUMNS = ["name", "id", "status", "room"]
ROOM_COLUMNS = ["room", "capacity", "occupied", "occupancy", "full", "occupants"]
LOG_COLUMNS = ["time", "outcome", "error", "message"]

UNASSIGNED_LABEL = str(UNASSIGNED)
LOG_OUTCOMES = ["added", "assigned", "moved", "rejected"]

# "[12:00:01] ❌ [RoomFull] assign GH003 → 103: Room 103 is full."
_LOG_RE = re.compile(r"^(?:\[(?P<time>[^\]]*)\]\s+)?(?P<icon>✅|🔁|❌)\s*(?P<text>.*)$")
_KIND_RE = re.compile(r"^\[(?P<kind>\w+)\]\s*")

# ----------------- Labels -----------------

def student_status_label(student: Student) -> str:
    """'Unassigned' or 'Room: <n>'."""
    return str(student.room)

def occupancy_label(room: Room) -> str:
    return f"{room.occupied} / {room.capacity}"

def occupant_names(store: RosterStore, room: Room) -> str:
    """Comma-joined occupant names; falls back to the raw id if a student can't be resolved."""
    names = []
    for sid in room.current_occupants:
        s = store.find_student(sid)
        names.append(s.name if s is not None else sid)
    return ", ".join(names)

def student_option_label(student: Student) -> str:
    label = f"{student.name} ({student.id})"
    if student.is_assigned:
        label += f" (Currently in {student.room_number})"
    return label

def room_option_label(room: Room) -> str:
    label = f"Room {room.number} (Capacity: {room.capacity}, Occupied: {room.occupied})"
    if room.is_full:
        label += " (Full)"
    return label

def student_options(store: RosterStore) -> List[str]:
    """Select-box order: unassigned students first, then assigned ones."""
    return [s.id for s in store.list_unassigned()] + [s.id for s in store.list_assigned()]

# ----------------- Tables -----------------

def students_frame(store: RosterStore) -> pd.DataFrame:
    rows = [
        {
            "name": s.name,
            "id": s.id,
            "status": student_status_label(s),
            "room": s.room_number or "",
        }
        for s in store.students
    ]
    return pd.DataFrame(rows, columns=STUDENT_COLUMNS)

def rooms_frame(store: RosterStore) -> pd.DataFrame:
    rows = [
        {
            "room": r.number,
            "capacity": r.capacity,
            "occupied": r.occupied,
            "occupancy": occupancy_label(r),
            "full": r.occupied == r.capacity,
            "occupants": occupant_names(store, r),
        }
        for r in store.rooms
    ]
    return pd.DataFrame(rows, columns=ROOM_COLUMNS)

def summary(store: RosterStore) -> Dict[str, int]:
    assigned = len(store.list_assigned())
    return {
        "students": len(store.students),
        "assigned": assigned,
        "unassigned": len(store.students) - assigned,
        "free_beds": sum(r.free_beds for r in store.rooms),
    }

# ----------------- Filters & export -----------------

def room_filter_values(store: RosterStore) -> List[str]:
    """Room numbers in natural order, then 'Unassigned', for filter widgets."""
    return sorted(store.room_numbers, key=_room_sort_key) + [UNASSIGNED_LABEL]

def filter_students(df: pd.DataFrame, rooms_sel: List[str], q: str) -> pd.DataFrame:
    if df is None or df.empty:
        return df
    out = df
    if rooms_sel:
        wanted = set(rooms_sel)
        hit = out["room"].astype(str).isin(wanted)
        if UNASSIGNED_LABEL in wanted:
            hit = hit | (out["room"].astype(str) == "")
        out = out[hit]
    if q and q.strip():
        needle = q.strip()
        hit = (
            out["name"].astype(str).str.contains(needle, case=False, na=False, regex=False)
            | out["id"].astype(str).str.contains(needle, case=False, na=False, regex=False)
        )
        out = out[hit]
    return out

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8-sig")

# ----------------- Activity log -----------------

def log_outcome(line: str) -> Dict[str, str]:
    """Split one session log line into time, outcome, error kind and message."""
    m = _LOG_RE.match(str(line).strip())
    if not m:
        return {"time": "", "outcome": "other", "error": "", "message": str(line)}
    icon, text = m.group("icon"), m.group("text")
    error = ""
    if icon == "❌":
        outcome = "rejected"
        k = _KIND_RE.match(text)
        if k:
            error = k.group("kind")
            text = text[k.end():]
    elif icon == "🔁":
        outcome = "moved"
    elif text.startswith("Added "):
        outcome = "added"
    else:
        outcome = "assigned"
    return {"time": m.group("time") or "", "outcome": outcome, "error": error, "message": text}

def log_frame(lines: Iterable[str]) -> pd.DataFrame:
    return pd.DataFrame([log_outcome(line) for line in lines], columns=LOG_COLUMNS)

def outcome_counts(df: pd.DataFrame) -> Dict[str, int]:
    """Lines per outcome; every outcome in LOG_OUTCOMES is present, zero if unseen."""
    counts = df["outcome"].value_counts() if not df.empty else pd.Series(dtype=int)
    return {o: int(counts.get(o, 0)) for o in LOG_OUTCOMES}

def rejections_by_error(df: pd.DataFrame) -> pd.DataFrame:
    rej = df[df["outcome"] == "rejected"] if not df.empty else df
    if rej.empty:
        return pd.DataFrame(columns=["error", "count"])
    return (
        rej.groupby("error")
        .size()
        .reset_index(name="count")
        .sort_values(["count", "error"], ascending=[False, True])
        .reset_index(drop=True)
    )
