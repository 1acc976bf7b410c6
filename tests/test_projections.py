from dataclasses import replace

from conftest import add_ok, assign_ok
from hostel.allocation import add_student, assign_room
from hostel.projections import (
    ROOM_COLUMNS,
    STUDENT_COLUMNS,
    filter_students,
    log_frame,
    log_outcome,
    outcome_counts,
    rejections_by_error,
    occupancy_label,
    occupant_names,
    room_filter_values,
    room_option_label,
    rooms_frame,
    student_option_label,
    student_options,
    student_status_label,
    students_frame,
    summary,
    to_csv_bytes,
)
from hostel.store import RosterStore


def test_students_frame_empty_has_columns(store):
    df = students_frame(store)
    assert df.empty
    assert list(df.columns) == STUDENT_COLUMNS


def test_students_frame_labels(roster):
    df = students_frame(roster)
    assert list(df["id"]) == ["GH001", "GH002", "GH003"]
    assert list(df["status"]) == ["Room: 101", "Room: 103", "Unassigned"]
    assert list(df["room"]) == ["101", "103", ""]


def test_rooms_frame(roster):
    df = rooms_frame(roster).set_index("room")
    assert list(rooms_frame(roster).columns) == ROOM_COLUMNS
    assert df.loc["101", "occupancy"] == "1 / 2"
    assert df.loc["101", "occupants"] == "Alice"
    assert not df.loc["101", "full"]
    assert df.loc["201", "occupants"] == ""


def test_full_flag_and_occupant_join(roster):
    s = assign_ok(roster, "GH003", "103")
    df = rooms_frame(s).set_index("room")
    assert df.loc["103", "full"]
    assert df.loc["103", "occupants"] == "Bob, Cara"
    assert occupancy_label(s.find_room("103")) == "2 / 2"


def test_occupant_names_falls_back_to_id(roster):
    room = replace(roster.find_room("201"), current_occupants=("ghost",))
    assert occupant_names(roster, room) == "ghost"


def test_option_labels(roster):
    s = assign_ok(roster, "GH003", "103")
    assert student_option_label(s.find_student("GH001")) == "Alice (GH001) (Currently in 101)"
    assert student_option_label(add_ok(s, "Dee", "GH004").find_student("GH004")) == "Dee (GH004)"
    assert room_option_label(s.find_room("102")) == "Room 102 (Capacity: 3, Occupied: 0)"
    assert room_option_label(s.find_room("103")) == "Room 103 (Capacity: 2, Occupied: 2) (Full)"


def test_student_options_unassigned_first(roster):
    assert student_options(roster) == ["GH003", "GH001", "GH002"]
    assert student_status_label(roster.find_student("GH003")) == "Unassigned"


def test_summary(roster):
    assert summary(roster) == {"students": 3, "assigned": 2, "unassigned": 1, "free_beds": 9}


def test_room_filter_values_natural_order():
    s = RosterStore.seeded([("B10", 1), ("B2", 1), ("A1", 1)])
    assert room_filter_values(s) == ["A1", "B2", "B10", "Unassigned"]


def test_filter_students(roster):
    df = students_frame(roster)
    assert list(filter_students(df, ["101"], "")["id"]) == ["GH001"]
    assert list(filter_students(df, [], "bo")["id"]) == ["GH002"]
    assert list(filter_students(df, [], "gh00")["id"]) == ["GH001", "GH002", "GH003"]
    assert filter_students(df, ["102"], "").empty


def test_to_csv_bytes_has_bom(roster):
    data = to_csv_bytes(students_frame(roster))
    assert data.startswith("\ufeff".encode("utf-8"))
    assert b"Alice,GH001,Room: 101,101" in data


def test_filter_students_unassigned_choice(roster):
    df = students_frame(roster)
    assert list(filter_students(df, ["Unassigned"], "")["id"]) == ["GH003"]
    assert list(filter_students(df, ["103", "Unassigned"], "")["id"]) == ["GH002", "GH003"]
    assert filter_students(df, ["Unassigned"], "alice").empty


def test_log_outcome_parses_engine_lines():
    assert log_outcome("[10:00:00] ✅ Added Alice (GH001)") == {
        "time": "10:00:00", "outcome": "added", "error": "", "message": "Added Alice (GH001)",
    }
    assert log_outcome("[10:00:01] ✅ Alice (GH001): assigned 101")["outcome"] == "assigned"
    assert log_outcome("🔁 Alice (GH001): 101 → 102")["outcome"] == "moved"
    rejected = log_outcome("[10:00:02] ❌ [RoomFull] assign GH003 → 103: Room 103 is full.")
    assert rejected["outcome"] == "rejected"
    assert rejected["error"] == "RoomFull"
    assert rejected["message"] == "assign GH003 → 103: Room 103 is full."
    assert log_outcome("something else")["outcome"] == "other"


def test_log_summaries_from_real_session(store, log_lines):
    s = add_student(store, "Alice", "GH001", log_func=log_lines.append).store
    s = add_student(s, "Bob", "GH002", log_func=log_lines.append).store
    add_student(s, "Bob", "GH001", log_func=log_lines.append)
    s = assign_room(s, "GH001", "103", log_func=log_lines.append).store
    s = assign_room(s, "GH002", "103", log_func=log_lines.append).store
    s = assign_room(s, "GH001", "101", log_func=log_lines.append).store
    assign_room(s, "GH001", "101", log_func=log_lines.append)
    assign_room(s, "", "101", log_func=log_lines.append)
    s = assign_room(s, "GH002", "101", log_func=log_lines.append).store
    assert s.find_room("101").current_occupants == ("GH001", "GH002")

    df = log_frame(log_lines)
    assert outcome_counts(df) == {"added": 2, "assigned": 2, "moved": 2, "rejected": 3}
    by_error = rejections_by_error(df)
    assert list(by_error["error"]) == ["AlreadyAssigned", "DuplicateId", "MissingSelection"]
    assert list(by_error["count"]) == [1, 1, 1]


def test_log_summaries_empty():
    df = log_frame([])
    assert outcome_counts(df) == {"added": 0, "assigned": 0, "moved": 0, "rejected": 0}
    assert rejections_by_error(df).empty
