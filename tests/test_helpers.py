import pandas as pd

from hostel.projections import rooms_frame, students_frame
from ui.helpers import highlight_assigned, highlight_full


def test_highlight_assigned_marks_only_students_with_a_room(roster):
    df = students_frame(roster)
    styles = [highlight_assigned(row) for _, row in df.iterrows()]
    assert styles[0] == ["background-color: #e6ffed"] * len(df.columns)
    assert styles[1] == ["background-color: #e6ffed"] * len(df.columns)
    assert styles[2] == [""] * len(df.columns)


def test_highlight_assigned_without_room_column():
    row = pd.Series({"name": "Alice"})
    assert highlight_assigned(row) == [""]


def test_highlight_full(roster):
    df = rooms_frame(roster).set_index("room", drop=False)
    assert highlight_full(df.loc["101"])[0] == "background-color: #e6ffed"
    assert highlight_full(pd.Series({"room": "1", "full": True}))[0] == "background-color: #ffe6e6"
