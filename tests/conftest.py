import pytest

from hostel.allocation import add_student, assign_room
from hostel.store import RosterStore


@pytest.fixture
def store():
    """Fresh store with the default four rooms and no students."""
    return RosterStore.seeded()


@pytest.fixture
def log_lines():
    return []


def add_ok(store, name, sid):
    outcome = add_student(store, name, sid)
    assert outcome.ok, outcome.error
    return outcome.store


def assign_ok(store, sid, room):
    outcome = assign_room(store, sid, room)
    assert outcome.ok, outcome.error
    return outcome.store


@pytest.fixture
def roster(store):
    """Alice, Bob and Cara registered; Alice in 101, Bob in 103."""
    s = add_ok(store, "Alice", "GH001")
    s = add_ok(s, "Bob", "GH002")
    s = add_ok(s, "Cara", "GH003")
    s = assign_ok(s, "GH001", "101")
    s = assign_ok(s, "GH002", "103")
    return s
