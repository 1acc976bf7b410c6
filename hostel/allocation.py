# hostel/allocation.py

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from .errors import AllocationError, Outcome
from .models import AssignedTo, Student, UNASSIGNED
from .store import RosterStore
from .utils import _is_blank

LogFunc = Optional[Callable[[str], None]]


def _logger(log_func: LogFunc) -> Callable[[str], None]:
    return (lambda m: None) if log_func is None else log_func


# -----------------------------------------------------------------------------
# Add student
# -----------------------------------------------------------------------------
def add_student(
    store: RosterStore,
    name: str,
    student_id: str,
    log_func: LogFunc = None,
) -> Outcome:
    """
    Register a new, unassigned student.

    Checks, first failure wins:
      1. name or id blank after trimming -> EmptyField
      2. id already registered (exact match) -> DuplicateId

    The stored name and id keep their original whitespace; trimming is only
    used for the blank check.
    """
    log = _logger(log_func)

    if _is_blank(name) or _is_blank(student_id):
        err = AllocationError.empty_field()
        log(f"❌ [{err.kind.value}] add {student_id or '-'}: {err.message}")
        return Outcome(store, err)

    if store.find_student(student_id) is not None:
        err = AllocationError.duplicate_id()
        log(f"❌ [{err.kind.value}] add {student_id or '-'}: {err.message}")
        return Outcome(store, err)

    student = Student(id=student_id, name=name, room=UNASSIGNED)
    new_store = replace(store, students=store.students + (student,))
    log(f"✅ Added {name} ({student_id})")
    return Outcome(new_store)


# -----------------------------------------------------------------------------
# Assign / reassign
# -----------------------------------------------------------------------------
def assign_room(
    store: RosterStore,
    student_id: Optional[str],
    room_number: Optional[str],
    log_func: LogFunc = None,
) -> Outcome:
    """
    Put a student in a room, moving them out of their previous room if any.

    Checks, first failure wins:
      1. missing student or room selection -> MissingSelection
      2. unknown student                   -> StudentNotFound
      3. unknown room                      -> RoomNotFound
      4. student already in that room      -> AlreadyAssigned
      5. room at capacity                  -> RoomFull

    Capacity is checked against the target room as it stands, before the
    student's old room is vacated. Nothing is changed unless every check passes.
    """
    log = _logger(log_func)

    def fail(err: AllocationError) -> Outcome:
        log(f"❌ [{err.kind.value}] assign {student_id or '-'} → {room_number or '-'}: {err.message}")
        return Outcome(store, err)

    if not student_id or not room_number:
        return fail(AllocationError.missing_selection())

    student = store.find_student(student_id)
    if student is None:
        return fail(AllocationError.student_not_found())

    room = store.find_room(room_number)
    if room is None:
        return fail(AllocationError.room_not_found())

    previous = student.room_number
    if previous == room_number:
        return fail(AllocationError.already_assigned(student.name, room_number))

    if room.is_full:
        return fail(AllocationError.room_full(room.number))

    new_rooms = []
    for r in store.rooms:
        if r.number == previous:
            r = replace(r, current_occupants=tuple(sid for sid in r.current_occupants if sid != student.id))
        elif r.number == room_number:
            r = replace(r, current_occupants=r.current_occupants + (student.id,))
        new_rooms.append(r)

    moved = replace(student, room=AssignedTo(room_number))
    new_students = tuple(moved if s.id == student.id else s for s in store.students)

    if previous is None:
        log(f"✅ {student.name} ({student.id}): assigned {room_number}")
    else:
        log(f"🔁 {student.name} ({student.id}): {previous} → {room_number}")
    return Outcome(replace(store, students=new_students, rooms=tuple(new_rooms)))
