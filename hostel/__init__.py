# hostel/__init__.py
from .allocation import add_student, assign_room
from .errors import AllocationError, ErrorKind, Outcome
from .models import AssignedTo, Room, Student, Unassigned, UNASSIGNED
from .store import RosterStore
from .validate import validate_store

__all__ = [
    "add_student",
    "assign_room",
    "AllocationError",
    "ErrorKind",
    "Outcome",
    "AssignedTo",
    "Room",
    "Student",
    "Unassigned",
    "UNASSIGNED",
    "RosterStore",
    "validate_store",
]
