"""Validation outcomes returned by the allocation engine.

Every failure here is recoverable and meant to be shown to the user as-is;
nothing in this module is raised.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .store import RosterStore


class ErrorKind(str, Enum):
    # add_student
    EMPTY_FIELD = "EmptyField"
    DUPLICATE_ID = "DuplicateId"
    # assign_room
    MISSING_SELECTION = "MissingSelection"
    STUDENT_NOT_FOUND = "StudentNotFound"
    ROOM_NOT_FOUND = "RoomNotFound"
    ALREADY_ASSIGNED = "AlreadyAssigned"
    ROOM_FULL = "RoomFull"


@dataclass(frozen=True)
class AllocationError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def empty_field(cls) -> "AllocationError":
        return cls(ErrorKind.EMPTY_FIELD, "Student Name and ID cannot be empty.")

    @classmethod
    def duplicate_id(cls) -> "AllocationError":
        return cls(ErrorKind.DUPLICATE_ID, "Student with this ID already exists.")

    @classmethod
    def missing_selection(cls) -> "AllocationError":
        return cls(ErrorKind.MISSING_SELECTION, "Please select both a student and a room.")

    @classmethod
    def student_not_found(cls) -> "AllocationError":
        return cls(ErrorKind.STUDENT_NOT_FOUND, "Student not found.")

    @classmethod
    def room_not_found(cls) -> "AllocationError":
        return cls(ErrorKind.ROOM_NOT_FOUND, "Room not found.")

    @classmethod
    def already_assigned(cls, name: str, room_number: str) -> "AllocationError":
        return cls(
            ErrorKind.ALREADY_ASSIGNED,
            f"Student {name} is already assigned to room {room_number}.",
        )

    @classmethod
    def room_full(cls, room_number: str) -> "AllocationError":
        return cls(ErrorKind.ROOM_FULL, f"Room {room_number} is full.")


@dataclass(frozen=True)
class Outcome:
    """Result of one engine operation.

    On success ``store`` is the new snapshot and ``error`` is None.
    On failure ``store`` is the untouched input snapshot.
    """
    store: "RosterStore"
    error: Optional[AllocationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
