# hostel/store.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_ROOMS
from .models import Room, Student


@dataclass(frozen=True)
class RosterStore:
    """Immutable snapshot of every student and room in the session.

    Snapshots are replaced whole after each successful operation; lookups
    never mutate anything.
    """
    students: Tuple[Student, ...] = field(default_factory=tuple)
    rooms: Tuple[Room, ...] = field(default_factory=tuple)

    @classmethod
    def seeded(cls, rooms: Iterable[Tuple[str, int]] = DEFAULT_ROOMS) -> "RosterStore":
        """Empty store with a fixed room set built from (number, capacity) pairs."""
        seen = set()
        built: List[Room] = []
        for number, capacity in rooms:
            number = str(number)
            if number in seen:
                raise ValueError(f"Duplicate room number '{number}' in room configuration.")
            if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
                raise ValueError(f"Room '{number}' must have a positive integer capacity (got {capacity!r}).")
            seen.add(number)
            built.append(Room(number=number, capacity=capacity))
        return cls(students=(), rooms=tuple(built))

    # ------------------------------- Lookups ---------------------------------

    def find_student(self, student_id: str) -> Optional[Student]:
        for s in self.students:
            if s.id == student_id:
                return s
        return None

    def find_room(self, room_number: str) -> Optional[Room]:
        for r in self.rooms:
            if r.number == room_number:
                return r
        return None

    def list_unassigned(self) -> List[Student]:
        return [s for s in self.students if not s.is_assigned]

    def list_assigned(self) -> List[Student]:
        return [s for s in self.students if s.is_assigned]

    @property
    def room_numbers(self) -> List[str]:
        return [r.number for r in self.rooms]
