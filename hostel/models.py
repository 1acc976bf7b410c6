# hostel/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

# -----------------------------------------------------------------------------
# Room reference: a student is either Unassigned or AssignedTo(room)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Unassigned:
    def __str__(self) -> str:
        return "Unassigned"

@dataclass(frozen=True)
class AssignedTo:
    room_number: str

    def __str__(self) -> str:
        return f"Room: {self.room_number}"

RoomRef = Union[Unassigned, AssignedTo]

UNASSIGNED = Unassigned()

# -----------------------------------------------------------------------------
# Data classes
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Student:
    id: str
    name: str
    room: RoomRef = UNASSIGNED

    @property
    def room_number(self) -> Optional[str]:
        if isinstance(self.room, AssignedTo):
            return self.room.room_number
        return None

    @property
    def is_assigned(self) -> bool:
        return isinstance(self.room, AssignedTo)

@dataclass(frozen=True)
class Room:
    number: str
    capacity: int
    current_occupants: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def occupied(self) -> int:
        return len(self.current_occupants)

    @property
    def is_full(self) -> bool:
        return self.occupied >= self.capacity

    @property
    def free_beds(self) -> int:
        return max(self.capacity - self.occupied, 0)
