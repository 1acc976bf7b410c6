from __future__ import annotations
from collections import Counter
from typing import List, Tuple

from .store import RosterStore

def validate_store(store: RosterStore) -> Tuple[bool, List[str]]:
    """
    Returns:
      ok (bool),
      violations (list[str])  -- one line per broken invariant
    """
    violations: List[str] = []

    # Unique student ids
    for sid, n in Counter(s.id for s in store.students).items():
        if n > 1:
            violations.append(f"Student id {sid} is registered {n} times.")

    # Unique room numbers
    for num, n in Counter(r.number for r in store.rooms).items():
        if n > 1:
            violations.append(f"Room {num} is defined {n} times.")

    # Capacity and duplicate occupants per room
    for r in store.rooms:
        if r.occupied > r.capacity:
            violations.append(f"Room {r.number}: {r.occupied} occupants exceed capacity {r.capacity}.")
        for sid, n in Counter(r.current_occupants).items():
            if n > 1:
                violations.append(f"Room {r.number}: {sid} listed {n} times.")

    # Student room reference <-> occupant lists
    housed_in = {}
    for r in store.rooms:
        for sid in r.current_occupants:
            housed_in.setdefault(sid, []).append(r.number)

    known = {s.id for s in store.students}
    for sid, rooms in housed_in.items():
        if sid not in known:
            violations.append(f"Unknown student {sid} listed in room(s) {', '.join(rooms)}.")

    for s in store.students:
        rooms = housed_in.get(s.id, [])
        target = s.room_number
        if target is None:
            if rooms:
                violations.append(f"{s.name} ({s.id}) is unassigned but listed in room(s) {', '.join(rooms)}.")
            continue
        if store.find_room(target) is None:
            violations.append(f"{s.name} ({s.id}) points to unknown room {target}.")
        if rooms.count(target) != 1:
            violations.append(f"{s.name} ({s.id}) is not listed exactly once in room {target}.")
        others = sorted({r for r in rooms if r != target})
        if others:
            violations.append(f"{s.name} ({s.id}) is also listed in room(s) {', '.join(others)}.")

    return not violations, violations
