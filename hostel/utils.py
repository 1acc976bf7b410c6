from __future__ import annotations
import re

def _is_blank(s) -> bool:
    """True for None or a string that is empty once surrounding whitespace is trimmed."""
    return s is None or str(s).strip() == ""

def _room_sort_key(r: str):
    s = str(r).strip()
    m = re.search(r"\d+", s)
    return (int(m.group()) if m else float("inf"), s)
