# ui/__init__.py
from .helpers import ensure_session_keys, append_log

__all__ = ["ensure_session_keys", "append_log"]
