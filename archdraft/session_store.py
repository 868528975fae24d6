"""In-memory, thread-safe registry of per-conversation session state."""

from __future__ import annotations

import threading
from typing import Dict, Optional

from .types import SessionState


class SessionStore:
    """Maps conversation ids to their :class:`SessionState`.

    ``get_or_create`` and ``reset`` are serialized by one lock, so a create
    never races a reset for the same key. The returned state is shared by
    reference with every later caller for that id.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, SessionState] = {}
        self._lock = threading.Lock()

    def get_or_create(self, conversation_id: Optional[str]) -> SessionState:
        key = conversation_id or ""
        with self._lock:
            state = self._sessions.get(key)
            if state is None:
                state = SessionState()
                self._sessions[key] = state
            return state

    def reset(self, conversation_id: Optional[str]) -> None:
        key = conversation_id or ""
        with self._lock:
            self._sessions.pop(key, None)

    def __contains__(self, conversation_id: object) -> bool:
        with self._lock:
            return (conversation_id or "") in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
