"""
In-memory registry of open wizard sessions with TTL
Sessions a client abandons without cancelling expire on their own
"""
import time
import uuid
from typing import Any, Dict, Optional, Tuple
from threading import Lock


class WizardSessionRegistry:
    """
    Thread-safe session holder with TTL (Time To Live)

    The TTL is refreshed every time a session is read.
    """
    def __init__(self, ttl_seconds: int = 3600):
        self.ttl = ttl_seconds
        self._sessions: Dict[str, Tuple[Any, float]] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._sessions)

    def _purge_expired(self):
        now = time.time()
        expired = [key for key, (_, expiry) in self._sessions.items() if expiry <= now]
        for key in expired:
            del self._sessions[key]

    def add(self, session: Any) -> str:
        """Register a session and return its new id"""
        session_id = str(uuid.uuid4())
        with self._lock:
            self._purge_expired()
            self._sessions[session_id] = (session, time.time() + self.ttl)
        return session_id

    def get(self, session_id: str) -> Optional[Any]:
        """Get session if not expired"""
        with self._lock:
            if session_id in self._sessions:
                session, expiry = self._sessions[session_id]
                now = time.time()
                if now < expiry:
                    self._sessions[session_id] = (session, now + self.ttl)
                    return session
                else:
                    # Expired, remove it
                    del self._sessions[session_id]
            return None

    def discard(self, session_id: str) -> bool:
        """Remove session; returns False if it was not registered"""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def clear(self):
        """Drop all sessions"""
        with self._lock:
            self._sessions.clear()
