"""
Server-side login sessions.

The browser only receives an opaque, signed session id; the user binding and
expiry live in the session store. The store is a separate capability from
Storage so the backend can be swapped independently (SESSION_BACKEND).
"""

import logging
import secrets
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, sessionmaker

from app.models import AuthSession
from app.schemas.common import ensure_utc

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

SESSION_ID_BYTES = 32


@dataclass(frozen=True)
class SessionRecord:
    sid: str
    user_id: int
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_session_id() -> str:
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class SessionStore(ABC):
    """Create, look up and destroy sessions. Expired sessions are never returned."""

    def __init__(self, max_age: timedelta) -> None:
        self.max_age = max_age

    @abstractmethod
    def create(self, user_id: int) -> SessionRecord:
        """Start a session for user_id expiring max_age from now."""

    @abstractmethod
    def get(self, sid: str) -> SessionRecord | None:
        """Return the live session, or None if unknown or expired (expired rows are removed)."""

    @abstractmethod
    def destroy(self, sid: str) -> None:
        """Remove the session. Unknown ids are ignored."""

    @abstractmethod
    def purge_expired(self) -> int:
        """Delete every expired session; return how many were removed."""


class MemorySessionStore(SessionStore):
    """Process-local sessions; all sessions are lost on restart."""

    def __init__(self, max_age: timedelta) -> None:
        super().__init__(max_age)
        self._lock = threading.Lock()
        self._sessions: dict[str, SessionRecord] = {}

    def create(self, user_id: int) -> SessionRecord:
        record = SessionRecord(sid=new_session_id(), user_id=user_id, expires_at=_now() + self.max_age)
        with self._lock:
            self._sessions[record.sid] = record
        return record

    def get(self, sid: str) -> SessionRecord | None:
        with self._lock:
            record = self._sessions.get(sid)
            if record is None:
                return None
            if record.is_expired(_now()):
                del self._sessions[sid]
                return None
            return record

    def destroy(self, sid: str) -> None:
        with self._lock:
            self._sessions.pop(sid, None)

    def purge_expired(self) -> int:
        now = _now()
        with self._lock:
            expired = [sid for sid, record in self._sessions.items() if record.is_expired(now)]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)


class DatabaseSessionStore(SessionStore):
    """Sessions in the `sessions` table, sharing the content database's connection pool."""

    def __init__(self, session_factory: sessionmaker[Session], max_age: timedelta) -> None:
        super().__init__(max_age)
        self._session_factory = session_factory

    def create(self, user_id: int) -> SessionRecord:
        now = _now()
        row = AuthSession(
            sid=new_session_id(),
            user_id=user_id,
            created_at=now,
            expires_at=now + self.max_age,
        )
        with self._session_factory() as db:
            db.add(row)
            db.commit()
            return SessionRecord(sid=row.sid, user_id=row.user_id, expires_at=ensure_utc(row.expires_at))

    def get(self, sid: str) -> SessionRecord | None:
        with self._session_factory() as db:
            row = db.get(AuthSession, sid)
            if row is None:
                return None
            record = SessionRecord(sid=row.sid, user_id=row.user_id, expires_at=ensure_utc(row.expires_at))
            if record.is_expired(_now()):
                db.delete(row)
                db.commit()
                return None
            return record

    def destroy(self, sid: str) -> None:
        with self._session_factory() as db:
            db.query(AuthSession).filter(AuthSession.sid == sid).delete(synchronize_session=False)
            db.commit()

    def purge_expired(self) -> int:
        with self._session_factory() as db:
            deleted = (
                db.query(AuthSession)
                .filter(AuthSession.expires_at <= _now())
                .delete(synchronize_session=False)
            )
            db.commit()
        return deleted


def build_session_store(settings: "Settings") -> SessionStore:
    """Instantiate the backend named by SESSION_BACKEND."""
    max_age = timedelta(days=settings.SESSION_MAX_AGE_DAYS)
    if settings.SESSION_BACKEND == "memory":
        logger.warning("Using in-memory sessions; all admins are signed out on restart")
        return MemorySessionStore(max_age)

    from app.core.database import SessionLocal

    return DatabaseSessionStore(SessionLocal, max_age)
