"""Redis-backed cookie sessions.

A session id is an opaque random string stored in the session cookie. Redis
holds ``sess:<id>`` -> ``{"userId": <id>}`` for as long as the cookie lives.
"""
import json
import logging
import secrets
from typing import Optional

from redis import Redis

SESSION_PREFIX = "sess:"

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self, redis: Redis, ttl: int):
        self.redis = redis
        self.ttl = ttl

    def _key(self, session_id: str) -> str:
        return SESSION_PREFIX + session_id

    def create(self, user_id: int) -> str:
        session_id = secrets.token_urlsafe(32)
        self.redis.set(self._key(session_id), json.dumps({"userId": user_id}), ex=self.ttl)
        return session_id

    def load(self, session_id: str) -> Optional[dict]:
        raw = self.redis.get(self._key(session_id))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable session %s", session_id)
            return None

    def destroy(self, session_id: str) -> None:
        self.redis.delete(self._key(session_id))


class SessionContext:
    """The session of the current request.

    Controllers read ``user_id`` and call ``establish``/``destroy``; the
    transport layer looks at ``session_id`` and ``changed`` afterwards to
    write or clear the cookie.
    """

    def __init__(self, store: SessionStore, session_id: Optional[str] = None, user_id: Optional[int] = None):
        self.store = store
        self.session_id = session_id
        self.user_id = user_id
        self.changed = False

    @classmethod
    def from_cookie(cls, store: SessionStore, session_id: Optional[str]) -> "SessionContext":
        if not session_id:
            return cls(store)
        data = store.load(session_id)
        if not data or data.get("userId") is None:
            return cls(store, session_id=session_id)
        return cls(store, session_id=session_id, user_id=int(data["userId"]))

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def establish(self, user_id: int) -> str:
        # A new id is issued on every login; the old one is dropped.
        if self.session_id:
            self.store.destroy(self.session_id)
        self.session_id = self.store.create(user_id)
        self.user_id = user_id
        self.changed = True
        return self.session_id

    def destroy(self) -> None:
        self.changed = True
        session_id, self.session_id, self.user_id = self.session_id, None, None
        if session_id:
            self.store.destroy(session_id)
