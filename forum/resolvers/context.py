from fastapi import Depends, Request
from redis import Redis
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from forum.core.config import get_settings
from forum.core.db import get_db
from forum.core.redis import get_redis
from forum.core.session import SessionContext, SessionStore


class Context(BaseContext):
    def __init__(self, db: Session, redis: Redis, session: SessionContext):
        super().__init__()
        self.db = db
        self.redis = redis
        self.session = session

    def sync_session_cookie(self) -> None:
        """Write or clear the session cookie after the session was established or destroyed."""
        if not self.session.changed or self.response is None:
            return
        settings = get_settings()
        if self.session.session_id:
            self.response.set_cookie(
                key=settings.session_cookie_name,
                value=self.session.session_id,
                max_age=settings.session_max_age,
                httponly=True,
                samesite="lax",
                secure=settings.is_production,
                path="/",
            )
        else:
            self.response.delete_cookie(settings.session_cookie_name, path="/")


def get_context(
    request: Request,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis),
) -> Context:
    settings = get_settings()
    store = SessionStore(redis, ttl=settings.session_max_age)
    session = SessionContext.from_cookie(store, request.cookies.get(settings.session_cookie_name))
    return Context(db=db, redis=redis, session=session)
