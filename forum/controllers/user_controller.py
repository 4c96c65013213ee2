from typing import List, Optional
from sqlalchemy.orm import Session
from forum.core.session import SessionContext
from forum.repositories import user_repo
from forum.schemas.user_schema import UserRead


def me(db: Session, session: SessionContext) -> Optional[UserRead]:
    """Return the user bound to the current session, if any"""
    if session.user_id is None:
        return None
    user = user_repo.get_user_by_id(db, session.user_id)
    if not user:
        return None
    return UserRead.model_validate(user)


def list_users(db: Session) -> List[UserRead]:
    return [UserRead.model_validate(u) for u in user_repo.list_users(db)]


def delete_user(db: Session, user_id: int) -> int:
    """Delete a user; returns the id, or 0 when there was nobody to delete"""
    if not user_repo.get_user_by_id(db, user_id):
        return 0
    user_repo.delete_user(db, user_id)
    return user_id
