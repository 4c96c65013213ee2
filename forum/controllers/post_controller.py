from typing import List, Optional
from sqlalchemy.orm import Session
from forum.core.auth import get_current_user_id
from forum.core.session import SessionContext
from forum.repositories import post_repo
from forum.schemas.post_schema import PostCreate, PostRead, PostUpdate


def list_posts(db: Session) -> List[PostRead]:
    """Get every post"""
    return [PostRead.model_validate(p) for p in post_repo.list_posts(db)]


def get_post(db: Session, post_id: int) -> Optional[PostRead]:
    """Get post by ID"""
    post = post_repo.get_post(db, post_id)
    if not post:
        return None
    return PostRead.model_validate(post)


def create_post(db: Session, data: PostCreate, session: SessionContext) -> PostRead:
    """Create a post authored by the session user"""
    post = post_repo.create_post(db, data, author_id=get_current_user_id(session))
    return PostRead.model_validate(post)


def update_post(db: Session, post_id: int, data: PostUpdate) -> Optional[PostRead]:
    """Update a post; only the fields present in ``data`` are written"""
    post = post_repo.get_post(db, post_id)
    if not post:
        return None

    updated = post_repo.update_post(db, post, data)
    return PostRead.model_validate(updated)


def delete_post(db: Session, post_id: int) -> bool:
    """Delete a post; reports success whether or not a row matched"""
    post_repo.delete_post(db, post_id)
    return True
