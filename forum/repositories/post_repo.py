from sqlalchemy.orm import Session
from sqlalchemy import select, delete
from forum.models.post_model import Post
from forum.schemas.post_schema import PostCreate, PostUpdate


def list_posts(db: Session) -> list[Post]:
    stmt = select(Post).order_by(Post.id)
    return list(db.execute(stmt).scalars().all())


def get_post(db: Session, post_id: int) -> Post | None:
    stmt = select(Post).where(Post.id == post_id)
    return db.execute(stmt).scalars().first()


def create_post(db: Session, data: PostCreate, author_id: int) -> Post:
    post = Post(**data.model_dump(), author_id=author_id)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def update_post(db: Session, post: Post, data: PostUpdate) -> Post:
    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(post, field, value)

    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, post_id: int) -> int:
    result = db.execute(delete(Post).where(Post.id == post_id))
    db.commit()
    return result.rowcount
