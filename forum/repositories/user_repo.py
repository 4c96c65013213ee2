from sqlalchemy.orm import Session
from sqlalchemy import select, delete
from forum.models.user_model import User


def get_user_by_id(db: Session, user_id: int) -> User | None:
    stmt = select(User).where(User.id == user_id)
    return db.execute(stmt).scalars().first()


def get_user_by_username(db: Session, username: str) -> User | None:
    stmt = select(User).where(User.username == username.lower())
    return db.execute(stmt).scalars().first()


def get_user_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == email.lower())
    return db.execute(stmt).scalars().first()


def list_users(db: Session) -> list[User]:
    stmt = select(User).order_by(User.id)
    return list(db.execute(stmt).scalars().all())


def create_user(db: Session, username: str, email: str, password_hash: str) -> User:
    user = User(
        username=username.lower(),
        email=email.lower(),
        password=password_hash,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user_password(db: Session, user: User, password_hash: str) -> User:
    user.password = password_hash
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> int:
    """Remove a user by id and return the number of rows deleted."""
    result = db.execute(delete(User).where(User.id == user_id))
    db.commit()
    return result.rowcount
