from __future__ import annotations

from sqlalchemy.orm import Session

from forum.core.db import SessionLocal, engine, init_db
from forum.core.security import hash_password
from forum.models.post_model import Post
from forum.models.user_model import User


SEED_PASSWORD = "Test12345"

SEED_USERS = [
    {
        "username": "alice",
        "email": "alice@seed.example.com",
        "posts": [
            {"title": "Welcome to the forum", "content": "Say hi and introduce yourself."},
            {"title": "Posting guidelines", "content": "Be kind, stay on topic, no spam."},
        ],
    },
    {
        "username": "bob",
        "email": "bob@seed.example.com",
        "posts": [
            {"title": "First post", "content": "Testing, testing."},
        ],
    },
]


def seed_users(db: Session) -> list[User]:
    created_users: list[User] = []
    password_hash = hash_password(SEED_PASSWORD)

    for item in SEED_USERS:
        existing = db.query(User).filter(User.username == item["username"]).first()
        if existing:
            continue

        user = User(
            username=item["username"],
            email=item["email"],
            password=password_hash,
        )
        db.add(user)
        db.flush()

        for post in item["posts"]:
            db.add(Post(title=post["title"], content=post["content"], author_id=user.id))
        created_users.append(user)

    db.commit()
    return created_users


def run_seed() -> None:
    if SessionLocal is None:
        raise RuntimeError("DATABASE_URL is not set")
    init_db(engine)
    db = SessionLocal()
    try:
        seed_users(db)
    finally:
        db.close()


if __name__ == "__main__":
    run_seed()
