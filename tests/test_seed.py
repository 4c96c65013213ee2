from forum.core.security import verify_password
from forum.models.post_model import Post
from forum.models.seed import SEED_PASSWORD, seed_users
from forum.models.user_model import User


def test_seed_users_creates_users_and_posts(db_session):
    created = seed_users(db_session)
    assert [u.username for u in created] == ["alice", "bob"]
    assert db_session.query(Post).count() == 3

    alice = db_session.query(User).filter(User.username == "alice").first()
    assert verify_password(SEED_PASSWORD, alice.password)


def test_seed_users_is_idempotent(db_session):
    seed_users(db_session)
    assert seed_users(db_session) == []
    assert db_session.query(User).count() == 2
