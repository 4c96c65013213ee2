from conftest import LOGIN, LOGOUT, ME, REGISTER, register


def test_register_success_logs_user_in(gql, client):
    result = register(gql, username="Alice", email="Alice@Example.com")
    assert result["errors"] is None
    assert result["user"]["username"] == "alice"
    assert result["user"]["email"] == "alice@example.com"
    assert "qid" in client.cookies

    me = gql(ME)["data"]["me"]
    assert me["id"] == result["user"]["id"]


def test_register_duplicate_username_any_case(gql):
    register(gql, username="alice", email="alice@example.com")
    result = register(gql, username="ALICE", email="other@example.com")
    assert result["user"] is None
    assert result["errors"] == [{"field": "username", "message": "The username already exists."}]


def test_register_validation_error_short_username(gql, client):
    result = register(gql, username="ab", email="a@b.com", password="secret")
    assert result["user"] is None
    assert len(result["errors"]) == 1
    assert result["errors"][0]["field"] == "username"
    assert "qid" not in client.cookies


def test_register_duplicate_email_is_db_error(gql):
    register(gql, username="alice", email="shared@example.com")
    result = register(gql, username="bob", email="SHARED@example.com")
    assert result["user"] is None
    assert result["errors"][0]["field"] == "db"
    assert result["errors"][0]["message"]


def test_password_is_stored_hashed(gql, db_session):
    from forum.models.user_model import User

    register(gql, password="secret123")
    user = db_session.query(User).filter(User.username == "alice").first()
    assert user.password != "secret123"
    assert user.password.startswith("$argon2")


def test_login_with_username(gql, client):
    register(gql)
    client.cookies.clear()

    result = gql(LOGIN, usernameOrEmail="ALICE", password="secret123")["data"]["login"]
    assert result["errors"] is None
    assert result["user"]["username"] == "alice"
    assert gql(ME)["data"]["me"]["username"] == "alice"


def test_login_with_email(gql, client):
    register(gql)
    client.cookies.clear()

    result = gql(LOGIN, usernameOrEmail="Alice@Example.com", password="secret123")["data"]["login"]
    assert result["errors"] is None
    assert result["user"]["email"] == "alice@example.com"


def test_login_unknown_user(gql, client):
    result = gql(LOGIN, usernameOrEmail="nobody", password="secret123")["data"]["login"]
    assert result["user"] is None
    assert result["errors"] == [{"field": "usernameOrEmail", "message": "That user does not exist."}]
    assert gql(ME)["data"]["me"] is None


def test_login_wrong_password(gql, client):
    register(gql)
    client.cookies.clear()

    result = gql(LOGIN, usernameOrEmail="alice", password="wrong-password")["data"]["login"]
    assert result["user"] is None
    assert result["errors"] == [{"field": "password", "message": "The password is incorrect."}]
    assert "qid" not in client.cookies
    assert gql(ME)["data"]["me"] is None


def test_logout_ends_session(gql, client, fake_redis):
    register(gql)
    session_id = client.cookies.get("qid")
    assert fake_redis.exists("sess:" + session_id)

    assert gql(LOGOUT)["data"]["logout"] is True
    assert not fake_redis.exists("sess:" + session_id)
    assert gql(ME)["data"]["me"] is None


def test_logout_reports_store_failure(gql, client, fake_redis, monkeypatch):
    from redis.exceptions import ConnectionError

    register(gql)

    def broken_delete(*keys):
        raise ConnectionError("redis is down")

    monkeypatch.setattr(fake_redis, "delete", broken_delete)
    assert gql(LOGOUT)["data"]["logout"] is False


def test_users_and_delete_user(gql, client):
    alice = register(gql)["user"]
    register(gql, username="bob", email="bob@example.com")

    users = gql("query { users { username } }")["data"]["users"]
    assert [u["username"] for u in users] == ["alice", "bob"]

    deleted = gql("mutation($id: Int!) { deleteUser(id: $id) }", id=int(alice["id"]))
    assert deleted["data"]["deleteUser"] == int(alice["id"])

    missing = gql("mutation($id: Int!) { deleteUser(id: $id) }", id=9999)
    assert missing["data"]["deleteUser"] == 0

    users = gql("query { users { username } }")["data"]["users"]
    assert [u["username"] for u in users] == ["bob"]




def _cookie_attrs(resp):
    header = resp.headers["set-cookie"]
    name_value, *attrs = [part.strip() for part in header.split(";")]
    parsed = {}
    for attr in attrs:
        key, _, value = attr.partition("=")
        parsed[key.lower()] = value
    return name_value, parsed


def test_session_cookie_attributes(client):
    resp = client.post(
        "/graphql",
        json={
            "query": REGISTER,
            "variables": {"options": {"username": "alice", "email": "alice@example.com", "password": "secret123"}},
        },
    )
    name_value, attrs = _cookie_attrs(resp)
    assert name_value.startswith("qid=")
    assert "httponly" in attrs
    assert attrs["samesite"].lower() == "lax"
    assert attrs["max-age"] == str(60 * 60 * 24 * 365 * 10)
    assert attrs["path"] == "/"
    assert "secure" not in attrs


def test_session_cookie_secure_in_production(gql, client, monkeypatch):
    from forum.core.config import get_settings

    register(gql)
    client.cookies.clear()
    monkeypatch.setattr(get_settings(), "app_env", "production")

    resp = client.post(
        "/graphql",
        json={"query": LOGIN, "variables": {"usernameOrEmail": "alice", "password": "secret123"}},
    )
    _, attrs = _cookie_attrs(resp)
    assert "secure" in attrs
    assert "httponly" in attrs


def test_logout_clears_cookie(gql, client):
    register(gql)
    assert "qid" in client.cookies

    resp = client.post("/graphql", json={"query": LOGOUT})
    assert resp.json()["data"]["logout"] is True
    name_value, attrs = _cookie_attrs(resp)
    assert name_value.startswith("qid=")
    assert attrs["max-age"] == "0"
    assert "qid" not in client.cookies


def test_delete_user_removes_their_posts(gql):
    alice = register(gql)["user"]
    create = "mutation($input: PostInput!) { createPost(input: $input) { id } }"
    gql(create, input={"title": "one", "content": "body"})
    gql(create, input={"title": "two", "content": "body"})
    assert len(gql("query { posts { id } }")["data"]["posts"]) == 2

    deleted = gql("mutation($id: Int!) { deleteUser(id: $id) }", id=alice["id"])
    assert deleted["data"]["deleteUser"] == alice["id"]
    assert gql("query { posts { id } }")["data"]["posts"] == []
