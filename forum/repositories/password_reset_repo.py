from typing import Optional
from redis import Redis

FORGOT_PASSWORD_PREFIX = "forget-password:"


def _key(token: str) -> str:
    return FORGOT_PASSWORD_PREFIX + token


def create_password_reset(redis: Redis, token: str, user_id: int, ttl: int) -> None:
    redis.set(_key(token), str(user_id), ex=ttl)


def consume_password_reset(redis: Redis, token: str) -> Optional[int]:
    """Atomically read and delete a token.

    Returns the user id it was issued for, or None once it expired or was
    already used. Only one caller can ever receive the id.
    """
    value = redis.getdel(_key(token))
    if value is None:
        return None
    return int(value)
