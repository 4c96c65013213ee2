from redis import Redis
from forum.core.config import get_settings

settings = get_settings()

# from_url does not connect until the first command.
redis_client = Redis.from_url(settings.redis_url, decode_responses=True)


def get_redis() -> Redis:
    return redis_client
