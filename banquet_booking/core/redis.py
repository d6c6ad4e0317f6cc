import json
import redis
from redis.exceptions import RedisError

from banquet_booking.core.logging_config import get_logger

logger = get_logger()

BOOKINGS_KEY = "bookings:all"


def booking_key(booking_id: str) -> str:
    return f"bookings:{booking_id}"


def connect_redis(redis_url):
    """Return a connected client, or None when redis is not configured/reachable."""
    if not redis_url:
        return None

    try:
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        client.ping()
        logger.info("Redis connected")
        return client
    except RedisError as e:
        logger.warning(f"Redis unavailable: {e}")
        return None


class BookingCache:
    """Read-through JSON cache; every method is a no-op without a client."""

    def __init__(self, client=None, ttl: int = 60):
        self.client = client
        self.ttl = ttl

    @property
    def enabled(self):
        return self.client is not None

    def get(self, key: str):
        if not self.client:
            return None
        try:
            data = self.client.get(key)
            return json.loads(data) if data else None
        except RedisError:
            return None

    def set(self, key: str, value):
        if not self.client:
            return
        try:
            self.client.setex(key, self.ttl, json.dumps(value))
        except RedisError:
            pass

    def delete(self, *keys: str):
        if not self.client or not keys:
            return
        try:
            self.client.delete(*keys)
        except RedisError:
            pass

    def close(self):
        if self.client is not None:
            self.client.close()
