"""
redis.py - Redis client for the production key/value backend.

Violation records and the id index live in Redis as plain string keys.
"""

import logging

import redis

from mcpolice.config import settings

logger = logging.getLogger(__name__)


def get_redis_client(url: str | None = None) -> redis.Redis:
    """
    Create a Redis client and verify the connection.

    Args:
        url: Redis URL, defaults to settings.REDIS_URL

    Returns:
        redis.Redis: Connected Redis client with decoded responses.

    Raises:
        redis.ConnectionError: If Redis is unreachable.
    """
    url = url or settings.REDIS_URL
    client = redis.Redis.from_url(
        url,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    client.ping()
    logger.info("Redis client connected to %s", url)
    return client
