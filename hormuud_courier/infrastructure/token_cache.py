"""
Token cache adapters.

RedisTokenCache is the production store shared by every worker process.
InMemoryTokenCache serves single-process use and tests; its clock can be
swapped for deterministic expiry.
"""

import time
from collections.abc import Callable
from uuid import UUID

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ..domain.ports import TokenCache

logger = structlog.get_logger()

DEFAULT_KEY_PREFIX = "hm_token"


class RedisTokenCache(TokenCache):
    """
    Redis-backed token cache.

    Key format: {prefix}_{channel_uuid}
    Entries are written with SETEX so Redis expires them.
    """

    def __init__(self, redis: Redis, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._redis = redis
        self._key_prefix = key_prefix

    def _make_key(self, channel_uuid: UUID) -> str:
        return f"{self._key_prefix}_{channel_uuid}"

    async def get_token(self, channel_uuid: UUID) -> str | None:
        try:
            value = await self._redis.get(self._make_key(channel_uuid))
        except RedisError as e:
            logger.warning(
                "Token cache read failed, treating as miss",
                channel_uuid=str(channel_uuid),
                error=str(e),
            )
            return None

        if not value:
            return None
        return value.decode() if isinstance(value, bytes) else value

    async def put_token(self, channel_uuid: UUID, token: str, ttl_seconds: int) -> None:
        try:
            await self._redis.setex(self._make_key(channel_uuid), ttl_seconds, token)
        except RedisError as e:
            logger.error(
                "Error caching access token",
                channel_uuid=str(channel_uuid),
                error=str(e),
            )


class InMemoryTokenCache(TokenCache):
    """In-process token cache with per-entry expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._tokens: dict[UUID, str] = {}
        self._expires: dict[UUID, float] = {}

    async def get_token(self, channel_uuid: UUID) -> str | None:
        self._cleanup_expired()
        return self._tokens.get(channel_uuid)

    async def put_token(self, channel_uuid: UUID, token: str, ttl_seconds: int) -> None:
        self._tokens[channel_uuid] = token
        self._expires[channel_uuid] = self._clock() + ttl_seconds

    def _cleanup_expired(self) -> None:
        """Remove expired tokens."""
        now = self._clock()
        expired = [k for k, v in self._expires.items() if v <= now]
        for key in expired:
            del self._tokens[key]
            del self._expires[key]
        if expired:
            logger.debug("Cleaned up expired tokens", count=len(expired))
