from uuid import UUID

import httpx
import redis.asyncio as redis
import structlog
from fastapi import Depends, HTTPException, status

from ...channels import HormuudHandler
from ...config import settings
from ...domain.entities import CONFIG_PASSWORD, CONFIG_USERNAME, Channel
from ...domain.ports import ChannelHandler, TokenCache
from ...infrastructure.token_cache import RedisTokenCache

logger = structlog.get_logger()

# Shared clients, created on first use and closed at shutdown
_http_client: httpx.AsyncClient | None = None
_redis_client: redis.Redis | None = None


def get_http_client() -> httpx.AsyncClient:
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    return _http_client


def get_redis_client() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(settings.redis_url, decode_responses=True)
        logger.info("Redis client created", url=settings.redis_url.split("@")[-1])
    return _redis_client


async def close_clients() -> None:
    global _http_client, _redis_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


def get_token_cache(redis_client: redis.Redis = Depends(get_redis_client)) -> TokenCache:
    return RedisTokenCache(redis_client)


def get_handler(
    client: httpx.AsyncClient = Depends(get_http_client),
    token_cache: TokenCache = Depends(get_token_cache),
) -> ChannelHandler:
    return HormuudHandler(
        client,
        token_cache,
        send_url=settings.send_url,
        token_url=settings.token_url,
        max_msg_length=settings.max_msg_length,
        token_ttl_seconds=settings.token_ttl_seconds,
    )


def get_configured_channel() -> Channel | None:
    """Build the channel this instance serves from settings, if one is configured."""
    if settings.channel_uuid is None:
        return None
    return Channel(
        uuid=settings.channel_uuid,
        country=settings.channel_country,
        address=settings.channel_address,
        config={
            CONFIG_USERNAME: settings.channel_username,
            CONFIG_PASSWORD: settings.channel_password,
        },
    )


def get_channel(
    channel_uuid: UUID,
    configured: Channel | None = Depends(get_configured_channel),
) -> Channel:
    if configured is None or configured.uuid != channel_uuid:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Channel {channel_uuid} not found",
        )
    return configured
