from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from hormuud_courier.infrastructure.token_cache import InMemoryTokenCache, RedisTokenCache

CHANNEL = UUID("8eb23e93-5ecb-45ba-b726-3b064e0c56ab")


class TestInMemoryTokenCache:
    @pytest.mark.asyncio
    async def test_token_available_before_expiry(self, token_cache, clock):
        await token_cache.put_token(CHANNEL, "tok", 60)
        clock.advance(59)

        assert await token_cache.get_token(CHANNEL) == "tok"

    @pytest.mark.asyncio
    async def test_token_missing_after_expiry(self, token_cache, clock):
        await token_cache.put_token(CHANNEL, "tok", 60)
        clock.advance(60)

        assert await token_cache.get_token(CHANNEL) is None

    @pytest.mark.asyncio
    async def test_miss_for_unknown_channel(self, token_cache):
        assert await token_cache.get_token(uuid4()) is None

    @pytest.mark.asyncio
    async def test_last_write_wins(self, token_cache):
        await token_cache.put_token(CHANNEL, "first", 60)
        await token_cache.put_token(CHANNEL, "second", 60)

        assert await token_cache.get_token(CHANNEL) == "second"

    @pytest.mark.asyncio
    async def test_channels_are_independent(self, token_cache, clock):
        other = uuid4()
        await token_cache.put_token(CHANNEL, "tok", 10)
        await token_cache.put_token(other, "other", 100)
        clock.advance(50)

        assert await token_cache.get_token(CHANNEL) is None
        assert await token_cache.get_token(other) == "other"

    @pytest.mark.asyncio
    async def test_default_clock(self):
        cache = InMemoryTokenCache()
        await cache.put_token(CHANNEL, "tok", 60)

        assert await cache.get_token(CHANNEL) == "tok"


class TestRedisTokenCache:
    @pytest.fixture
    def mock_redis(self):
        return AsyncMock()

    @pytest.fixture
    def cache(self, mock_redis):
        return RedisTokenCache(mock_redis)

    @pytest.mark.asyncio
    async def test_get_uses_channel_key(self, cache, mock_redis):
        mock_redis.get.return_value = "tok"

        assert await cache.get_token(CHANNEL) == "tok"
        mock_redis.get.assert_called_once_with("hm_token_8eb23e93-5ecb-45ba-b726-3b064e0c56ab")

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self, cache, mock_redis):
        mock_redis.get.return_value = b"tok"

        assert await cache.get_token(CHANNEL) == "tok"

    @pytest.mark.asyncio
    async def test_get_miss(self, cache, mock_redis):
        mock_redis.get.return_value = None

        assert await cache.get_token(CHANNEL) is None

    @pytest.mark.asyncio
    async def test_get_failure_is_a_miss(self, cache, mock_redis):
        mock_redis.get.side_effect = RedisConnectionError("connection refused")

        assert await cache.get_token(CHANNEL) is None

    @pytest.mark.asyncio
    async def test_put_sets_expiry(self, cache, mock_redis):
        await cache.put_token(CHANNEL, "tok", 5340)

        mock_redis.setex.assert_called_once_with(
            "hm_token_8eb23e93-5ecb-45ba-b726-3b064e0c56ab", 5340, "tok"
        )

    @pytest.mark.asyncio
    async def test_put_failure_is_swallowed(self, cache, mock_redis):
        mock_redis.setex.side_effect = RedisConnectionError("connection refused")

        await cache.put_token(CHANNEL, "tok", 5340)

    @pytest.mark.asyncio
    async def test_custom_prefix(self, mock_redis):
        cache = RedisTokenCache(mock_redis, key_prefix="test_token")
        mock_redis.get.return_value = None

        await cache.get_token(CHANNEL)

        mock_redis.get.assert_called_once_with("test_token_8eb23e93-5ecb-45ba-b726-3b064e0c56ab")
