import httpx
import pytest

from hormuud_courier.channels import TokenFetcher
from hormuud_courier.domain.errors import ProtocolError, TransportError


class TestTokenFetcher:
    @pytest.fixture
    def fetcher(self, http_client, token_cache):
        return TokenFetcher(http_client, token_cache)

    @pytest.mark.asyncio
    async def test_fetch_caches_token(self, fetcher, provider, token_cache, channel):
        provider.token_outcomes.append(httpx.Response(200, json={"access_token": "tok"}))

        token, rr = await fetcher.get_token(channel)

        assert token == "tok"
        assert rr is not None
        assert rr.status_code == 200
        assert await token_cache.get_token(channel.uuid) == "tok"

    @pytest.mark.asyncio
    async def test_warm_cache_makes_no_calls(self, fetcher, provider, channel):
        provider.token_outcomes.append(httpx.Response(200, json={"access_token": "tok"}))

        first, _ = await fetcher.get_token(channel)
        second, rr = await fetcher.get_token(channel)
        third, _ = await fetcher.get_token(channel)

        assert first == second == third == "tok"
        assert rr is None
        assert len(provider.token_requests) == 1

    @pytest.mark.asyncio
    async def test_expired_token_is_refetched(self, fetcher, provider, clock, channel):
        provider.token_outcomes.append(httpx.Response(200, json={"access_token": "tok1"}))
        provider.token_outcomes.append(httpx.Response(200, json={"access_token": "tok2"}))

        first, _ = await fetcher.get_token(channel)
        clock.advance(5340)
        second, _ = await fetcher.get_token(channel)

        assert (first, second) == ("tok1", "tok2")
        assert len(provider.token_requests) == 2

    @pytest.mark.asyncio
    async def test_missing_access_token(self, fetcher, provider, token_cache, channel):
        provider.token_outcomes.append(httpx.Response(200, json={"error": "nope"}))

        with pytest.raises(ProtocolError, match="no access token returned") as exc_info:
            await fetcher.fetch_token(channel)

        assert exc_info.value.request_response is not None
        assert await token_cache.get_token(channel.uuid) is None

    @pytest.mark.asyncio
    async def test_non_object_response(self, fetcher, provider, channel):
        provider.token_outcomes.append(httpx.Response(200, json=["tok"]))

        with pytest.raises(ProtocolError):
            await fetcher.fetch_token(channel)

    @pytest.mark.asyncio
    async def test_transport_error_carries_trace(self, fetcher, provider, channel):
        provider.token_outcomes.append(httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError) as exc_info:
            await fetcher.fetch_token(channel)

        rr = exc_info.value.request_response
        assert rr.status_code == 0
        assert rr.url == "https://smsapi.hormuud.com/token"
