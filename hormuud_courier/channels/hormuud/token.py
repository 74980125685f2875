"""
Bearer token acquisition for the Hormuud API.

Tokens are exchanged for the channel's username and password and cached per
channel. Concurrent sends on a cold cache may each fetch a token; the last
write wins and any of the tokens works.
"""

from urllib.parse import quote_plus

import httpx
import structlog

from ...domain.entities import CONFIG_PASSWORD, CONFIG_USERNAME, Channel
from ...domain.errors import ConfigError, ProtocolError
from ...domain.ports import TokenCache
from ...infrastructure.http import RequestResponse, make_http_request
from ...infrastructure.logging import sanitize_for_logging
from .constants import TOKEN_TTL_SECONDS, TOKEN_URL

logger = structlog.get_logger()


class TokenFetcher:
    """Gets provider tokens from the cache, or from the token endpoint on a miss."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TokenCache,
        token_url: str = TOKEN_URL,
        ttl_seconds: int = TOKEN_TTL_SECONDS,
    ) -> None:
        self._client = client
        self._cache = cache
        self._token_url = token_url
        self._ttl_seconds = ttl_seconds

    async def get_token(self, channel: Channel) -> tuple[str, RequestResponse | None]:
        """
        Return a token for the channel.

        Returns:
            The token, and the trace of the token request if one was made
            (None when the token came from the cache)

        Raises:
            ConfigError: Channel credentials are missing; no request was made
            TransportError: The token endpoint could not be reached or failed
            ProtocolError: The token endpoint returned no usable token
        """
        token = await self._cache.get_token(channel.uuid)
        if token:
            logger.debug("Token cache hit", channel_uuid=str(channel.uuid))
            return token, None

        return await self.fetch_token(channel)

    async def fetch_token(self, channel: Channel) -> tuple[str, RequestResponse]:
        """Exchange the channel's credentials for a new token and cache it."""
        username = channel.string_config_for_key(CONFIG_USERNAME)
        if not username:
            raise ConfigError("Missing 'username' config for HM channel")

        password = channel.string_config_for_key(CONFIG_PASSWORD)
        if not password:
            raise ConfigError("Missing 'password' config for HM channel")

        request = self._client.build_request(
            "POST",
            self._token_url,
            data={
                "Username": username,
                "Password": password,
                "grant_type": "password",
            },
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Accept": "application/json",
            },
        )

        rr = await make_http_request(
            self._client,
            request,
            redact=(password, quote_plus(password)),
        )

        try:
            data = rr.json()
        except ValueError as e:
            raise ProtocolError(
                f"error getting access_token from response: {e}",
                request_response=rr,
            ) from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise ProtocolError("no access token returned", request_response=rr)

        await self._cache.put_token(channel.uuid, token, self._ttl_seconds)

        logger.info(
            "Token retrieved",
            channel_uuid=str(channel.uuid),
            token=sanitize_for_logging(token),
            ttl_seconds=self._ttl_seconds,
        )
        return token, rr
