"""
Outbound port for provider token caching.

Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from uuid import UUID


class TokenCache(ABC):
    """
    Shared store for provider bearer tokens, keyed by channel.

    Entries expire on their own; there is no invalidation. Implementations
    must not raise on store failures: a failed read is a miss and a failed
    write is logged and dropped.
    """

    @abstractmethod
    async def get_token(self, channel_uuid: UUID) -> str | None:
        """
        Look up the cached token for a channel.

        Args:
            channel_uuid: Channel the token belongs to

        Returns:
            The token, or None on a miss
        """
        ...

    @abstractmethod
    async def put_token(self, channel_uuid: UUID, token: str, ttl_seconds: int) -> None:
        """
        Store a token for a channel.

        Args:
            channel_uuid: Channel the token belongs to
            token: Bearer token
            ttl_seconds: Seconds until the entry expires
        """
        ...
