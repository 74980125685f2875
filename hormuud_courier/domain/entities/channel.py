from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from uuid import UUID

from ..value_objects import ChannelType

CONFIG_USERNAME = "username"
CONFIG_PASSWORD = "password"
CONFIG_MAX_LENGTH = "max_length"


@dataclass(frozen=True)
class Channel:
    """A provider account bound to one gateway tenant."""

    uuid: UUID
    country: str
    address: str  # Sender ID used on outbound messages
    config: Mapping[str, Any] = field(default_factory=dict, hash=False)
    channel_type: ChannelType = ChannelType.HORMUUD

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict can't reach us
        object.__setattr__(self, "config", MappingProxyType(dict(self.config)))

    def string_config_for_key(self, key: str, default: str = "") -> str:
        """Return a config value as a string, or the default when unset or empty."""
        value = self.config.get(key)
        if value is None or value == "":
            return default
        return str(value)

    def int_config_for_key(self, key: str, default: int) -> int:
        """Return a config value as an int, or the default when unset or not a number."""
        value = self.config.get(key)
        if isinstance(value, bool):
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default
