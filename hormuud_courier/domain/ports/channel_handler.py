"""
Port for provider channel handlers.

The gateway sends outbound messages and hands over inbound webhook payloads
through this interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from ..entities import Channel, DeliveryStatus, IncomingMessage, OutboundMessage
from ..value_objects import ChannelType


class ChannelHandler(ABC):
    """Interface every provider handler implements."""

    @property
    @abstractmethod
    def channel_type(self) -> ChannelType:
        """Return the channel type this handler serves."""
        ...

    @abstractmethod
    async def send_msg(self, msg: OutboundMessage) -> DeliveryStatus:
        """
        Deliver a message to the provider.

        Provider failures are reported through the returned status. An
        exception escapes only when no status entry could be recorded at all;
        it carries the (errored) status on its ``status`` attribute.

        Args:
            msg: Message to deliver

        Returns:
            DeliveryStatus with state, external ID and one log per HTTP exchange
        """
        ...

    @abstractmethod
    def receive_message(self, channel: Channel, form: Mapping[str, str]) -> IncomingMessage:
        """
        Translate an inbound webhook payload into an incoming message.

        Raises:
            ValidationError: If required fields are missing or malformed
        """
        ...
