from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from ..value_objects import urn_path
from .channel import Channel


@dataclass(frozen=True)
class OutboundMessage:
    """Message handed to us by the gateway for delivery. Read-only."""

    channel: Channel
    urn: str
    text: str
    attachments: tuple[str, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def urn_path(self) -> str:
        return urn_path(self.urn)


@dataclass(frozen=True)
class IncomingMessage:
    """Message received from the provider, in the gateway's model."""

    id: UUID
    channel_uuid: UUID
    urn: str
    text: str
    received_on: datetime
    created_on: datetime

    @classmethod
    def create(
        cls,
        channel: Channel,
        urn: str,
        text: str,
        received_on: datetime,
    ) -> "IncomingMessage":
        """Factory method to create a new incoming message."""
        return cls(
            id=uuid4(),
            channel_uuid=channel.uuid,
            urn=urn,
            text=text,
            received_on=received_on,
            created_on=datetime.now(UTC),
        )
