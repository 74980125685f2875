from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from ...domain.entities import IncomingMessage


class SendMessageDTO(BaseModel):
    """DTO for an outbound message handed over by the gateway."""

    id: UUID | None = None
    urn: str = Field(..., min_length=1)
    text: str = ""
    attachments: list[str] = Field(default_factory=list)


class IncomingMessageDTO(BaseModel):
    """DTO for a received message."""

    type: str = "msg"
    channel_uuid: UUID
    msg_uuid: UUID
    urn: str
    text: str
    received_on: datetime

    @classmethod
    def from_message(cls, msg: IncomingMessage) -> "IncomingMessageDTO":
        return cls(
            channel_uuid=msg.channel_uuid,
            msg_uuid=msg.id,
            urn=msg.urn,
            text=msg.text,
            received_on=msg.received_on,
        )


class ReceiveResponseDTO(BaseModel):
    """Response body returned to the provider for an accepted webhook."""

    message: str = "Message Accepted"
    data: list[IncomingMessageDTO]
