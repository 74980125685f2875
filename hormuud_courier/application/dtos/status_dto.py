from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ...domain.entities import DeliveryStatus


class ChannelLogDTO(BaseModel):
    """DTO for a diagnostic log entry."""

    description: str
    method: str
    url: str
    status_code: int
    request: str
    response: str
    elapsed_ms: float
    created_on: datetime
    error: str | None = None


class DeliveryStatusDTO(BaseModel):
    """DTO for a delivery status."""

    channel_uuid: UUID
    msg_id: UUID
    status: str
    external_id: str | None
    logs: list[ChannelLogDTO]

    @classmethod
    def from_status(cls, status: DeliveryStatus) -> "DeliveryStatusDTO":
        return cls(
            channel_uuid=status.channel_uuid,
            msg_id=status.msg_id,
            status=status.status.value,
            external_id=status.external_id,
            logs=[
                ChannelLogDTO(
                    description=log.description,
                    method=log.method,
                    url=log.url,
                    status_code=log.status_code,
                    request=log.request,
                    response=log.response,
                    elapsed_ms=log.elapsed_ms,
                    created_on=log.created_on,
                    error=log.error,
                )
                for log in status.logs
            ],
        )
