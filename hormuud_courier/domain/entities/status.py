from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from ...infrastructure.http import RequestResponse
    from .channel import Channel


class MsgStatus(str, Enum):
    ERRORED = "errored"
    WIRED = "wired"
    SENT = "sent"
    FAILED = "failed"


@dataclass
class ChannelLog:
    """Diagnostic record of a single HTTP exchange with the provider."""

    description: str
    channel_uuid: UUID
    msg_id: UUID | None
    method: str
    url: str
    status_code: int
    request: str
    response: str
    elapsed_ms: float
    created_on: datetime = field(default_factory=lambda: datetime.now(UTC))
    error: str | None = None

    @classmethod
    def from_request_response(
        cls,
        description: str,
        channel: Channel,
        msg_id: UUID | None,
        rr: RequestResponse,
    ) -> ChannelLog:
        return cls(
            description=description,
            channel_uuid=channel.uuid,
            msg_id=msg_id,
            method=rr.method,
            url=rr.url,
            status_code=rr.status_code,
            request=rr.request,
            response=rr.response,
            elapsed_ms=rr.elapsed_ms,
        )

    def with_error(self, description: str, err: Exception | None) -> ChannelLog:
        """Attach an error to this log, prefixed with a description. No-op if err is None."""
        if err is not None:
            self.error = f"{description}: {err}"
        return self


@dataclass
class DeliveryStatus:
    """
    Outcome of one send invocation.

    Starts out errored and is advanced as segments are accepted by the
    provider. Every HTTP exchange made during the send is appended to
    ``logs`` in order.
    """

    channel_uuid: UUID
    msg_id: UUID
    status: MsgStatus = MsgStatus.ERRORED
    external_id: str | None = None
    logs: list[ChannelLog] = field(default_factory=list)

    def add_log(self, log: ChannelLog) -> None:
        self.logs.append(log)

    def set_status(self, status: MsgStatus) -> None:
        self.status = status

    def set_external_id(self, external_id: str) -> None:
        self.external_id = external_id
