"""
Hormuud channel handler.

Outbound messages are split into 160 character segments and posted one at a
time. Delivery is best effort: a failed segment stops the send, and segments
already accepted by the provider stay sent. A status that reached wired stays
wired; the failed segment shows up as an errored log entry.
"""

from collections.abc import Mapping
from datetime import UTC, datetime

import httpx
import pydantic
import structlog
from pydantic import BaseModel, Field

from ...domain.entities import (
    Channel,
    ChannelLog,
    DeliveryStatus,
    IncomingMessage,
    MsgStatus,
    OutboundMessage,
)
from ...domain.errors import CourierError, TransportError, ValidationError
from ...domain.ports import ChannelHandler, TokenCache
from ...domain.value_objects import ChannelType, tel_urn
from ...infrastructure.http import RequestResponse, make_http_request
from ..text import get_text_and_attachments, split_msg_by_channel
from .constants import MAX_MSG_LENGTH, SEND_URL, TOKEN_TTL_SECONDS, TOKEN_URL, UNSET_TYPE
from .token import TokenFetcher

logger = structlog.get_logger()


class MOPayload(BaseModel):
    """Form fields posted by Hormuud for an incoming message."""

    sender: str = Field(alias="Sender", min_length=1)
    message_text: str = Field("", alias="MessageText")
    short_code: str = Field(alias="ShortCode", min_length=1)
    time_sent: int = Field(alias="TimeSent", gt=0)


class HormuudHandler(ChannelHandler):
    """Handler for Hormuud (HM) channels."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_cache: TokenCache,
        send_url: str = SEND_URL,
        token_url: str = TOKEN_URL,
        max_msg_length: int = MAX_MSG_LENGTH,
        token_ttl_seconds: int = TOKEN_TTL_SECONDS,
    ) -> None:
        self._client = client
        self._send_url = send_url
        self._max_msg_length = max_msg_length
        self._tokens = TokenFetcher(
            client,
            token_cache,
            token_url=token_url,
            ttl_seconds=token_ttl_seconds,
        )

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.HORMUUD

    def receive_message(self, channel: Channel, form: Mapping[str, str]) -> IncomingMessage:
        try:
            payload = MOPayload.model_validate(dict(form))
        except pydantic.ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ValidationError(f"invalid request fields: {fields}") from e

        received_on = datetime.fromtimestamp(payload.time_sent, UTC)
        urn = tel_urn(payload.sender, channel.country)

        msg = IncomingMessage.create(channel, urn, payload.message_text, received_on)
        logger.info(
            "Message received",
            channel_uuid=str(channel.uuid),
            msg_id=str(msg.id),
            short_code=payload.short_code,
        )
        return msg

    async def send_msg(self, msg: OutboundMessage) -> DeliveryStatus:
        channel = msg.channel
        status = DeliveryStatus(channel_uuid=channel.uuid, msg_id=msg.id)

        try:
            token, rr = await self._tokens.get_token(channel)
        except CourierError as e:
            if e.request_response is None:
                logger.error(
                    "Unable to fetch token",
                    channel_uuid=str(channel.uuid),
                    msg_id=str(msg.id),
                    error=str(e),
                )
                e.status = status
                raise

            status.add_log(
                ChannelLog.from_request_response(
                    "Token Retrieved", channel, msg.id, e.request_response
                ).with_error("Token Retrieval Error", e)
            )
            logger.warning(
                "Token retrieval failed",
                channel_uuid=str(channel.uuid),
                msg_id=str(msg.id),
                error=str(e),
            )
            return status

        if rr is not None:
            status.add_log(ChannelLog.from_request_response("Token Retrieved", channel, msg.id, rr))

        parts = split_msg_by_channel(channel, get_text_and_attachments(msg), self._max_msg_length)
        if not parts:
            logger.warning("Message has no content", channel_uuid=str(channel.uuid), msg_id=str(msg.id))
            return status

        for i, part in enumerate(parts):
            payload = {
                "mobile": msg.urn_path.removeprefix("+"),
                "message": part,
                "senderid": channel.address,
                "mType": UNSET_TYPE,
                "eType": UNSET_TYPE,
                "UDH": "",
            }
            request = self._client.build_request(
                "POST",
                self._send_url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    "Authorization": f"Bearer {token}",
                },
            )

            try:
                rr = await make_http_request(self._client, request)
            except TransportError as e:
                status.add_log(
                    ChannelLog.from_request_response(
                        "Message Sent", channel, msg.id, e.request_response
                    ).with_error("Message Send Error", e)
                )
                logger.warning(
                    "Message segment failed",
                    status=status.status.value,
                    channel_uuid=str(channel.uuid),
                    msg_id=str(msg.id),
                    segment=i + 1,
                    segments=len(parts),
                    error=str(e),
                )
                return status

            status.add_log(ChannelLog.from_request_response("Message Sent", channel, msg.id, rr))
            status.set_status(MsgStatus.WIRED)

            external_id = _message_id(rr)
            if external_id and i == 0:
                status.set_external_id(external_id)

        logger.info(
            "Message wired",
            channel_uuid=str(channel.uuid),
            msg_id=str(msg.id),
            segments=len(parts),
            external_id=status.external_id,
        )
        return status


def _message_id(rr: RequestResponse) -> str | None:
    """Pull Data.MessageID out of a send response, if present."""
    try:
        data = rr.json()
    except ValueError:
        return None

    if not isinstance(data, dict) or not isinstance(data.get("Data"), dict):
        return None

    message_id = data["Data"].get("MessageID")
    if isinstance(message_id, (str, int)) and not isinstance(message_id, bool):
        return str(message_id)
    return None
