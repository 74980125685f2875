from fastapi import APIRouter, Depends, HTTPException, Request, status

from ....application.dtos import (
    DeliveryStatusDTO,
    IncomingMessageDTO,
    ReceiveResponseDTO,
    SendMessageDTO,
)
from ....domain.entities import Channel, OutboundMessage
from ....domain.errors import CourierError, ValidationError
from ....domain.ports import ChannelHandler
from ..dependencies import get_channel, get_handler

router = APIRouter(prefix="/c/hm/{channel_uuid}", tags=["hormuud"])


@router.post(
    "/receive",
    response_model=ReceiveResponseDTO,
    summary="Receive a message",
    description="Webhook called by Hormuud for each incoming SMS.",
)
async def receive_message(
    request: Request,
    channel: Channel = Depends(get_channel),
    handler: ChannelHandler = Depends(get_handler),
) -> ReceiveResponseDTO:
    form = await request.form()
    try:
        msg = handler.receive_message(channel, form)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ReceiveResponseDTO(data=[IncomingMessageDTO.from_message(msg)])


@router.post(
    "/send",
    response_model=DeliveryStatusDTO,
    summary="Send a message",
    description="Deliver a message through Hormuud and return its delivery status.",
)
async def send_message(
    payload: SendMessageDTO,
    channel: Channel = Depends(get_channel),
    handler: ChannelHandler = Depends(get_handler),
) -> DeliveryStatusDTO:
    fields = {"id": payload.id} if payload.id else {}
    msg = OutboundMessage(
        channel=channel,
        urn=payload.urn,
        text=payload.text,
        attachments=tuple(payload.attachments),
        **fields,
    )
    try:
        delivery_status = await handler.send_msg(msg)
    except CourierError as e:
        detail: dict = {"error": str(e)}
        if e.status is not None:
            detail["status"] = DeliveryStatusDTO.from_status(e.status).model_dump(mode="json")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
    return DeliveryStatusDTO.from_status(delivery_status)
