from .message_dto import IncomingMessageDTO, ReceiveResponseDTO, SendMessageDTO
from .status_dto import ChannelLogDTO, DeliveryStatusDTO

__all__ = [
    "ChannelLogDTO",
    "DeliveryStatusDTO",
    "IncomingMessageDTO",
    "ReceiveResponseDTO",
    "SendMessageDTO",
]
