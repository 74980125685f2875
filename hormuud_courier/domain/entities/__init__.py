from .channel import CONFIG_MAX_LENGTH, CONFIG_PASSWORD, CONFIG_USERNAME, Channel
from .message import IncomingMessage, OutboundMessage
from .status import ChannelLog, DeliveryStatus, MsgStatus

__all__ = [
    "CONFIG_MAX_LENGTH",
    "CONFIG_PASSWORD",
    "CONFIG_USERNAME",
    "Channel",
    "ChannelLog",
    "DeliveryStatus",
    "IncomingMessage",
    "MsgStatus",
    "OutboundMessage",
]
