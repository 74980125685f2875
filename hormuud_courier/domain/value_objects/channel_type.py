from enum import Enum


class ChannelType(str, Enum):
    """Supported provider channels."""
    HORMUUD = "HM"
