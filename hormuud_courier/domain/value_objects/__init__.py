from .channel_type import ChannelType
from .urn import tel_urn, urn_path

__all__ = ["ChannelType", "tel_urn", "urn_path"]
