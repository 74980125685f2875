from .channel_handler import ChannelHandler
from .token_cache import TokenCache

__all__ = ["ChannelHandler", "TokenCache"]
