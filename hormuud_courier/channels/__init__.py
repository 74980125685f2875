from .hormuud import HormuudHandler, TokenFetcher
from .text import get_text_and_attachments, split_attachment, split_msg, split_msg_by_channel

__all__ = [
    "HormuudHandler",
    "TokenFetcher",
    "get_text_and_attachments",
    "split_attachment",
    "split_msg",
    "split_msg_by_channel",
]
