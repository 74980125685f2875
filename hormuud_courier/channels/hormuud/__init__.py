from .handler import HormuudHandler
from .token import TokenFetcher

__all__ = ["HormuudHandler", "TokenFetcher"]
