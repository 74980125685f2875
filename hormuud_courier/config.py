from uuid import UUID

from pydantic_settings import BaseSettings

from .channels.hormuud.constants import MAX_MSG_LENGTH, SEND_URL, TOKEN_TTL_SECONDS, TOKEN_URL


class Settings(BaseSettings):
    """Courier settings loaded from environment."""

    # Service
    service_name: str = "hormuud-courier"
    debug: bool = False

    # Redis (token cache)
    redis_url: str = "redis://localhost:6379/0"

    # Hormuud API
    token_url: str = TOKEN_URL
    send_url: str = SEND_URL
    max_msg_length: int = MAX_MSG_LENGTH
    token_ttl_seconds: int = TOKEN_TTL_SECONDS
    http_timeout_seconds: float = 30.0

    # Channel served by this instance
    channel_uuid: UUID | None = None
    channel_country: str = "SO"
    channel_address: str = ""  # Sender ID
    channel_username: str = ""
    channel_password: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
