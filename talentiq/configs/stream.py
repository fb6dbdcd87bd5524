"""
Stream video/chat configuration settings.

Dependencies: pydantic_settings
System role: Credentials and endpoints for the managed video/chat provider
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from talentiq.configs.base import BaseSettings


class StreamSettings(BaseSettings):
    """Stream API credentials shared by the chat SDK and the video REST client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STREAM_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(default=None, description="Stream API key")
    api_secret: str | None = Field(default=None, description="Stream API secret")
    video_base_url: str = Field(
        default="https://video.stream-io-api.com/api/v2",
        description="Stream Video REST base URL",
    )
    call_type: str = Field(default="default", description="Video call type")
    channel_type: str = Field(default="messaging", description="Chat channel type")
    timeout: float = Field(default=10.0, description="Outbound request timeout in seconds")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_secret)
