"""
Remote code execution configuration settings.

Dependencies: pydantic_settings
System role: Piston execution API endpoint configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from talentiq.configs.base import BaseSettings


class PistonSettings(BaseSettings):
    """Piston public execution API settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PISTON_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_url: str = Field(
        default="https://emkc.org/api/v2/piston",
        description="Piston API base URL",
    )
    timeout: float = Field(default=10.0, description="Execution request timeout in seconds")
