"""
Client Configuration
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FunctionsClientConfig(BaseSettings):
    """
    Ambient settings for the functions client.

    Only clients created by the library itself pick up the transport
    settings; an injected httpx client keeps its own.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    VERIFY_SSL: bool = Field(default=True, description="Whether to verify SSL certificates")
    REQUEST_TIMEOUT: Optional[float] = Field(
        default=None, description="Transport timeout in seconds (None disables it)"
    )

    # ===== Gateway =====
    RELAY_ERROR_HEADER: str = Field(
        default="x-relay-error",
        min_length=1,
        description="Response header the relay sets when the function could not be executed",
    )

    # ===== CLI Defaults =====
    FUNCTIONS_URL: str = Field(default="", description="Base URL of the functions gateway")
    FUNCTIONS_AUTH: str = Field(default="", description="Bearer credential for the gateway")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )
