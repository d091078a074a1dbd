"""Configuration settings for MBTA subway info."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api-v3.mbta.com"


class Settings(BaseModel):
    """Runtime settings, read from the environment or a .env file."""

    api_key: str | None = Field(None, description="MBTA V3 API key")
    base_url: str = Field(DEFAULT_BASE_URL, description="MBTA V3 API root URL")
    timeout: int = Field(30, ge=1, description="Request timeout in seconds")
    max_workers: int = Field(
        8, ge=1, description="Concurrent stop requests when building the network"
    )
    max_attempts: int = Field(
        3, ge=1, description="Attempts per request on connection errors"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables (and .env if present)."""
        load_dotenv()

        values: dict[str, str] = {}
        for field_name, env_name in (
            ("api_key", "MBTA_API_KEY"),
            ("base_url", "MBTA_API_URL"),
            ("timeout", "MBTA_TIMEOUT"),
            ("max_workers", "MBTA_MAX_WORKERS"),
            ("max_attempts", "MBTA_MAX_ATTEMPTS"),
        ):
            value = os.getenv(env_name)
            if value:
                values[field_name] = value

        return cls.model_validate(values)

    def masked_api_key(self) -> str:
        """API key safe for display."""
        if not self.api_key:
            return "Not configured"
        return f"{self.api_key[:4]}…" if len(self.api_key) > 4 else "****"
