"""Client configuration and settings management."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_ENDPOINT = "https://api.routexl.nl/"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTEXL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_endpoint: str = Field(
        default=DEFAULT_API_ENDPOINT,
        description="Base URL of the RouteXL API (e.g., https://api.routexl.nl/).",
    )
    username: Optional[str] = Field(default=None, description="RouteXL account username.")
    password: Optional[str] = Field(default=None, description="RouteXL account password.")
    timeout: float = Field(
        default=30.0,
        ge=0.0,
        description="Seconds to wait for a RouteXL response before giving up.",
    )
    connect_timeout: float = Field(default=10.0, ge=0.0)
    status_echo: str = Field(
        default="creacoon",
        description="Account tag sent to the status endpoint; the API echoes it back.",
    )

    @field_validator("api_endpoint", mode="before")
    @classmethod
    def _ensure_trailing_slash(cls, value: Any) -> str:
        endpoint = str(value).strip()
        if not endpoint:
            return DEFAULT_API_ENDPOINT
        return endpoint if endpoint.endswith("/") else f"{endpoint}/"


settings = Settings()
