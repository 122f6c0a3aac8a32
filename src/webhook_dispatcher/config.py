"""Configuration management using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEBHOOK_DISPATCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Required settings
    route_file: Path = Field(
        ...,
        description="Routing table file (.toml, .json, .yaml or .yml)",
    )

    # Optional settings
    webhook_secret: str | None = Field(
        default=None,
        description="Shared secret for X-Hub-Signature-256 checks. Unset disables verification.",
    )
    debug: bool = Field(
        default=False,
        description="Log downstream responses and force DEBUG logging",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    forward_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for the outbound forward",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")

    @property
    def signature_required(self) -> bool:
        """Whether inbound requests must carry a valid signature."""
        return bool(self.webhook_secret)

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
