"""Application settings using pydantic-settings."""

from functools import cache
from typing import Annotated, Literal

from ondas import DEFAULT_MIRRORS, SearchConfig
from ondas.config import DEFAULT_USER_AGENT
from pydantic import BeforeValidator, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ONDAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    reload: bool = Field(default=False, description="Enable auto-reload")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default="INFO", description="Log level")

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # Radio directory settings
    mirrors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIRRORS),
        description="Radio directory mirrors, in priority order",
    )
    request_timeout: float = Field(
        default=9.0, gt=0, description="Per-request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent sent to mirrors"
    )
    default_limit: int = Field(
        default=80, ge=1, description="Stations returned when no limit is given"
    )
    max_errors: int = Field(
        default=8, ge=0, description="Diagnostics kept per search result"
    )

    @field_validator("mirrors")
    @classmethod
    def validate_mirrors(cls, v: list[str]) -> list[str]:
        """Require at least one http(s) mirror; strip trailing slashes."""
        mirrors = [m.strip().rstrip("/") for m in v if m.strip()]
        if not mirrors:
            raise ValueError("At least one mirror is required")
        for mirror in mirrors:
            if not mirror.startswith(("http://", "https://")):
                raise ValueError(f"Invalid mirror URL: {mirror}")
        return mirrors

    def search_config(self) -> SearchConfig:
        """Build the library search configuration from these settings."""
        return SearchConfig(
            mirrors=tuple(self.mirrors),
            timeout=self.request_timeout,
            user_agent=self.user_agent,
            default_limit=self.default_limit,
            max_errors=self.max_errors,
        )


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
