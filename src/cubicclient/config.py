"""Client options and optional environment-driven settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

DEFAULT_TIMEOUT_MS = 90_000
DEFAULT_HEADERS = {"Content-Type": "application/json"}


class ClientOptions(BaseModel):
    """Connection profile for one client instance. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    max_retries: int = 0
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("baseUrl is required")
        return v

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def retry_enabled(self) -> bool:
        return self.max_retries > 0

    @classmethod
    def build(
        cls,
        base_url: str | None,
        timeout_ms: int | None = None,
        max_retries: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> ClientOptions:
        """Validate raw options, raising ``ConfigError`` on any problem."""
        if not base_url:
            raise ConfigError("baseUrl is required")
        try:
            return cls(
                base_url=base_url,
                timeout_ms=DEFAULT_TIMEOUT_MS if timeout_ms is None else timeout_ms,
                max_retries=max_retries or 0,
                headers=headers or {},
            )
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first.get("loc", ()))
            raise ConfigError(f"Invalid client option {field}: {first.get('msg')}") from e

    def request_headers(self) -> dict[str, str]:
        return {**DEFAULT_HEADERS, **self.headers}


class ClientSettings(BaseSettings):
    """Client options read from the environment (or a ``.env`` file)."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    base_url: str | None = Field(default=None, alias="CUBIC_BASE_URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, alias="CUBIC_TIMEOUT_MS")
    max_retries: int = Field(default=0, alias="CUBIC_MAX_RETRIES")

    def to_options(self) -> ClientOptions:
        return ClientOptions.build(
            base_url=self.base_url,
            timeout_ms=self.timeout_ms,
            max_retries=self.max_retries,
        )


@lru_cache
def get_settings() -> ClientSettings:
    """Return memoized settings so repeated lookups share one instance."""

    return ClientSettings()  # type: ignore[call-arg]
