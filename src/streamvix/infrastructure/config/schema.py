"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _blank_to_none(value: Any) -> Any:
    """Treat empty/whitespace-only strings (e.g. ``MFP_URL=``) as unset."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging/vixsrc/tmdb/mediaflow).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="streamvix", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds. None disables the timeout.",
    )
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/131.0.0.0 Safari/537.36"
        ),
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Streaming site (YAML section: vixsrc.*)
    vixsrc_origin: str = Field(
        default="https://vixsrc.to",
        validation_alias=AliasChoices(
            "vixsrc_origin",
            AliasPath("vixsrc", "origin"),
        ),
        description="Scheme + host of the streaming site.",
    )
    vixsrc_lang: str = Field(
        default="it",
        validation_alias=AliasChoices(
            "vixsrc_lang",
            AliasPath("vixsrc", "lang"),
        ),
        description="Language passed to the catalog list API.",
    )

    # TMDB (YAML section: tmdb.*)
    tmdb_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "tmdb_api_key",
            AliasPath("tmdb", "api_key"),
        ),
        description="TMDB API key. Without it no title can be resolved.",
    )
    tmdb_language: str = Field(
        default="it",
        validation_alias=AliasChoices(
            "tmdb_language",
            AliasPath("tmdb", "language"),
        ),
        description="Language for TMDB detail lookups (stream titles).",
    )

    # MediaFlow proxy (YAML section: mediaflow.*)
    mediaflow_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "mediaflow_url",
            AliasPath("mediaflow", "url"),
        ),
        description="MediaFlow Proxy base URL. Enables proxy mode with a password.",
    )
    mediaflow_password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "mediaflow_password",
            AliasPath("mediaflow", "password"),
        ),
        description="MediaFlow Proxy api_password.",
    )

    @field_validator(
        "tmdb_api_key", "mediaflow_url", "mediaflow_password", mode="before"
    )
    @classmethod
    def _validate_optional_secrets(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("vixsrc_origin", "mediaflow_url")
    @classmethod
    def _strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else v

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    @property
    def proxy_enabled(self) -> bool:
        """Proxy mode needs both the base URL and the password."""
        return bool(self.mediaflow_url and self.mediaflow_password)


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read STREAMVIX_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - STREAMVIX_LOG_LEVEL
    - STREAMVIX_VIXSRC_ORIGIN
    - STREAMVIX_TMDB_API_KEY   (or TMDB_API_KEY)
    - STREAMVIX_MEDIAFLOW_URL  (or MFP_URL)
    - STREAMVIX_MEDIAFLOW_PASSWORD (or MFP_PSW)
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAMVIX_",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    vixsrc_origin: Optional[str] = None
    vixsrc_lang: Optional[str] = None

    # Aliases bypass env_prefix, so the prefixed name is listed explicitly.
    tmdb_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("streamvix_tmdb_api_key", "tmdb_api_key"),
    )
    tmdb_language: Optional[str] = None

    mediaflow_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("streamvix_mediaflow_url", "mfp_url"),
    )
    mediaflow_password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("streamvix_mediaflow_password", "mfp_psw"),
    )

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
