"""hateblo configuration.

Application settings loaded from environment variables with HATEBLO_ prefix.

Example:
    >>> from hateblo.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.auth_scheme
    'wsse'
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with HATEBLO_ prefix.

    Example:
        >>> from hateblo.core.config import Settings
        >>> s = Settings(hatena_id="alice", blog_id="alice.hatenablog.com")
        >>> s.base_url
        'https://blog.hatena.ne.jp'
        >>> s.min_interval
        1.0
    """

    model_config = SettingsConfigDict(
        env_prefix="HATEBLO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Blog
    hatena_id: str | None = Field(default=None, description="Hatena ID owning the blog")
    blog_id: str | None = Field(default=None, description="Blog ID, e.g. 'alice.hatenablog.com'")
    base_url: str = Field(default="https://blog.hatena.ne.jp", description="AtomPub root URL")

    # Authentication
    auth_scheme: Literal["basic", "wsse", "oauth"] = Field(default="wsse")
    api_key: str | None = Field(default=None, description="AtomPub API key (basic/wsse)")
    consumer_key: str | None = Field(default=None)
    consumer_secret: str | None = Field(default=None)
    access_token: str | None = Field(default=None)
    access_token_secret: str | None = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # HTTP
    min_interval: float = Field(default=1.0, ge=0.0, description="Seconds between page fetches")
    request_timeout: float = Field(default=30.0, ge=1.0)
    user_agent: str = Field(default="hateblo/0.1.0")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from hateblo.core.config import get_settings
        >>> s = get_settings(min_interval=0.5)
        >>> s.min_interval
        0.5
    """
    return Settings(**overrides)
