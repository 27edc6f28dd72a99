"""Environment-based configuration using pydantic-settings.

This module defines the Settings class that loads configuration from
environment variables and an optional .env file, and merges it into the
runtime Config model loaded from YAML.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import Config, ConnectionConfig


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="PARAMPROBE_", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Application log level")
    log_format: str = Field(default="text", description="Log format: json or text")

    # Connection
    host: Optional[str] = None
    port: Optional[int] = None
    auth_token: Optional[str] = None
    timeout: Optional[float] = None

    # Offline inspection
    snapshot: Optional[str] = None

    def to_runtime_config(self, base: Optional[Config] = None) -> Config:
        """Merge environment settings into a runtime Config object.

        If a base Config is provided (e.g., loaded from YAML), environment
        variables take precedence over it.
        """
        if base is None:
            base = Config()

        overrides = {
            key: value
            for key, value in {
                "host": self.host,
                "port": self.port,
                "auth_token": self.auth_token,
                "timeout": self.timeout,
            }.items()
            if value is not None
        }
        if overrides:
            merged = base.connection.model_dump()
            merged.update(overrides)
            base.connection = ConnectionConfig(**merged)

        if self.snapshot:
            base.snapshot = self.snapshot

        return base
