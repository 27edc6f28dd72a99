import os
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .paths import default_user_config_path


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


class ConnectionConfig(BaseModel):
    host: str = Field(default="localhost", description="Device host")
    port: int = Field(default=4101, description="Device API port")
    scheme: Scheme = Field(default=Scheme.HTTP)
    base_path: str = Field(default="/api", description="Path prefix of the device API")
    auth_token: Optional[str] = Field(default=None, description="Bearer token sent to the device")
    timeout: float = Field(default=10.0, description="Per-request timeout in seconds")
    verify_tls: bool = True

    @field_validator("port")
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("timeout")
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @field_validator("base_path")
    def normalize_base_path(cls, v):
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    @property
    def base_url(self) -> str:
        return f"{self.scheme.value}://{self.host}:{self.port}{self.base_path}"


class Config(BaseModel):
    """Main configuration for paramprobe."""

    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)

    # When set, parameters are read from this file instead of a live device
    snapshot: Optional[str] = None

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML file."""
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration using precedence: explicit path -> env var -> user file -> cwd file -> defaults.

        If `path` not provided, uses PARAMPROBE_CONFIG if set.
        """
        env_path = os.getenv("PARAMPROBE_CONFIG")
        explicit = path or (Path(env_path) if env_path else None)
        if explicit is not None:
            return cls.from_file(Path(explicit))
        user_cfg = default_user_config_path()
        if user_cfg.exists():
            return cls.from_file(user_cfg)
        legacy = Path("paramprobe.yaml")
        if legacy.exists():
            return cls.from_file(legacy)
        return cls()

