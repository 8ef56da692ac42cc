"""Configuration management for the virtual filesystem."""

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


load_dotenv()


DEFAULT_BACKENDS = ["file", "mem"]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Config(BaseModel):
    """Library configuration."""

    # Backend Settings
    local_root: Path = Field(default=Path("/"))
    backends: list[str] = Field(default_factory=lambda: DEFAULT_BACKENDS.copy())

    # Logging Settings
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level names a stdlib logging level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        backends = DEFAULT_BACKENDS.copy()
        backends_env = os.getenv("VFS_BACKENDS")
        if backends_env:
            backends = [entry.strip() for entry in backends_env.split(",") if entry.strip()]

        root_env = os.getenv("VFS_LOCAL_ROOT")

        return cls(
            local_root=Path(root_env) if root_env else Path("/"),
            backends=backends,
            log_level=os.getenv("VFS_LOG_LEVEL", "WARNING"),
        )
