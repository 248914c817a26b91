# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Every value the engine needs (disks, base path, cache-busting token, cache map
location) is resolved here once, before a manager is built. Environment
variables use the ``BASSET_`` prefix, e.g. ``BASSET_CACHEBUSTING=v3``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from basset.version import __version__


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BASSET_",
        extra="ignore",
    )

    # === Repository ===
    root: Path = Field(default_factory=Path.cwd)

    # === Asset disk ===
    disk: Literal["local", "s3"] = "local"
    disk_root: Path = Path("storage/app/public")
    disk_url: str = "/storage"
    path: str = "basset"
    cachebusting: str = ""

    # === S3 disk (disk=s3) ===
    s3_bucket: str = ""
    s3_prefix: str = ""
    s3_region: str = ""
    s3_endpoint_url: str = ""
    s3_public_url: str = ""

    # === Cache map ===
    cache_map: bool = True
    cache_map_root: Path = Path("storage/app")
    cache_path: str = "basset"

    # === HTTP ===
    http_timeout: float = 30.0
    http_user_agent: str = f"basset/{__version__}"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:  # noqa: N805
        """Base path is relative to the disk root, never absolute."""
        v = v.strip().replace("\\", "/").strip("/")
        if not v:
            raise ValueError("path must not be empty")
        return v

    @field_validator("http_timeout")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:  # noqa: N805
        if v <= 0:
            raise ValueError("http_timeout must be > 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.disk == "s3" and not self.s3_bucket:
            errors.append("BASSET_S3_BUCKET must be set when BASSET_DISK=s3")

        if self.disk == "s3" and not self.s3_public_url and not self.s3_region:
            errors.append(
                "BASSET_DISK=s3 requires BASSET_S3_PUBLIC_URL or BASSET_S3_REGION "
                "to build public URLs"
            )

        if self.cache_map and not self.cache_path.strip("/\\"):
            errors.append("BASSET_CACHE_PATH must not be empty when the cache map is on")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def resolved_root(self) -> Path:
        """Absolute repository root."""
        return self.root.expanduser().resolve()

    def resolve_dir(self, directory: Path) -> Path:
        """Resolve a configured directory against the repository root."""
        directory = directory.expanduser()
        if directory.is_absolute():
            return directory
        return self.resolved_root / directory


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or one-off commands).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
