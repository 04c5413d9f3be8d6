"""Configuration for Revision Tracker.

Settings live in ``<data_dir>/config.toml``. Environment variables take
precedence over the file:

    REVTRACK_HOME       data directory (default ``~/.revision-tracker``)
    REVTRACK_STORAGE    storage backend, ``memory`` or ``sqlite``
    REVTRACK_LOG_LEVEL  logging level name
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.toml"
DEFAULT_DATA_DIR = Path.home() / ".revision-tracker"

_VALID_BACKENDS: tuple[str, ...] = ("memory", "sqlite")
_VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_PAST_YEARS_LIMIT = 1000


def get_data_dir() -> Path:
    """Resolve the data directory from ``REVTRACK_HOME`` or the default."""
    env_dir = os.environ.get("REVTRACK_HOME")
    if env_dir:
        return Path(env_dir).expanduser()
    return DEFAULT_DATA_DIR


@dataclass(frozen=True)
class TrackerConfig:
    """Application settings.

    Attributes:
        data_dir: Directory holding config.toml and the SQLite database.
        storage_backend: "memory" (lost on exit) or "sqlite".
        db_filename: SQLite file name inside data_dir.
        max_past_years: How far back a start date may lie.
        host: Bind address for ``revtrack serve``.
        port: Bind port for ``revtrack serve``.
        log_level: Root logging level.
    """

    data_dir: Path = field(default_factory=get_data_dir)
    storage_backend: str = "sqlite"
    db_filename: str = "agenda.db"
    max_past_years: int = 10
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.storage_backend not in _VALID_BACKENDS:
            raise ValueError(
                f"storage_backend must be one of {_VALID_BACKENDS}, got '{self.storage_backend}'"
            )
        if not 0 <= self.max_past_years <= MAX_PAST_YEARS_LIMIT:
            raise ValueError(
                f"max_past_years must be in [0, {MAX_PAST_YEARS_LIMIT}], "
                f"got {self.max_past_years}"
            )
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in [1, 65535], got {self.port}")
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {_VALID_LOG_LEVELS}, got '{self.log_level}'"
            )

    @property
    def config_path(self) -> Path:
        return self.data_dir / CONFIG_FILENAME

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename

    def to_dict(self) -> dict[str, Any]:
        return {
            "storage_backend": self.storage_backend,
            "db_filename": self.db_filename,
            "max_past_years": self.max_past_years,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], data_dir: Path | None = None) -> TrackerConfig:
        defaults = cls(data_dir=data_dir or get_data_dir())
        try:
            return replace(
                defaults,
                storage_backend=str(data.get("storage_backend", defaults.storage_backend)),
                db_filename=str(data.get("db_filename", defaults.db_filename)),
                max_past_years=int(data.get("max_past_years", defaults.max_past_years)),
                host=str(data.get("host", defaults.host)),
                port=int(data.get("port", defaults.port)),
                log_level=str(data.get("log_level", defaults.log_level)),
            )
        except (ValueError, TypeError) as e:
            logger.warning("Invalid config values, using defaults: %s", e)
            return defaults

    @classmethod
    def load(cls, data_dir: Path | None = None) -> TrackerConfig:
        """Load config.toml (if present) and apply environment overrides."""
        data_dir = data_dir or get_data_dir()
        config_path = data_dir / CONFIG_FILENAME

        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                with config_path.open("rb") as f:
                    data = tomllib.load(f).get("tracker", {})
            except (OSError, tomllib.TOMLDecodeError):
                logger.warning("Could not read %s, using defaults", config_path, exc_info=True)

        if backend := os.environ.get("REVTRACK_STORAGE"):
            data["storage_backend"] = backend
        if level := os.environ.get("REVTRACK_LOG_LEVEL"):
            data["log_level"] = level

        return cls.from_dict(data, data_dir=data_dir)

    def save(self) -> Path:
        """Write config.toml into the data directory and return its path."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        lines = ["[tracker]"]
        for key, value in self.to_dict().items():
            if isinstance(value, str):
                escaped = value.replace("\\", "\\\\").replace('"', '\\"')
                lines.append(f'{key} = "{escaped}"')
            else:
                lines.append(f"{key} = {value}")
        self.config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return self.config_path


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for CLI and server entry points."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
