from __future__ import annotations

import math
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from osmgeom.exceptions import ConfigurationError
from osmgeom.geom.contract import DEFAULT_SRID
from osmgeom.logging_config import setup_logging

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class GeometrySettings(BaseModel):
    srid: int = Field(DEFAULT_SRID, ge=0)
    # Upper bound on edge length handed to segmentize; None disables splitting
    segment_max_length: float | None = Field(default=None, gt=0.0)

    @field_validator("segment_max_length")
    @classmethod
    def _finite_length(cls, value: float | None) -> float | None:
        if value is not None and not math.isfinite(value):
            raise ValueError("segment_max_length must be finite")
        return value


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    log_file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        if value is None:
            return "INFO"
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class Settings(BaseModel):
    geometry: GeometrySettings = Field(default_factory=GeometrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.
        
        Args:
            path: Optional path to configuration file. If not provided, uses
                OSMGEOM_CONFIG environment variable or defaults to config/default.yaml.
        
        Returns:
            Settings instance with loaded configuration.
        
        Raises:
            ConfigurationError: If the file does not exist or its content is invalid.
        """
        config_path = path or Path(os.getenv("OSMGEOM_CONFIG", "config/default.yaml"))
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)},
            )
        try:
            with config_path.open("r", encoding="utf-8") as fp:
                payload = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {exc}", {"path": str(config_path)}) from exc
        if not isinstance(payload, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {config_path}", {"path": str(config_path)})
        try:
            return cls(**payload)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}", {"path": str(config_path)}) from exc

    def configure_logging(self) -> None:
        setup_logging(
            level=self.logging.level,
            json_format=self.logging.json_format,
            log_file=self.logging.log_file,
        )


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "GeometrySettings",
    "LoggingSettings",
    "get_settings",
]
