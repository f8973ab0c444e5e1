"""Configuration loading utilities for findcc."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import Algorithm
from .paths import runtime_config_dir
from .scanner.engine import DEFAULT_CHUNK_SIZE, DEFAULT_WINDOW_LENGTH, ScannerConfig


class ScanSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    window_length: int = Field(
        default=DEFAULT_WINDOW_LENGTH,
        ge=1,
        description="Length of number to find, including the check digit",
    )
    algorithm: Algorithm = Field(default=Algorithm.LUHN, description="Checksum: luhn|mod10")
    quiet: bool = Field(default=False, description="Suppress the column header")
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1, description="Bytes requested per read")

    def to_scanner_config(self) -> ScannerConfig:
        return ScannerConfig(
            window_length=self.window_length,
            algorithm=self.algorithm,
            chunk_size=self.chunk_size,
        )


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = Field(default="WARNING", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    scan: ScanSettings = Field(default_factory=ScanSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".findcc" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ValueError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ScanSettings",
    "DEFAULT_CONFIG",
    "config_search_paths",
    "load_config",
    "dump_default_config",
]
