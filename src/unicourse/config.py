"""Configuration loading for UniCourse."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from unicourse.registry import Limits

CONFIG_FILENAME = "unicourse.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class LimitsConfig:
    """Registry limits."""

    course_capacity: int = 3
    max_enrollment: int = 3
    max_load: int = 2

    def to_limits(self) -> Limits:
        return Limits(
            course_capacity=self.course_capacity,
            max_enrollment=self.max_enrollment,
            max_load=self.max_load,
        )


@dataclass
class SeedConfig:
    """Seed data settings.

    When `file` is None the built-in seed data is used.
    """

    enabled: bool = True
    file: Path | None = None


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"
    dir: Path | None = None


@dataclass
class UniCourseConfig:
    """UniCourse configuration."""

    limits: LimitsConfig = field(default_factory=LimitsConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> UniCourseConfig:
        """Create config from dictionary.

        Relative paths are resolved against root_path.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a section or value is invalid.
        """
        limits_data = _section(data, "limits")
        limits = LimitsConfig(
            course_capacity=_positive_int(limits_data, "course_capacity", 3),
            max_enrollment=_positive_int(limits_data, "max_enrollment", 3),
            max_load=_positive_int(limits_data, "max_load", 2),
        )

        seed_data = _section(data, "seed")
        seed_file = seed_data.get("file")
        seed = SeedConfig(
            enabled=_bool(seed_data, "enabled", True),
            file=root_path / seed_file if seed_file else None,
        )

        logging_data = _section(data, "logging")
        log_dir = logging_data.get("dir")
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", "WARNING")).upper(),
            dir=root_path / log_dir if log_dir else None,
        )

        return cls(limits=limits, seed=seed, logging=logging_config, root_path=root_path)

    def apply_env(self) -> UniCourseConfig:
        """Apply UNICOURSE_LOG_LEVEL and UNICOURSE_LOG_DIR overrides.

        Returns:
            self, for chaining.
        """
        level = os.environ.get("UNICOURSE_LOG_LEVEL")
        if level:
            self.logging.level = level.upper()
        log_dir = os.environ.get("UNICOURSE_LOG_DIR")
        if log_dir:
            self.logging.dir = Path(log_dir)
        return self


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def _positive_int(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def load_config(config_path: Path | str | None = None) -> UniCourseConfig:
    """Load UniCourse configuration from a YAML file.

    Args:
        config_path: Path to unicourse.yaml. None gives the defaults.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    if config_path is None:
        return UniCourseConfig(root_path=Path.cwd())

    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return UniCourseConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find unicourse.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to unicourse.yaml, or None if there is none.
    """
    if start_path is None:
        start_path = Path.cwd()
    else:
        start_path = Path(start_path)

    current = start_path.resolve()

    while current != current.parent:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path
        current = current.parent

    # Check root
    config_path = current / CONFIG_FILENAME
    if config_path.exists():
        return config_path

    return None
