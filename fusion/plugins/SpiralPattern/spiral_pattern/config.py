"""
Title         : config.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/config.py

Description
----------------------------------------------------------------------------
User configuration for the SpiralPattern add-in, stored as JSON next to the
add-in. Missing files fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .constants import Constants
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "spiral_pattern.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# --- Configuration --------------------------------------------------------
@dataclass(frozen=True)
class SpiralPatternConfig:
    """Dialog defaults and logging options.

    Length and angle defaults are unit expressions evaluated by the host.
    """

    default_count: int = 5
    default_height: str = "1 m"
    default_distance: str = "50 mm"
    default_angle: str = "20 deg"
    log_level: str = "INFO"
    log_file: str | None = None

    def __post_init__(self) -> None:
        count = self.default_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise ConfigurationError("default_count must be an integer.", context={"default_count": count})
        if not Constants.MIN_COUNT <= count <= Constants.MAX_COUNT:
            raise ConfigurationError(
                f"default_count must be between {Constants.MIN_COUNT} and {Constants.MAX_COUNT}.",
                context={"default_count": count},
            )
        for name in ("default_height", "default_distance", "default_angle"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{name} must be a non-empty expression.", context={name: value})
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}", context={"log_level": self.log_level})
        object.__setattr__(self, "log_level", self.log_level.upper())
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigurationError("log_file must be a path string.", context={"log_file": self.log_file})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SpiralPatternConfig:
        """Build a config from a mapping, ignoring unknown keys."""
        known = {field_info.name for field_info in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})


# --- Loading and Saving ---------------------------------------------------
def default_config_path(addin_dir: str | Path) -> Path:
    return Path(addin_dir) / CONFIG_FILENAME


def load_config(path: str | Path | None) -> SpiralPatternConfig:
    """Load configuration from `path`, returning defaults when it does not exist.

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    if path is None:
        return SpiralPatternConfig()

    config_path = Path(path)
    if not config_path.exists():
        logger.debug("No configuration at %s, using defaults", config_path)
        return SpiralPatternConfig()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Could not read configuration: {exc}", context={"path": str(config_path)}) from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration root must be a JSON object.", context={"path": str(config_path)})

    try:
        config = SpiralPatternConfig.from_mapping(data)
    except ConfigurationError as exc:
        exc.context = {"path": str(config_path), "detail": exc.context}
        raise
    logger.info("Loaded configuration from %s", config_path)
    return config


def save_config(config: SpiralPatternConfig, path: str | Path) -> None:
    """Write `config` as JSON."""
    try:
        Path(path).write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Could not write configuration: {exc}", context={"path": str(path)}) from exc
