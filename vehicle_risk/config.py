"""Configuration loader for the vehicle risk assessor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from vehicle_risk.core.risk import REFERENCE_YEAR

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
SETTINGS_PATH: Path = DATA_DIR / "settings.yaml"

_LOG_FORMATS: tuple[str, ...] = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """Validated session settings.

    Attributes:
        min_year: Oldest model year accepted at the year prompt.
        max_year: Newest model year accepted at the year prompt.
        log_level: Root logger level name (e.g. ``"WARNING"``).
        log_format: ``"text"`` or ``"json"``.
    """

    min_year: int = 1970
    max_year: int = 2024
    log_level: str = "WARNING"
    log_format: str = "text"

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must be <= max_year ({self.max_year})."
            )
        # Later model years would give a negative age multiplier.
        if self.max_year > REFERENCE_YEAR:
            raise ValueError(
                f"max_year ({self.max_year}) must be <= {REFERENCE_YEAR}."
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level '{self.log_level}'.")
        if self.log_format not in _LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {_LOG_FORMATS}, got '{self.log_format}'."
            )


def _require(section: dict, section_name: str, field: str, kind: type) -> object:
    if field not in section:
        raise ValueError(f"Section '{section_name}' is missing required field '{field}'")
    value = section[field]
    # bool is an int subclass; a year of ``true`` is a typo, not a year.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(
            f"'{section_name}.{field}' must be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def load_settings(path: Path | None = None) -> Settings:
    """Load session settings from a YAML file.

    Args:
        path: Optional override for the settings file path.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If a section or field is missing, mistyped or out of range.
    """
    settings_path = path or SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    for name in ("session", "logging"):
        if not isinstance(data.get(name), dict):
            raise ValueError(f"Settings file is missing section '{name}'")

    session: dict = data["session"]
    log_cfg: dict = data["logging"]

    return Settings(
        min_year=_require(session, "session", "min_year", int),
        max_year=_require(session, "session", "max_year", int),
        log_level=_require(log_cfg, "logging", "level", str),
        log_format=_require(log_cfg, "logging", "format", str),
    )
