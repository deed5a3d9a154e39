"""Tests for the settings loader."""

from pathlib import Path

import pytest

from vehicle_risk.config import Settings, load_settings

_VALID = """\
session:
  min_year: 1980
  max_year: 2020
logging:
  level: DEBUG
  format: json
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_settings_load() -> None:
    """The shipped settings accept model years 1970-2024."""
    settings = load_settings()
    assert settings.min_year == 1970
    assert settings.max_year == 2024
    assert settings.log_format in ("text", "json")


def test_override_path(tmp_path: Path) -> None:
    settings = load_settings(_write(tmp_path, _VALID))
    assert settings == Settings(
        min_year=1980, max_year=2020, log_level="DEBUG", log_format="json"
    )


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.yaml")


def test_missing_section(tmp_path: Path) -> None:
    path = _write(tmp_path, "session:\n  min_year: 1970\n  max_year: 2024\n")
    with pytest.raises(ValueError, match="logging"):
        load_settings(path)


def test_missing_field(tmp_path: Path) -> None:
    path = _write(tmp_path, _VALID.replace("  max_year: 2020\n", ""))
    with pytest.raises(ValueError, match="max_year"):
        load_settings(path)


def test_wrong_field_type(tmp_path: Path) -> None:
    path = _write(tmp_path, _VALID.replace("1980", "'1980'"))
    with pytest.raises(ValueError, match="min_year"):
        load_settings(path)


def test_inverted_year_range(tmp_path: Path) -> None:
    path = _write(tmp_path, _VALID.replace("1980", "2021"))
    with pytest.raises(ValueError):
        load_settings(path)


def test_unknown_log_settings() -> None:
    with pytest.raises(ValueError):
        Settings(log_level="CHATTY")
    with pytest.raises(ValueError):
        Settings(log_format="xml")


def test_max_year_capped_at_reference_year(tmp_path: Path) -> None:
    """Years after 2024 would produce negative risk scores."""
    assert Settings(max_year=2024).max_year == 2024
    with pytest.raises(ValueError, match="max_year"):
        Settings(max_year=2050)
    path = _write(tmp_path, _VALID.replace("2020", "2050"))
    with pytest.raises(ValueError, match="max_year"):
        load_settings(path)
