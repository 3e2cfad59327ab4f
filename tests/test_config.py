"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from msg_catalog.core.config import load_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.logging.level == "WARNING"
    assert settings.catalog.seed_defaults is True
    assert settings.shell.keyword_separator == ","
    assert settings.shell.max_attachments == 20


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "MSG_CATALOG_CATALOG__SEED_DEFAULTS=false\n"
        "MSG_CATALOG_SHELL__KEYWORD_SEPARATOR=;\n"
        "UNRELATED_KEY=ignored\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.catalog.seed_defaults is False
    assert settings.shell.keyword_separator == ";"


def test_environment_takes_precedence_over_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / "test.env"
    env_file.write_text("MSG_CATALOG_LOGGING__LEVEL=INFO\n", encoding="utf-8")
    monkeypatch.setenv("MSG_CATALOG_LOGGING__LEVEL", "DEBUG")

    settings = load_app_settings(env_file=env_file)
    assert settings.logging.level == "DEBUG"


def test_missing_env_file_falls_back_to_defaults(tmp_path: Path) -> None:
    settings = load_app_settings(
        env_file=tmp_path / "absent.env", include_environment=False
    )
    assert settings.catalog.seed_defaults is True
