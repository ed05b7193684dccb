"""Tests for environment-driven settings."""

import pytest

from docreader.config import get_settings
from docreader.config.settings import DEFAULT_PAGE_SIZE, DEFAULT_RESOURCE_PACKAGE


def test_defaults():
    settings = get_settings()

    assert settings.page_size == DEFAULT_PAGE_SIZE
    assert settings.resource_package == DEFAULT_RESOURCE_PACKAGE
    assert settings.log_dir is None
    assert settings.data_dir is not None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCREADER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DOCREADER_ASSETS_DIR", str(tmp_path / "assets"))
    monkeypatch.setenv("DOCREADER_PAGE_SIZE", "40")
    monkeypatch.setenv("DOCREADER_LOG_DIR", str(tmp_path / "logs"))

    settings = get_settings()

    assert settings.data_dir == tmp_path / "data"
    assert settings.assets_dir == tmp_path / "assets"
    assert settings.page_size == 40
    assert settings.log_dir == tmp_path / "logs"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_invalid_page_size(monkeypatch):
    monkeypatch.setenv("DOCREADER_PAGE_SIZE", "many")

    with pytest.raises(ValueError, match="DOCREADER_PAGE_SIZE"):
        get_settings()
