"""Shared fixtures for the docreader tests."""

import logging

import pytest

from docreader.config import Settings, get_settings
from docreader.services import AssetResolver
from docreader.utils import files


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Drop cached settings, the default resolver and logging handlers between tests."""
    for var in (
        "DOCREADER_DATA_DIR",
        "DOCREADER_ASSETS_DIR",
        "DOCREADER_RESOURCE_PACKAGE",
        "DOCREADER_PAGE_SIZE",
        "DOCREADER_LOG_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(files, "_default_resolver", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("docreader")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def assets_dir(tmp_path):
    path = tmp_path / "assets"
    path.mkdir()
    return path


@pytest.fixture
def settings(data_dir, assets_dir):
    return Settings(data_dir=data_dir, assets_dir=assets_dir)


@pytest.fixture
def resolver(settings):
    return AssetResolver.from_settings(settings)
