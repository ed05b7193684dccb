from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATA_DIR = Path("~/.local/share/docreader")
DEFAULT_ASSETS_DIR = BASE_DIR.parent / "assets"
DEFAULT_RESOURCE_PACKAGE = "docreader.resources"
DEFAULT_PAGE_SIZE = 120


@dataclass(frozen=True)
class Settings:
    """Asset locations and pagination defaults bundled in a single object."""

    data_dir: Optional[Path]
    assets_dir: Optional[Path]
    resource_package: str = DEFAULT_RESOURCE_PACKAGE
    page_size: int = DEFAULT_PAGE_SIZE
    log_dir: Optional[Path] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache configuration from environment variables.

    Raises:
        ValueError: if DOCREADER_PAGE_SIZE is set but is not an integer.
    """
    load_dotenv()

    raw_page_size = os.getenv("DOCREADER_PAGE_SIZE")
    if raw_page_size is None or not raw_page_size.strip():
        page_size = DEFAULT_PAGE_SIZE
    else:
        try:
            page_size = int(raw_page_size)
        except ValueError:
            raise ValueError(
                f"DOCREADER_PAGE_SIZE must be an integer, got {raw_page_size!r}"
            ) from None

    data_dir = Path(os.getenv("DOCREADER_DATA_DIR", DEFAULT_DATA_DIR)).expanduser()
    assets_dir = Path(os.getenv("DOCREADER_ASSETS_DIR", DEFAULT_ASSETS_DIR)).expanduser()
    resource_package = os.getenv("DOCREADER_RESOURCE_PACKAGE") or DEFAULT_RESOURCE_PACKAGE
    raw_log_dir = os.getenv("DOCREADER_LOG_DIR")
    log_dir = Path(raw_log_dir).expanduser() if raw_log_dir else None

    return Settings(
        data_dir=data_dir,
        assets_dir=assets_dir,
        resource_package=resource_package,
        page_size=page_size,
        log_dir=log_dir,
    )


__all__ = ["Settings", "get_settings"]
