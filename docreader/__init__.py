"""
docreader package bootstrap.

Expose the reading and pagination helpers so callers can import from
`docreader` without traversing the package hierarchy.
"""

from .config.settings import Settings, get_settings  # noqa: F401
from .services.assets import AssetNotFoundError, AssetResolver  # noqa: F401
from .utils.files import read_csv, read_file_lines, read_file_text, read_pages  # noqa: F401
from .utils.text import paginate, split_fields, split_lines  # noqa: F401

__all__ = [
    "AssetNotFoundError",
    "AssetResolver",
    "Settings",
    "get_settings",
    "paginate",
    "read_csv",
    "read_file_lines",
    "read_file_text",
    "read_pages",
    "split_fields",
    "split_lines",
]
