"""
Utility helpers kept intentionally small and stateless.
"""

from .files import read_csv, read_file_lines, read_file_text, read_pages  # noqa: F401
from .text import paginate, split_fields, split_lines  # noqa: F401

__all__ = [
    "paginate",
    "read_csv",
    "read_file_lines",
    "read_file_text",
    "read_pages",
    "split_fields",
    "split_lines",
]
