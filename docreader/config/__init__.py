"""
Configuration helpers for docreader.
"""

from .settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
