"""
Logging configuration for the docreader command line.
"""

from .setup import configure_logging  # noqa: F401

__all__ = ["configure_logging"]
