"""
Asset lookup across the filesystem and bundled package data.
"""

from .assets import (  # noqa: F401
    AssetNotFoundError,
    AssetResolver,
    DirectoryStrategy,
    LookupStrategy,
    PackageResourceStrategy,
    PathStrategy,
)

__all__ = [
    "AssetNotFoundError",
    "AssetResolver",
    "DirectoryStrategy",
    "LookupStrategy",
    "PackageResourceStrategy",
    "PathStrategy",
]
