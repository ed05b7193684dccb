from __future__ import annotations

import logging
from typing import List, Optional

from ..config import get_settings
from ..services.assets import AssetResolver
from .text import paginate, split_fields, split_lines

logger = logging.getLogger("docreader")

_default_resolver: Optional[AssetResolver] = None


def get_default_resolver() -> AssetResolver:
    """
    Build the resolver from the cached settings on first use.
    """
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = AssetResolver.from_settings(get_settings())
    return _default_resolver


def read_file_text(name: str, *, resolver: Optional[AssetResolver] = None) -> str:
    """
    Return the full content of an asset looked up by path or name.

    Raises:
        AssetNotFoundError: if none of the resolver's locations holds the asset.
    """
    resolver = resolver or get_default_resolver()
    content = resolver.resolve_text(name)
    logger.debug("Read %d characters from %s", len(content), name)
    return content


def read_file_lines(name: str, *, resolver: Optional[AssetResolver] = None) -> List[str]:
    """Return the non-empty lines of an asset."""
    return split_lines(read_file_text(name, resolver=resolver))


def read_csv(
    name: str,
    delimiter: str = ",",
    *,
    resolver: Optional[AssetResolver] = None,
) -> List[List[str]]:
    return split_fields(read_file_lines(name, resolver=resolver), delimiter)


def read_pages(
    name: str,
    max_chars: int,
    *,
    resolver: Optional[AssetResolver] = None,
) -> List[str]:
    """
    Read an asset and paginate it into chunks of at most max_chars characters.
    """
    pages = paginate(read_file_text(name, resolver=resolver), max_chars)
    logger.debug("Paginated %s into %d page(s)", name, len(pages))
    return pages


__all__ = [
    "get_default_resolver",
    "read_csv",
    "read_file_lines",
    "read_file_text",
    "read_pages",
]
