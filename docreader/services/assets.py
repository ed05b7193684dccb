from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from ..config import Settings

logger = logging.getLogger("docreader")

RESOURCE_EXTENSIONS: Tuple[str, ...] = (".txt", ".csv", ".json")


class AssetNotFoundError(FileNotFoundError):
    """Raised when no lookup strategy can locate the requested asset."""

    def __init__(self, name: str, tried: Sequence[str] = ()) -> None:
        super().__init__(f"Asset not found: {name}")
        self.filename = name
        self.tried = tuple(tried)

    def __str__(self) -> str:
        return f"Asset not found: {self.filename}"


class LookupStrategy:
    """
    One location an asset may live in. Subclasses return the decoded text,
    or None when the asset is not there.
    """

    name = "base"

    def load(self, asset_name: str) -> Optional[str]:
        raise NotImplementedError


class PathStrategy(LookupStrategy):
    """Treat the asset name as a filesystem path."""

    name = "path"

    def load(self, asset_name: str) -> Optional[str]:
        return _read_if_file(Path(asset_name).expanduser())


class DirectoryStrategy(LookupStrategy):
    """Join the asset name onto a fixed directory."""

    def __init__(self, root: Optional[Path], *, name: str = "directory") -> None:
        self.root = Path(root).expanduser() if root is not None else None
        self.name = name

    def load(self, asset_name: str) -> Optional[str]:
        if self.root is None:
            return None
        return _read_if_file(self.root / asset_name)


class PackageResourceStrategy(LookupStrategy):
    """
    Look the asset up among the data files shipped inside a Python package.
    The name may leave out its extension, mirroring how engine resources are
    addressed; RESOURCE_EXTENSIONS are tried in order in that case.
    """

    name = "resource"

    def __init__(
        self,
        package: str,
        *,
        extensions: Iterable[str] = RESOURCE_EXTENSIONS,
    ) -> None:
        self.package = package
        self.extensions = tuple(extensions)

    def load(self, asset_name: str) -> Optional[str]:
        if Path(asset_name).is_absolute():
            return None
        try:
            root = resources.files(self.package)
        except ModuleNotFoundError:
            logger.warning("Resource package %s is not importable", self.package)
            return None

        candidates = [asset_name]
        if not Path(asset_name).suffix:
            candidates.extend(asset_name + ext for ext in self.extensions)

        for candidate in candidates:
            entry = root
            for part in Path(candidate).parts:
                entry = entry.joinpath(part)
            if entry.is_file():
                return entry.read_text(encoding="utf-8")
        return None


class AssetResolver:
    """
    Try each lookup strategy in order and return the first asset found.
    """

    def __init__(self, strategies: Sequence[LookupStrategy]) -> None:
        self.strategies = tuple(strategies)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AssetResolver":
        return cls(
            [
                PathStrategy(),
                DirectoryStrategy(settings.data_dir, name="data"),
                DirectoryStrategy(settings.assets_dir, name="assets"),
                PackageResourceStrategy(settings.resource_package),
            ]
        )

    def resolve_text(self, asset_name: str) -> str:
        """
        Return the text content of the asset.

        Raises:
            AssetNotFoundError: if no strategy locates the asset.
        """
        tried: list[str] = []
        for strategy in self.strategies:
            content = strategy.load(asset_name)
            if content is not None:
                logger.debug("Resolved %s via %s lookup", asset_name, strategy.name)
                return content
            logger.debug("Asset %s not found via %s lookup", asset_name, strategy.name)
            tried.append(strategy.name)
        raise AssetNotFoundError(asset_name, tried)


def _read_if_file(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


__all__ = [
    "AssetNotFoundError",
    "AssetResolver",
    "DirectoryStrategy",
    "LookupStrategy",
    "PackageResourceStrategy",
    "PathStrategy",
]
