"""
Module: library.store

Purpose:
    In-memory asset libraries (characters, scenes, finished panels).
    Each library is an ordered, id-addressable collection with an
    optional capacity. Contents are held as a tuple and replaced
    wholesale on every change.

Key Classes:
    - AssetLibrary: Ordered asset collection with capacity checks

Key Functions:
    - default_library(): Library with the studio's default capacity

Dependencies:
    - core.models.assets: Asset, AssetKind

Used By:
    - library.transfer: JSON import/export
    - composer.studio: Asset clicks and panel uploads
    - gui.widgets.asset_gallery: Thumbnail lists
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from comic_studio.core.models import Asset, AssetKind

logger = logging.getLogger(__name__)

# Library capacities (None = unlimited)
DEFAULT_CAPACITIES: dict[AssetKind, Optional[int]] = {
    AssetKind.CHARACTER: 4,
    AssetKind.SCENE: 8,
    AssetKind.PANEL: None,
}


class LibraryError(Exception):
    """Base class for library failures."""


class LibraryFullError(LibraryError):
    """Raised when adding to a library that is at capacity."""


class EmptyLibraryError(LibraryError):
    """Raised when an action needs at least one asset."""


class LibraryFormatError(LibraryError):
    """Raised when an imported library file has the wrong format."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class AssetLibrary:
    """
    Ordered collection of assets of one kind.

    Attributes:
        kind: Which library this is
        capacity: Maximum number of assets, or None for unlimited

    Example:
        >>> library = AssetLibrary(AssetKind.SCENE, capacity=8)
        >>> library.add(scene)
        >>> len(library)
        1
    """

    def __init__(
        self,
        kind: AssetKind,
        capacity: Optional[int] = None,
        assets: Iterable[Asset] = (),
    ) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive: {capacity}")
        self.kind = kind
        self.capacity = capacity
        self._assets: tuple[Asset, ...] = ()
        self.replace_all(assets)

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)

    def __contains__(self, asset_id: object) -> bool:
        return any(a.id == asset_id for a in self._assets)

    def __repr__(self) -> str:
        return f"AssetLibrary(kind={self.kind.value!r}, size={len(self)}, capacity={self.capacity})"

    @property
    def assets(self) -> tuple[Asset, ...]:
        return self._assets

    @property
    def is_empty(self) -> bool:
        return not self._assets

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._assets) >= self.capacity

    @property
    def remaining_slots(self) -> Optional[int]:
        """Free slots left, or None when unlimited."""
        if self.capacity is None:
            return None
        return max(0, self.capacity - len(self._assets))

    def get(self, asset_id: str) -> Optional[Asset]:
        for asset in self._assets:
            if asset.id == asset_id:
                return asset
        return None

    def add(self, asset: Asset) -> Asset:
        """
        Append an asset.

        Raises:
            LibraryFullError: If the library is at capacity
        """
        if self.is_full:
            raise LibraryFullError(
                f"{self.kind.value.capitalize()} library is full "
                f"(max {self.capacity})"
            )
        self._assets = self._assets + (asset,)
        logger.debug(f"Added {asset.id} to {self.kind.value} library")
        return asset

    def replace(self, asset_id: str, asset: Asset) -> Asset:
        """
        Swap the asset stored under asset_id, keeping that id.

        Returns:
            The stored asset (with the original id)

        Raises:
            KeyError: If asset_id is not in the library
        """
        if asset_id not in self:
            raise KeyError(f"Asset not found: {asset_id}")
        stored = Asset(id=asset_id, prompt=asset.prompt, base64=asset.base64, name=asset.name)
        self._assets = tuple(stored if a.id == asset_id else a for a in self._assets)
        return stored

    def remove(self, asset_id: str) -> bool:
        """Remove an asset. Returns False if it was not present."""
        remaining = tuple(a for a in self._assets if a.id != asset_id)
        if len(remaining) == len(self._assets):
            return False
        self._assets = remaining
        return True

    def replace_all(self, assets: Iterable[Asset]) -> int:
        """
        Replace the whole library, keeping at most ``capacity`` assets.

        Returns:
            Number of assets kept
        """
        items = tuple(assets)
        if self.capacity is not None and len(items) > self.capacity:
            logger.warning(
                f"{self.kind.value} library holds at most {self.capacity} assets, "
                f"dropping {len(items) - self.capacity}"
            )
            items = items[: self.capacity]
        self._assets = items
        return len(items)


def default_library(kind: AssetKind) -> AssetLibrary:
    """Create an empty library with the default capacity for kind."""
    return AssetLibrary(kind, capacity=DEFAULT_CAPACITIES[kind])
