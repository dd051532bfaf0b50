"""
Module: assets

Purpose:
    Provides the Asset dataclass - an externally sourced image record
    (character, scene or finished panel) that can be placed on a page.
    Assets carry their pixels as a base64 payload so libraries can be
    written to and read from plain JSON files.

Key Classes:
    - AssetKind: Which library an asset belongs to
    - Asset: Immutable image record

Dependencies:
    - dataclasses (std)
    - uuid (std)

Used By:
    - core.models.panels.FilledSlot
    - core.utils.serialization
    - library.store.AssetLibrary
    - composer.studio.PageLayoutStudio
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AssetKind(str, Enum):
    """Library an asset lives in."""

    CHARACTER = "character"
    SCENE = "scene"
    PANEL = "panel"

    @property
    def id_prefix(self) -> str:
        """Prefix used when minting new asset ids."""
        return _ID_PREFIXES[self]


_ID_PREFIXES = {
    AssetKind.CHARACTER: "char",
    AssetKind.SCENE: "scene",
    AssetKind.PANEL: "panel",
}


@dataclass(frozen=True, slots=True)
class Asset:
    """
    Image record consumed by the page composer.

    Attributes:
        id: Unique identifier within its library
        prompt: Descriptive text (generation prompt or user description)
        base64: Encoded image bytes without a data-URL prefix
        name: Optional display name (required for characters)

    Example:
        >>> asset = Asset(id="scene-1", prompt="Rainy alley", base64="iVBO...")
        >>> asset.display_name
        'Rainy alley'
    """

    id: str
    prompt: str
    base64: str
    name: Optional[str] = None

    @classmethod
    def new(
        cls,
        kind: AssetKind,
        base64: str,
        prompt: str,
        name: Optional[str] = None,
    ) -> Asset:
        """Create an asset with a freshly minted id for the given library kind."""
        return cls(
            id=f"{kind.id_prefix}-{uuid.uuid4().hex[:12]}",
            prompt=prompt,
            base64=base64,
            name=name,
        )

    @property
    def display_name(self) -> str:
        """Name shown in galleries: the name when set, otherwise the prompt."""
        return self.name or self.prompt

    @property
    def has_pixels(self) -> bool:
        """True when the asset carries a non-empty payload."""
        return bool(self.base64)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the library JSON shape ({id, prompt, base64, name?})."""
        data: dict[str, Any] = {
            "id": self.id,
            "prompt": self.prompt,
            "base64": self.base64,
        }
        if self.name is not None:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Asset:
        """Deserialize from the library JSON shape. Unknown keys are ignored."""
        return cls(
            id=str(data["id"]),
            prompt=str(data["prompt"]),
            base64=str(data["base64"]),
            name=str(data["name"]) if data.get("name") is not None else None,
        )
