"""A store of named assets, kept separately per asset type."""

from __future__ import annotations

import zlib
from typing import Any, TypeVar

A = TypeVar("A")


class AssetNotFoundError(LookupError):
    """Raised when an asset is not registered."""


def hash_name(name: str) -> int:
    """A 32-bit hash of an asset name."""
    return zlib.crc32(name.encode("utf-8")) & 0xFFFFFFFF


class AssetServer:
    """Assets keyed by type, then by the hash of their name."""

    def __init__(self) -> None:
        self._data: dict[type, dict[int, Any]] = {}
        self._names: dict[type, dict[int, str]] = {}

    def add(self, name: str, data: Any) -> None:
        """Register data under name for its type; an existing entry is kept."""
        asset_type = type(data)
        key = hash_name(name)
        self._data.setdefault(asset_type, {}).setdefault(key, data)
        self._names.setdefault(asset_type, {}).setdefault(key, name)

    def get(self, asset_type: type[A], name: str) -> A:
        try:
            return self._data.get(asset_type, {})[hash_name(name)]
        except KeyError:
            raise AssetNotFoundError(f"Failed to find asset: {name}") from None

    def get_by_hash(self, asset_type: type[A], name_hash: int) -> A:
        try:
            return self._data.get(asset_type, {})[name_hash]
        except KeyError:
            raise AssetNotFoundError(f"Failed to find asset: {name_hash}") from None

    def hashes(self, asset_type: type) -> list[int]:
        """All name hashes registered for a type."""
        return list(self._names.get(asset_type, {}))

    def name_of(self, asset_type: type, name_hash: int) -> str:
        try:
            return self._names.get(asset_type, {})[name_hash]
        except KeyError:
            raise AssetNotFoundError(f"Failed to find asset: {name_hash}") from None