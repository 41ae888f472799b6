"""AssetStore Protocol and asset errors."""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


class AssetError(Exception):
    """Base exception for asset store failures."""


class ResourceNotFound(AssetError):
    """The requested asset does not exist in the store."""

    def __init__(self, name: str, store: str = "") -> None:
        self.name = name
        self.store = store
        where = f" in {store}" if store else ""
        super().__init__(f"Asset '{name}' not found{where}")


@runtime_checkable
class AssetStore(Protocol):
    """Read-only provider of bundled application resources, addressed by name.

    The store is supplied by the host and only borrowed by consumers: each
    ``open`` hands back a fresh stream that the caller must close.
    """

    def open(self, name: str) -> BinaryIO:
        """Open the named asset for binary reading.

        Raises ResourceNotFound if the store has no asset under ``name``.
        """
        ...
