"""In-process asset store, mainly for tests and embedding hosts."""

from __future__ import annotations

import io
from typing import BinaryIO, Mapping

from app_bootstrap.assets.base import ResourceNotFound


class MemoryAssetStore:
    """Serves assets from a name -> content mapping. ``str`` content is UTF-8 encoded."""

    def __init__(self, assets: Mapping[str, bytes | str] | None = None) -> None:
        self._assets: dict[str, bytes] = {}
        for name, content in (assets or {}).items():
            self.put(name, content)

    def put(self, name: str, content: bytes | str) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._assets[name] = content

    def names(self) -> list[str]:
        return sorted(self._assets)

    def open(self, name: str) -> BinaryIO:
        try:
            return io.BytesIO(self._assets[name])
        except KeyError:
            raise ResourceNotFound(name, store="memory") from None
