"""Assets laid out as plain files under a root directory."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from app_bootstrap.assets.base import AssetError, ResourceNotFound


class DirectoryAssetStore:
    """Serves assets from ``root``. Names are relative POSIX paths."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def open(self, name: str) -> BinaryIO:
        path = self._resolve(name)
        try:
            return path.open("rb")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise ResourceNotFound(name, store=str(self._root)) from e
        except PermissionError as e:
            raise AssetError(f"Asset '{name}' in {self._root} is not readable") from e

    def _resolve(self, name: str) -> Path:
        root = self._root.resolve()
        path = (root / name).resolve()
        # Names like "../secrets.json" must not reach outside the bundle
        if path != root and root not in path.parents:
            raise ResourceNotFound(name, store=str(self._root))
        return path

    def __repr__(self) -> str:
        return f"DirectoryAssetStore({str(self._root)!r})"
