"""Assets shipped as package data inside an installed Python package."""

from __future__ import annotations

import importlib
from importlib import resources
from pathlib import PurePosixPath
from types import ModuleType
from typing import BinaryIO

from app_bootstrap.assets.base import ResourceNotFound


class PackageAssetStore:
    """Serves assets bundled in ``package`` via ``importlib.resources``.

    ``package`` may be a dotted module name or an imported module. The package
    is imported lazily, on the first ``open``.
    """

    def __init__(self, package: str | ModuleType) -> None:
        self._package = package

    @property
    def package_name(self) -> str:
        if isinstance(self._package, ModuleType):
            return self._package.__name__
        return self._package

    def open(self, name: str) -> BinaryIO:
        path = PurePosixPath(name.replace("\\", "/"))
        # Names like "../secrets.json" must not reach outside the package
        if path.is_absolute() or ".." in path.parts:
            raise ResourceNotFound(name, store=self.package_name)

        package = self._package
        if isinstance(package, str):
            try:
                package = importlib.import_module(package)
            except ModuleNotFoundError as e:
                raise ResourceNotFound(name, store=self.package_name) from e
        # Plain modules carry no __path__ and have no data of their own
        if not hasattr(package, "__path__"):
            raise ResourceNotFound(name, store=self.package_name)

        resource = resources.files(package)
        for part in path.parts:
            resource = resource.joinpath(part)
        if not resource.is_file():
            raise ResourceNotFound(name, store=self.package_name)
        return resource.open("rb")

    def __repr__(self) -> str:
        return f"PackageAssetStore({self.package_name!r})"
