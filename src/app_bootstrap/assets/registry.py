# Asset store registry — maps kind keys to store classes.

from __future__ import annotations

from app_bootstrap.assets.base import AssetError, AssetStore

_REGISTRY: dict[str, type] = {}


def register(kind: str, cls: type) -> None:
    """Register an asset store class under a kind key."""
    _REGISTRY[kind] = cls


def get_asset_store(kind: str, location: str | None = None) -> AssetStore:
    """Create an asset store by kind key.

    ``location`` is the directory for ``dir`` and the package name for
    ``package``; ``memory`` takes none and starts empty.
    """
    if not _REGISTRY:
        _load_builtins()

    if kind not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise AssetError(f"Unknown asset store '{kind}'. Available stores: {available}")

    cls = _REGISTRY[kind]

    if kind == "memory":
        return cls()  # type: ignore[return-value]
    if not location:
        raise AssetError(f"Asset store '{kind}' needs a location")
    return cls(location)  # type: ignore[return-value]


def _load_builtins() -> None:
    from app_bootstrap.assets.directory import DirectoryAssetStore
    from app_bootstrap.assets.memory import MemoryAssetStore
    from app_bootstrap.assets.package import PackageAssetStore

    register("dir", DirectoryAssetStore)
    register("package", PackageAssetStore)
    register("memory", MemoryAssetStore)


def available_stores() -> list[str]:
    """Return list of registered store kinds."""
    if not _REGISTRY:
        _load_builtins()
    return sorted(_REGISTRY.keys())
