"""Process-wide handle on the built ServiceRegistry.

Prefer passing the registry (or the services it resolves) explicitly; this
handle exists for host frameworks that can only reach services through a
global lookup. It has an explicit lifecycle: ``startup`` (or ``install``)
before any ``resolve``, ``shutdown`` at teardown.
"""

from __future__ import annotations

import threading
from typing import TypeVar

from app_bootstrap.assets.base import AssetStore
from app_bootstrap.config.loader import APP_SETTINGS_FILE
from app_bootstrap.container.modules import AppModule
from app_bootstrap.container.registry import (
    ModuleLike,
    RegistryState,
    RegistryStateError,
    ServiceRegistry,
)
from app_bootstrap.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_lock = threading.Lock()
_registry: ServiceRegistry | None = None


def startup(
    assets: AssetStore,
    *modules: ModuleLike,
    filename: str = APP_SETTINGS_FILE,
) -> ServiceRegistry:
    """Configure, build and install the container for ``assets``.

    Extra ``modules`` are registered after ``AppModule`` and may bind
    services that depend on AppSettings or the AssetStore.
    """
    registry = ServiceRegistry()
    registry.configure(AppModule(assets, filename=filename), *modules)
    registry.build()
    return install(registry)


def install(registry: ServiceRegistry) -> ServiceRegistry:
    """Install an already-built registry as the process-wide handle."""
    global _registry
    if registry.state is not RegistryState.BUILT:
        raise RegistryStateError(
            f"Only a built registry can be installed (state: {registry.state.value})"
        )
    with _lock:
        if _registry is not None:
            raise RegistryStateError("A registry is already installed; call shutdown() first")
        _registry = registry
    logger.info("registry_installed")
    return registry


def shutdown() -> None:
    """Tear down and uninstall the process-wide registry, if any."""
    global _registry
    with _lock:
        registry, _registry = _registry, None
    if registry is not None:
        registry.teardown()


def get_registry() -> ServiceRegistry:
    """Return the installed registry."""
    registry = _registry
    if registry is None:
        raise RegistryStateError("Registry not initialized. Call startup() first.")
    return registry


def resolve(interface: type[T]) -> T:
    """Resolve ``interface`` through the installed registry."""
    return get_registry().resolve(interface)
