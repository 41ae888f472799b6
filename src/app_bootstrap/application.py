"""Host application base class owning the startup and teardown of the container."""

from __future__ import annotations

from app_bootstrap import lifespan
from app_bootstrap.assets.base import AssetStore
from app_bootstrap.container.modules import AppModule
from app_bootstrap.container.registry import ModuleLike, RegistryStateError, ServiceRegistry
from app_bootstrap.utils.logging import get_logger

logger = get_logger(__name__)


class Application:
    """Builds the object graph when the host creates the application.

    Subclasses add their own bindings by overriding ``configure_container``
    and extending the list returned by ``super()``.
    """

    def __init__(self, assets: AssetStore) -> None:
        self.assets = assets
        self._registry: ServiceRegistry | None = None

    @property
    def registry(self) -> ServiceRegistry:
        if self._registry is None:
            raise RegistryStateError("Application not created yet. Call on_create() first.")
        return self._registry

    def on_create(self) -> None:
        registry = ServiceRegistry()
        registry.configure(*self.configure_container())
        registry.build()
        try:
            lifespan.install(registry)
        except RegistryStateError:
            registry.teardown()
            raise
        self._registry = registry
        logger.info("application_created", application=type(self).__name__)

    def configure_container(self) -> list[ModuleLike]:
        return [AppModule(self.assets)]

    def on_terminate(self) -> None:
        if self._registry is not None:
            lifespan.shutdown()
            self._registry = None
