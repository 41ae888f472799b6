"""Composition root: a one-shot configure/build lifecycle over an ``injector.Injector``."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, TypeVar, Union

from injector import Binder, Injector, Module, UnsatisfiedRequirement

from app_bootstrap.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ModuleLike = Union[Module, type, Callable[[Binder], None]]


class ResolutionError(Exception):
    """A requested service could not be produced by the container."""


class RegistryStateError(ResolutionError):
    """The registry was used out of its configure -> build -> resolve order."""


class RegistryState(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    BUILT = "built"
    TORN_DOWN = "torn_down"


class ServiceRegistry:
    """Collects bindings, builds them once, then serves read-only lookups.

    After ``build`` the binding table is never written again and implicit
    auto-binding is off, so ``resolve`` only ever returns what a module
    registered. Singleton-scoped bindings are constructed under injector's
    scope lock, which makes concurrent ``resolve`` calls safe.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._state = RegistryState.UNCONFIGURED
        self._modules: list[ModuleLike] = []
        self._injector: Injector | None = None

    @property
    def state(self) -> RegistryState:
        return self._state

    def configure(self, *modules: ModuleLike) -> ServiceRegistry:
        """Register injector modules. Allowed once, before ``build``."""
        if not modules:
            raise ValueError("configure() needs at least one module")
        with self._lock:
            self._expect(RegistryState.UNCONFIGURED, "configure")
            self._modules.extend(modules)
            self._state = RegistryState.CONFIGURED
        logger.info("container_configured", modules=len(modules))
        return self

    def build(self) -> ServiceRegistry:
        """Freeze the registrations into a resolvable container."""
        with self._lock:
            self._expect(RegistryState.CONFIGURED, "build")
            self._injector = Injector(self._modules, auto_bind=False)
            self._state = RegistryState.BUILT
        logger.info("container_built")
        return self

    def resolve(self, interface: type[T]) -> T:
        """Return the instance registered for ``interface``.

        Raises RegistryStateError before ``build`` or after ``teardown``, and
        ResolutionError when nothing is registered for ``interface``. Errors
        raised while constructing the dependency chain propagate unchanged.
        """
        injector = self._injector
        if injector is None or self._state is not RegistryState.BUILT:
            raise RegistryStateError(
                f"Cannot resolve {_name(interface)}: registry is {self._state.value}, "
                "call build() first"
            )
        try:
            return injector.get(interface)
        except UnsatisfiedRequirement as e:
            raise ResolutionError(f"No registration for {_name(e.interface)}") from e

    def teardown(self) -> None:
        """Drop the container; later lookups fail."""
        with self._lock:
            self._injector = None
            self._modules.clear()
            self._state = RegistryState.TORN_DOWN
        logger.info("container_torn_down")

    def _expect(self, state: RegistryState, action: str) -> None:
        if self._state is not state:
            raise RegistryStateError(
                f"Cannot {action}: registry is {self._state.value}, expected {state.value}"
            )


def _name(interface: Any) -> str:
    return getattr(interface, "__qualname__", repr(interface))
