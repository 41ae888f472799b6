"""Tests for the ServiceRegistry lifecycle and resolution."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from injector import Module, provider

from app_bootstrap.assets.base import AssetStore, ResourceNotFound
from app_bootstrap.config.loader import APP_SETTINGS_FILE, ConfigLoader, MalformedConfig
from app_bootstrap.config.settings import AppSettings
from app_bootstrap.container.modules import AppModule
from app_bootstrap.container.registry import (
    RegistryState,
    RegistryStateError,
    ResolutionError,
    ServiceRegistry,
)


class Unregistered:
    pass


class ApiClient:
    def __init__(self, base_url: str, timeout: int) -> None:
        self.base_url = base_url
        self.timeout = timeout


class ClientModule(Module):
    @provider
    def provide_client(self, settings: AppSettings) -> ApiClient:
        return ApiClient(settings.api_url, settings.timeout)


def _built(store) -> ServiceRegistry:
    return ServiceRegistry().configure(AppModule(store)).build()


def test_example_scenario(memory_store):
    """configure + build + resolve yields the values from appsettings.json."""
    registry = ServiceRegistry()
    registry.configure(AppModule(memory_store))
    registry.build()

    settings = registry.resolve(AppSettings)
    assert settings.api_url == "https://example.com"
    assert settings.timeout == 30


def test_state_transitions(memory_store):
    registry = ServiceRegistry()
    assert registry.state is RegistryState.UNCONFIGURED

    registry.configure(AppModule(memory_store))
    assert registry.state is RegistryState.CONFIGURED

    registry.build()
    assert registry.state is RegistryState.BUILT

    registry.teardown()
    assert registry.state is RegistryState.TORN_DOWN


def test_resolve_before_configure():
    with pytest.raises(RegistryStateError):
        ServiceRegistry().resolve(AppSettings)


def test_resolve_before_build_is_a_resolution_error(memory_store):
    """Nothing half-built is handed out before build()."""
    registry = ServiceRegistry().configure(AppModule(memory_store))
    with pytest.raises(ResolutionError):
        registry.resolve(AppSettings)


def test_build_before_configure():
    with pytest.raises(RegistryStateError, match="expected configured"):
        ServiceRegistry().build()


def test_configure_twice(memory_store):
    registry = ServiceRegistry().configure(AppModule(memory_store))
    with pytest.raises(RegistryStateError):
        registry.configure(ClientModule())


def test_configure_needs_a_module():
    with pytest.raises(ValueError):
        ServiceRegistry().configure()


def test_build_only_once(memory_store):
    registry = _built(memory_store)
    with pytest.raises(RegistryStateError):
        registry.build()


def test_unregistered_type(memory_store):
    registry = _built(memory_store)
    with pytest.raises(ResolutionError, match="Unregistered") as exc_info:
        registry.resolve(Unregistered)
    assert not isinstance(exc_info.value, RegistryStateError)


def test_unregistered_dependency_of_registered_service():
    """A binding whose dependency was never registered fails on resolve."""
    registry = ServiceRegistry().configure(ClientModule()).build()
    with pytest.raises(ResolutionError):
        registry.resolve(ApiClient)


def test_resolves_each_registered_capability(memory_store):
    registry = _built(memory_store)

    assert registry.resolve(AssetStore) is memory_store
    loader = registry.resolve(ConfigLoader)
    assert isinstance(loader, ConfigLoader)
    assert loader.filename == APP_SETTINGS_FILE


def test_settings_are_a_singleton(counting_store):
    """Second resolution returns the same object without re-reading the asset."""
    registry = _built(counting_store)

    first = registry.resolve(AppSettings)
    second = registry.resolve(AppSettings)

    assert first is second
    assert counting_store.opened[APP_SETTINGS_FILE] == 1


def test_asset_read_is_deferred_to_first_resolution(counting_store):
    _built(counting_store)
    assert counting_store.opened == {}


def test_concurrent_resolution_builds_one_instance(counting_store):
    registry = _built(counting_store)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: registry.resolve(AppSettings), range(32)))

    assert all(r is results[0] for r in results)
    assert counting_store.opened[APP_SETTINGS_FILE] == 1


def test_missing_settings_surface_on_resolve(empty_store):
    registry = _built(empty_store)
    with pytest.raises(ResourceNotFound):
        registry.resolve(AppSettings)


def test_malformed_settings_surface_on_resolve():
    from app_bootstrap.assets.memory import MemoryAssetStore

    registry = _built(MemoryAssetStore({APP_SETTINGS_FILE: '{"ApiUrl": "x", "Timeout": "y"}'}))
    with pytest.raises(MalformedConfig):
        registry.resolve(AppSettings)


def test_failed_resolution_is_not_cached(empty_store):
    """A failed load is retried on the next resolve."""
    registry = _built(empty_store)
    with pytest.raises(ResourceNotFound):
        registry.resolve(AppSettings)

    empty_store.put(APP_SETTINGS_FILE, '{"ApiUrl": "https://late.example.com", "Timeout": 1}')
    assert registry.resolve(AppSettings).api_url == "https://late.example.com"


def test_host_modules_build_on_settings(memory_store):
    registry = ServiceRegistry().configure(AppModule(memory_store), ClientModule()).build()

    client = registry.resolve(ApiClient)
    assert client.base_url == "https://example.com"
    assert client.timeout == 30


def test_callable_module(memory_store):
    """Plain ``configure(binder)`` functions are accepted as modules."""

    def bind_unregistered(binder):
        binder.bind(Unregistered, to=Unregistered)

    registry = ServiceRegistry().configure(AppModule(memory_store), bind_unregistered).build()
    assert isinstance(registry.resolve(Unregistered), Unregistered)


def test_resolve_after_teardown(memory_store):
    registry = _built(memory_store)
    registry.teardown()
    with pytest.raises(RegistryStateError, match="torn_down"):
        registry.resolve(AppSettings)
