"""Injector modules wiring the asset store, settings loader and settings."""

from __future__ import annotations

from injector import Binder, InstanceProvider, Module, provider, singleton

from app_bootstrap.assets.base import AssetStore
from app_bootstrap.config.loader import APP_SETTINGS_FILE, ConfigLoader
from app_bootstrap.config.settings import AppSettings


class AppModule(Module):
    """Bindings for the bootstrap, in dependency order.

    AssetStore -> ConfigLoader -> AppSettings. AppSettings is a singleton, so
    the asset is read on first resolution and never again for this container.
    """

    def __init__(self, assets: AssetStore, filename: str = APP_SETTINGS_FILE) -> None:
        self._assets = assets
        self._filename = filename

    def configure(self, binder: Binder) -> None:
        binder.bind(AssetStore, to=InstanceProvider(self._assets))

    @provider
    def provide_config_loader(self, assets: AssetStore) -> ConfigLoader:
        return ConfigLoader(assets, filename=self._filename)

    @singleton
    @provider
    def provide_settings(self, loader: ConfigLoader) -> AppSettings:
        return loader.load_settings()
