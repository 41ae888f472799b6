"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import BinaryIO

import pytest

from app_bootstrap import lifespan
from app_bootstrap.assets.memory import MemoryAssetStore

SAMPLE_SETTINGS = {
    "ApiUrl": "https://example.com",
    "Timeout": 30,
    "Retries": 3,
    "Features": {"darkMode": True, "beta": False},
}


class CountingAssetStore:
    """Wraps another store and counts how often each asset is opened."""

    def __init__(self, inner) -> None:
        self._inner = inner
        self.opened: dict[str, int] = {}

    def open(self, name: str) -> BinaryIO:
        self.opened[name] = self.opened.get(name, 0) + 1
        return self._inner.open(name)


@pytest.fixture(autouse=True)
def _reset_process_registry():
    """Never leak an installed registry between tests."""
    yield
    lifespan.shutdown()


@pytest.fixture
def sample_settings_json() -> str:
    return json.dumps(SAMPLE_SETTINGS)


@pytest.fixture
def assets_dir(tmp_path: Path, sample_settings_json: str) -> Path:
    """A bundled-assets directory holding a valid appsettings.json."""
    root = tmp_path / "assets"
    root.mkdir()
    (root / "appsettings.json").write_text(sample_settings_json, encoding="utf-8")
    return root


@pytest.fixture
def memory_store(sample_settings_json: str) -> MemoryAssetStore:
    return MemoryAssetStore({"appsettings.json": sample_settings_json})


@pytest.fixture
def counting_store(memory_store: MemoryAssetStore) -> CountingAssetStore:
    return CountingAssetStore(memory_store)


@pytest.fixture
def empty_store() -> MemoryAssetStore:
    return MemoryAssetStore()
