"""Settings loading: runtime knobs from the environment, app settings from a bundled asset."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ValidationError

from app_bootstrap.assets.base import AssetStore
from app_bootstrap.config.settings import AppSettings, BootSettings
from app_bootstrap.utils.logging import get_logger

logger = get_logger(__name__)

APP_SETTINGS_FILE = "appsettings.json"


class MalformedConfig(Exception):
    """The settings asset is not valid JSON or does not match the expected shape."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Malformed settings asset '{name}': {reason}")


@lru_cache(maxsize=1)
def get_boot_settings() -> BootSettings:
    """Load and cache the bootstrap's own settings."""
    return BootSettings()


class ConfigLoader:
    """Reads one settings asset from an AssetStore and validates it.

    Every ``load_settings`` call goes back to the store; callers that want a
    single read register the result as a singleton (see ``AppModule``).
    """

    def __init__(
        self,
        assets: AssetStore,
        filename: str = APP_SETTINGS_FILE,
        model: type[BaseModel] = AppSettings,
    ) -> None:
        self._assets = assets
        self._filename = filename
        self._model = model

    @property
    def filename(self) -> str:
        return self._filename

    def load_settings(self) -> AppSettings:
        """Open, read and parse the settings asset.

        Raises ResourceNotFound if the asset is missing and MalformedConfig if
        its content cannot be decoded, parsed or validated.
        """
        with self._assets.open(self._filename) as stream:
            raw = stream.read()

        try:
            content = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedConfig(self._filename, f"not UTF-8 text ({e.reason})") from e

        try:
            settings = self._model.model_validate_json(content)
        except ValidationError as e:
            raise MalformedConfig(self._filename, _summarize(e)) from e

        logger.info(
            "settings_loaded",
            asset=self._filename,
            fields=len(settings.model_dump()),
        )
        return settings  # type: ignore[return-value]


def _summarize(error: ValidationError) -> str:
    """One line per failing location, e.g. ``Timeout: Input should be a valid integer``."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)
