"""Device-local store infrastructure providers."""

from pathlib import Path

import logfire
from dishka import Scope, provide

from camp.config import LocalStoreSettings
from camp.domain.repository import LocalStore
from camp.persistence.store import JsonFileLocalStore
from camp.util.di.base import ProviderBase
from camp.util.error import ConfigurationError


class LocalStoreProvider(ProviderBase):
    """Local store component base."""

    __mock_component__ = "local_storage"


class ProdLocalStoreProvider(LocalStoreProvider):
    """Production local store writing one JSON file per collection."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_local_store(self, local_settings: LocalStoreSettings) -> LocalStore:
        """Provide JSON file local store.

        Raises:
            ConfigurationError: If the configured directory is a file
        """
        directory = Path(local_settings.directory)
        if directory.exists() and not directory.is_dir():
            raise ConfigurationError(
                "LOCAL_STORE__DIRECTORY", f"{directory} exists and is not a directory"
            )
        logfire.info("Local store configured", directory=str(directory))
        return JsonFileLocalStore(directory)
