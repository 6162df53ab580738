"""Unit tests for provider selection."""

import pytest

from camp.util.di import (
    ProdConfigProvider,
    ProdRemoteStoreProvider,
    RemoteStoreProvider,
    get_provider,
    mockable_components,
)
from tests.di import MockRemoteStoreProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_mockable_component_variants(self):
        assert get_provider(RemoteStoreProvider) is ProdRemoteStoreProvider
        assert get_provider(RemoteStoreProvider, use_mock=True) is MockRemoteStoreProvider

    def test_components(self):
        assert mockable_components() == {"persistence", "local_storage"}


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"blob_storage"})  # type: ignore[arg-type]
