"""Tests for backends/registry.py."""

import pytest
from ssmconfig.aws.properties import AwsParameterStoreProperties
from ssmconfig.aws.repository import AwsParameterStoreRepository
from ssmconfig.backends import AWS_PARAMETER_STORE, create_backend, list_backends
from ssmconfig.backends.registry import BackendRegistry
from ssmconfig.core.errors import ConfigurationError
from ssmconfig.tokens import StaticTokenProvider


class TestBackendRegistry:
    def test_register_and_create(self):
        registry = BackendRegistry()
        sentinel = object()
        registry.register("fake", lambda properties: sentinel, description="Fake")

        assert registry.create("fake", {}) is sentinel
        assert [spec.name for spec in registry.list()] == ["fake"]
        assert registry.list()[0].description == "Fake"

    def test_register_requires_name(self):
        with pytest.raises(ValueError):
            BackendRegistry().register("", lambda properties: None)

    def test_unknown_backend(self):
        registry = BackendRegistry()
        registry.register("fake", lambda properties: None)

        with pytest.raises(ConfigurationError) as exc_info:
            registry.create("git")

        assert "git" in exc_info.value.message
        assert exc_info.value.details == {"available": "fake"}


class TestBuiltinBackends:
    def test_parameter_store_registered(self):
        assert AWS_PARAMETER_STORE in {spec.name for spec in list_backends()}

    def test_create_parameter_store(self, client_factory):
        properties = AwsParameterStoreProperties(order=3, region="eu-central-1")

        repository = create_backend(
            AWS_PARAMETER_STORE,
            properties,
            token_provider=StaticTokenProvider(),
            client_factory=client_factory,
        )

        assert isinstance(repository, AwsParameterStoreRepository)
        assert repository.order == 3
        assert repository.fetcher.client_factory is client_factory

    def test_default_client_factory_uses_region(self):
        properties = AwsParameterStoreProperties(region="eu-central-1")

        repository = create_backend(AWS_PARAMETER_STORE, properties)

        assert repository.fetcher.client_factory.region == "eu-central-1"
