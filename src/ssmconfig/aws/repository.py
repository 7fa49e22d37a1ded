"""
Environment repository backed by AWS Systems Manager Parameter Store.

Parameters are laid out as ``{prefix}{application}{separator}{profile}/...``.
Everything below a profile path becomes one property source, with the path
stripped and the remaining ``/`` separators turned into dots::

    /config/app/prod/db/url = jdbc:...   ->   db.url = jdbc:...
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable

from ssmconfig.aws.credentials import CredentialSource, CredentialsResolver
from ssmconfig.aws.fetcher import ParameterFetcher
from ssmconfig.aws.paths import build_path
from ssmconfig.aws.properties import PATH_SEPARATOR, AwsParameterStoreProperties
from ssmconfig.environment.models import Environment, Parameter, PropertySource
from ssmconfig.logging import request_logger

PROPERTY_SOURCE_PREFIX = "aws:ssm:parameter:"
DEFAULT_PROFILE = "default"


def flatten_name(name: str, path: str) -> str:
    """Strip ``path`` from a parameter name and dot-join what remains."""
    if name.startswith(path):
        name = name[len(path) :]
    return name.replace(PATH_SEPARATOR, ".")


def build_property_source(path: str, parameters: Iterable[Parameter]) -> PropertySource:
    source: dict[str, str] = {}
    for parameter in parameters:
        source[flatten_name(parameter.name, path)] = parameter.value
    return PropertySource(name=f"{PROPERTY_SOURCE_PREFIX}{path}", source=MappingProxyType(source))


def split_profiles(profile: str | None) -> list[str]:
    """Split a comma separated profile argument, keeping order and empty entries."""
    if profile is None:
        return [DEFAULT_PROFILE]
    return profile.split(",")


class AwsParameterStoreRepository:
    """Resolves environments from parameter store paths, one source per profile."""

    def __init__(
        self,
        properties: AwsParameterStoreProperties,
        credentials_resolver: CredentialsResolver,
        fetcher: ParameterFetcher,
    ) -> None:
        self.properties = properties
        self.credentials_resolver = credentials_resolver
        self.fetcher = fetcher

    @property
    def order(self) -> int:
        return self.properties.order

    def find_one(
        self,
        application: str,
        profile: str | None,
        label: str | None = None,
        include_origin: bool = False,
    ) -> Environment:
        profiles = split_profiles(profile)
        log = request_logger(application=application, label=label)
        property_sources: list[PropertySource] = []
        clients: dict[CredentialSource, Any] = {}

        try:
            for active_profile in profiles:
                path = build_path(self.properties, application, active_profile)
                source = self.credentials_resolver.resolve()
                parameters = self.fetcher.fetch(path, source, clients)
                property_source = build_property_source(path, parameters)
                property_sources.append(property_source)
                log.debug(
                    "property_source_built",
                    path=path,
                    credentials=source.kind.value,
                    properties=len(property_source.source),
                )
        finally:
            self.fetcher.close(clients)

        log.debug("environment_resolved", profiles=len(profiles))
        return Environment(
            name=application,
            profiles=tuple(profiles),
            label=label,
            property_sources=tuple(property_sources),
        )
