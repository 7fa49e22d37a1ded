from __future__ import annotations

from ssmconfig.aws.credentials import CredentialsResolver
from ssmconfig.aws.fetcher import ParameterFetcher, SsmClientFactory
from ssmconfig.aws.properties import AwsParameterStoreProperties
from ssmconfig.aws.repository import AwsParameterStoreRepository
from ssmconfig.tokens import ConfigTokenProvider, HeaderTokenProvider


def build_repository(
    properties: AwsParameterStoreProperties,
    *,
    token_provider: ConfigTokenProvider | None = None,
    client_factory: SsmClientFactory | None = None,
) -> AwsParameterStoreRepository:
    """Wire a parameter store repository from its properties."""
    resolver = CredentialsResolver(properties, token_provider or HeaderTokenProvider())
    fetcher = ParameterFetcher(client_factory or SsmClientFactory(region=properties.region))
    return AwsParameterStoreRepository(properties, resolver, fetcher)
