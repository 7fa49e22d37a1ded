"""AWS Systems Manager Parameter Store backend."""

from ssmconfig.aws.credentials import (
    CredentialKind,
    CredentialSource,
    CredentialsResolver,
    SessionCredentials,
)
from ssmconfig.aws.factory import build_repository
from ssmconfig.aws.fetcher import ParameterFetcher, SsmClientFactory
from ssmconfig.aws.paths import build_path
from ssmconfig.aws.properties import AwsParameterStoreProperties
from ssmconfig.aws.repository import (
    PROPERTY_SOURCE_PREFIX,
    AwsParameterStoreRepository,
    build_property_source,
    flatten_name,
    split_profiles,
)

__all__ = [
    "AwsParameterStoreProperties",
    "AwsParameterStoreRepository",
    "CredentialKind",
    "CredentialSource",
    "CredentialsResolver",
    "ParameterFetcher",
    "PROPERTY_SOURCE_PREFIX",
    "SessionCredentials",
    "SsmClientFactory",
    "build_path",
    "build_property_source",
    "build_repository",
    "flatten_name",
    "split_profiles",
]
