"""
Credential resolution for parameter store access.

Resolution order, first match wins:

1. Temporary credentials sent by the client as a base64 encoded JSON token
   (``AccessKeyId``, ``SecretAccessKey``, ``SessionToken``).
2. A named profile from the local AWS credentials/config files.
3. The default boto3 discovery chain (environment, shared config,
   instance metadata).

Resolution runs on every request because the client token may change
between calls.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from enum import StrEnum

import boto3
import structlog
from pydantic import BaseModel, ConfigDict, Field

from ssmconfig.aws.properties import AwsParameterStoreProperties
from ssmconfig.core.errors import CredentialParseError, sanitize_error
from ssmconfig.tokens import ConfigTokenProvider

logger = structlog.get_logger()


class SessionCredentials(BaseModel):
    """Temporary session credentials in the STS JSON field layout."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_key_id: str = Field(alias="AccessKeyId")
    secret_access_key: str = Field(alias="SecretAccessKey", repr=False)
    session_token: str = Field(alias="SessionToken", repr=False)

    @classmethod
    def decode(cls, token: str) -> SessionCredentials:
        """Decode a base64 JSON token, raising CredentialParseError if malformed."""
        token = token.strip()
        try:
            payload = base64.b64decode(token + "=" * (-len(token) % 4), validate=True)
            return cls.model_validate_json(payload)
        except (binascii.Error, ValueError) as exc:
            raise CredentialParseError(
                "Unable to parse client temporary credentials.",
                details={"error": sanitize_error(exc)},
            ) from exc

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def encode(self) -> str:
        return base64.b64encode(self.to_json().encode("utf-8")).decode("ascii")


class CredentialKind(StrEnum):
    TOKEN = "token"
    PROFILE = "profile"
    DEFAULT = "default"


@dataclass(frozen=True)
class CredentialSource:
    """Outcome of one credential resolution."""

    kind: CredentialKind
    credentials: SessionCredentials | None = None
    profile_name: str | None = None

    def create_session(self, region_name: str | None = None) -> boto3.Session:
        if self.kind == CredentialKind.TOKEN and self.credentials is not None:
            return boto3.Session(
                aws_access_key_id=self.credentials.access_key_id,
                aws_secret_access_key=self.credentials.secret_access_key,
                aws_session_token=self.credentials.session_token,
                region_name=region_name,
            )
        if self.kind == CredentialKind.PROFILE:
            return boto3.Session(profile_name=self.profile_name, region_name=region_name)
        return boto3.Session(region_name=region_name)


class CredentialsResolver:
    """Picks the credential source for the current request."""

    def __init__(
        self,
        properties: AwsParameterStoreProperties,
        token_provider: ConfigTokenProvider,
    ) -> None:
        self.properties = properties
        self.token_provider = token_provider

    def resolve(self) -> CredentialSource:
        client_credentials = self._client_credentials()
        if client_credentials is not None:
            return CredentialSource(CredentialKind.TOKEN, credentials=client_credentials)
        if self.properties.profile:
            return CredentialSource(CredentialKind.PROFILE, profile_name=self.properties.profile)
        return CredentialSource(CredentialKind.DEFAULT)

    def _client_credentials(self) -> SessionCredentials | None:
        token = self.token_provider.get_token()
        if not token or not token.strip():
            return None
        credentials = SessionCredentials.decode(token)
        logger.debug("client_credentials_resolved", access_key_id=_mask(credentials.access_key_id))
        return credentials


def _mask(value: str) -> str:
    if len(value) <= 4:
        return "***"
    return f"{value[:4]}***"
