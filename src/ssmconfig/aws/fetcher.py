from __future__ import annotations

import threading
from typing import Any

import structlog
from botocore.exceptions import BotoCoreError, ClientError

from ssmconfig.aws.credentials import CredentialKind, CredentialSource
from ssmconfig.core.errors import StoreFetchError, sanitize_error
from ssmconfig.environment.models import Parameter

logger = structlog.get_logger()


class SsmClientFactory:
    """
    Hands out SSM clients for a credential source.

    Profile and default-chain clients are built once and shared, since boto3
    clients are safe for concurrent use. Clients for client-supplied tokens
    are built per request and never kept.
    """

    def __init__(self, region: str | None = None) -> None:
        self.region = region
        self._clients: dict[tuple[CredentialKind, str | None], Any] = {}
        self._lock = threading.Lock()

    def client_for(self, source: CredentialSource) -> Any:
        if source.kind == CredentialKind.TOKEN:
            return self._build(source)

        key = (source.kind, source.profile_name)
        with self._lock:
            client = self._clients.get(key)
            if client is None:
                client = self._build(source)
                self._clients[key] = client
        return client

    def release(self, source: CredentialSource, client: Any) -> None:
        """Close a client handed out for a request unless it is shared."""
        if source.kind == CredentialKind.TOKEN:
            client.close()

    def _build(self, source: CredentialSource) -> Any:
        session = source.create_session(region_name=self.region)
        return session.client("ssm")


class ParameterFetcher:
    """Fetches every parameter at or below a path, decrypted, across all pages."""

    def __init__(self, client_factory: SsmClientFactory) -> None:
        self.client_factory = client_factory

    def fetch(
        self,
        path: str,
        source: CredentialSource,
        clients: dict[CredentialSource, Any] | None = None,
    ) -> list[Parameter]:
        """
        Fetch parameters under ``path``.

        When ``clients`` is given, a client already built for ``source`` in
        the same request is reused and new ones are recorded there; the
        caller hands them back through ``close``.
        """
        client = self._client(source, clients)
        request: dict[str, Any] = {"Path": path, "Recursive": True, "WithDecryption": True}
        parameters: list[Parameter] = []
        pages = 0

        try:
            while True:
                response = client.get_parameters_by_path(**request)
                pages += 1
                for item in response.get("Parameters", []):
                    parameters.append(Parameter(name=item["Name"], value=item["Value"]))

                next_token = response.get("NextToken")
                if not next_token:
                    break
                request["NextToken"] = next_token
        except ClientError as exc:
            error_code = exc.response.get("Error", {}).get("Code", "Unknown")
            logger.warning("parameter_fetch_failed", path=path, error_code=error_code)
            raise StoreFetchError(
                "Failed to fetch parameters from the parameter store.",
                details={"path": path, "error_code": error_code},
            ) from exc
        except BotoCoreError as exc:
            logger.warning("parameter_fetch_failed", path=path, error=sanitize_error(exc))
            raise StoreFetchError(
                "Failed to fetch parameters from the parameter store.",
                details={"path": path, "error_code": sanitize_error(exc)},
            ) from exc

        logger.debug("parameters_fetched", path=path, count=len(parameters), pages=pages)
        return parameters

    def close(self, clients: dict[CredentialSource, Any]) -> None:
        for source, client in clients.items():
            self.client_factory.release(source, client)
        clients.clear()

    def _client(self, source: CredentialSource, clients: dict[CredentialSource, Any] | None) -> Any:
        if clients is None:
            return self.client_factory.client_for(source)
        client = clients.get(source)
        if client is None:
            client = self.client_factory.client_for(source)
            clients[source] = client
        return client
