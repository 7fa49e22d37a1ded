"""
Config token providers.

A token provider hands the repository the credentials token sent by the
client for the current request. ``HeaderTokenProvider`` reads it from the
request headers bound with ``bind_request_headers``; the binding lives in a
context variable so concurrent requests never see each other's token.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping, Protocol

CONFIG_TOKEN_HEADER = "X-Config-Token"

_request_headers: ContextVar[Mapping[str, str] | None] = ContextVar(
    "ssmconfig_request_headers", default=None
)


class ConfigTokenProvider(Protocol):
    def get_token(self) -> str | None:
        ...


class StaticTokenProvider:
    """Always returns the same token (or none)."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token


class HeaderTokenProvider:
    """Reads the token from the headers of the request being served."""

    def __init__(self, header: str = CONFIG_TOKEN_HEADER) -> None:
        self.header = header

    def get_token(self) -> str | None:
        headers = _request_headers.get()
        if not headers:
            return None
        wanted = self.header.lower()
        for key, value in headers.items():
            if key.lower() == wanted:
                return value
        return None


@contextmanager
def bind_request_headers(headers: Mapping[str, str]) -> Iterator[None]:
    """Expose ``headers`` to ``HeaderTokenProvider`` for the enclosed block."""
    reset_token = _request_headers.set(headers)
    try:
        yield
    finally:
        _request_headers.reset(reset_token)
