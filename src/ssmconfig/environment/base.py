from __future__ import annotations

from typing import Protocol, runtime_checkable

from ssmconfig.environment.models import Environment


@runtime_checkable
class EnvironmentRepository(Protocol):
    """Minimal repository interface exposed to the configuration server."""

    @property
    def order(self) -> int:
        """Merge precedence among repositories; lower wins."""
        ...

    def find_one(
        self,
        application: str,
        profile: str | None,
        label: str | None = None,
        include_origin: bool = False,
    ) -> Environment:
        ...
