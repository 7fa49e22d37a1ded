from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PATH_SEPARATOR = "/"
LOWEST_PRECEDENCE = 2**31 - 1


class AwsParameterStoreProperties(BaseModel):
    """Settings for one parameter store repository, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    order: int = Field(LOWEST_PRECEDENCE, description="Merge precedence, lower wins")
    profile_separator: str = Field(
        PATH_SEPARATOR, description="Separator between application and profile segments"
    )
    path_prefix: str = Field(PATH_SEPARATOR, description="Root segment prepended to every path")
    region: str | None = Field(None, description="Region override for the SSM endpoint")
    profile: str | None = Field(
        None, description="Named local AWS credentials profile used absent a client token"
    )
