"""
Application settings using Pydantic.

Provides environment-based configuration loading with SSMCONFIG_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from ssmconfig.aws.properties import LOWEST_PRECEDENCE, PATH_SEPARATOR, AwsParameterStoreProperties


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SSMCONFIG_",
        extra="ignore",
    )

    # Backend selection
    backend: str = "awsparameterstore"

    # Parameter store repository
    order: int = LOWEST_PRECEDENCE
    profile_separator: str = PATH_SEPARATOR
    path_prefix: str = PATH_SEPARATOR
    region: str | None = None
    aws_profile: str | None = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    def repository_properties(self) -> AwsParameterStoreProperties:
        return AwsParameterStoreProperties(
            order=self.order,
            profile_separator=self.profile_separator,
            path_prefix=self.path_prefix,
            region=self.region,
            profile=self.aws_profile,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
