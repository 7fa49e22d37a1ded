"""Core modules for ssmconfig - centralized definitions and utilities."""

from ssmconfig.core.errors import (
    ConfigurationError,
    CredentialParseError,
    ExitCode,
    ProviderError,
    SsmConfigError,
    StoreFetchError,
    format_error_message,
    main_with_error_handling,
    sanitize_error,
)

__all__ = [
    "ExitCode",
    "SsmConfigError",
    "ConfigurationError",
    "CredentialParseError",
    "ProviderError",
    "StoreFetchError",
    "main_with_error_handling",
    "format_error_message",
    "sanitize_error",
]
