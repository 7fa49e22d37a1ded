"""
ssmconfig process configuration.

Pydantic-based settings loaded from SSMCONFIG_* environment variables and
an optional .env file.
"""

from ssmconfig.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
