"""Environment data model and repository contract."""

from ssmconfig.environment.base import EnvironmentRepository
from ssmconfig.environment.models import Environment, Parameter, PropertySource

__all__ = [
    "Environment",
    "EnvironmentRepository",
    "Parameter",
    "PropertySource",
]
