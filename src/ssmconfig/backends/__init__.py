"""Backend registry and built-in registrations."""

from ssmconfig.aws.factory import build_repository
from ssmconfig.backends.registry import (
    create_backend,
    list_backends,
    register_backend,
)

AWS_PARAMETER_STORE = "awsparameterstore"

register_backend(
    AWS_PARAMETER_STORE,
    build_repository,
    description="AWS Systems Manager Parameter Store",
)

__all__ = [
    "AWS_PARAMETER_STORE",
    "create_backend",
    "list_backends",
    "register_backend",
]
