"""Configuration server backend for AWS Systems Manager Parameter Store."""

__version__ = "0.1.0"
