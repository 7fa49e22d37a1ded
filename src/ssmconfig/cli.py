"""
Command line entry point.

Commands:
    ssmconfig resolve APP PROFILE   - Resolve an environment and print it as JSON
    ssmconfig encode-token          - Encode temporary credentials as a client token
    ssmconfig backends              - List registered backends
"""

from __future__ import annotations

import argparse
import getpass
import json
from typing import Any, Sequence

from ssmconfig.aws.credentials import SessionCredentials
from ssmconfig.backends import create_backend, list_backends
from ssmconfig.config import get_settings
from ssmconfig.core.errors import main_with_error_handling
from ssmconfig.logging import configure_logging
from ssmconfig.tokens import StaticTokenProvider


@main_with_error_handling()
def resolve_command(args: argparse.Namespace) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    overrides: dict[str, Any] = {}
    if args.path_prefix is not None:
        overrides["path_prefix"] = args.path_prefix
    if args.profile_separator is not None:
        overrides["profile_separator"] = args.profile_separator
    if args.region is not None:
        overrides["region"] = args.region
    if args.aws_profile is not None:
        overrides["profile"] = args.aws_profile
    properties = settings.repository_properties().model_copy(update=overrides)

    repository = create_backend(
        settings.backend,
        properties,
        token_provider=StaticTokenProvider(args.token),
    )
    environment = repository.find_one(args.application, args.profile, args.label)
    print(json.dumps(environment.to_dict(), indent=2))
    return 0


@main_with_error_handling()
def encode_token_command(args: argparse.Namespace) -> int:
    secret = args.secret_access_key or getpass.getpass("Secret access key: ")
    credentials = SessionCredentials(
        AccessKeyId=args.access_key_id,
        SecretAccessKey=secret,
        SessionToken=args.session_token,
    )
    print(credentials.encode())
    return 0


def backends_command() -> int:
    for spec in list_backends():
        if spec.description:
            print(f"{spec.name}\t{spec.description}")
        else:
            print(spec.name)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ssmconfig", description="Resolve configuration from AWS Parameter Store"
    )
    subparsers = parser.add_subparsers(dest="command")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve an application environment")
    resolve_parser.add_argument("application", help="Application name")
    resolve_parser.add_argument("profile", help="Comma separated profiles")
    resolve_parser.add_argument("--label", default=None, help="Label (passed through)")
    resolve_parser.add_argument("--token", default=None, help="Encoded client credentials token")
    resolve_parser.add_argument("--region", default=None, help="SSM region override")
    resolve_parser.add_argument("--path-prefix", default=None, help="Root path prefix")
    resolve_parser.add_argument(
        "--profile-separator", default=None, help="Separator between application and profile"
    )
    resolve_parser.add_argument("--aws-profile", default=None, help="Local AWS credentials profile")

    token_parser = subparsers.add_parser("encode-token", help="Encode a client credentials token")
    token_parser.add_argument("--access-key-id", required=True)
    token_parser.add_argument("--secret-access-key", default=None)
    token_parser.add_argument("--session-token", required=True)

    subparsers.add_parser("backends", help="List registered backends")

    args = parser.parse_args(argv)

    if args.command == "resolve":
        return resolve_command(args)
    if args.command == "encode-token":
        return encode_token_command(args)
    if args.command == "backends":
        return backends_command()

    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - exercised via module entrypoint
    raise SystemExit(main())
