"""
Command line interface for multipart secrets.

Usage:
    multipart-secrets add --env prod --secret-name app/config --json-data '{"KEY": "v"}'
    multipart-secrets update --env prod --secret-name app/config --json-data '{"KEY": "v2"}'
    multipart-secrets add --env prod --secret-name app/config --path Db --json-data '{"Pass": "x"}'
    multipart-secrets find --secret-name app/config --key-path Db.Pass
    multipart-secrets describe --secret-name app/config

Dependencies: argparse, boto3 (via boundary), pydantic-settings
System role: Process entry point; maps errors to exit codes
"""

import argparse
import logging
import sys

from multipart_secrets.boundary.aws import SecretsManagerPartStore
from multipart_secrets.configs import Settings, get_settings
from multipart_secrets.core.exceptions import MultipartSecretError
from multipart_secrets.core.redistribution import (
    MultipartSecretEngine,
    MutationRequest,
    validate_base_name,
)
from multipart_secrets.observability import (
    configure_logging,
    get_logger,
    log_exception_with_context,
    log_with_context,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_store(settings: Settings, region: str | None = None) -> SecretsManagerPartStore:
    """Create the Secrets Manager backend from settings."""
    store_settings = settings.secrets_store
    return SecretsManagerPartStore(
        region=region or store_settings.region,
        endpoint_url=store_settings.endpoint_url,
        batch_size=store_settings.batch_size,
    )


def mutate(args: argparse.Namespace, settings: Settings, force_update: bool) -> int:
    """Run add (force_update=False) or update (force_update=True)."""
    request = MutationRequest.from_json(args.json_data, path=args.path, force_update=force_update)
    store = build_store(settings, args.region)
    engine = MultipartSecretEngine(store, settings=settings, max_part_bytes=args.max_part_bytes)

    base_name = validate_base_name(args.secret_name)
    store.require_base(base_name)
    result = engine.run_mutation(base_name, request, environment=args.env)

    operation = "Update" if force_update else "Add"
    print(
        f"{operation} operation completed successfully. "
        f"Total keys: {result.key_count}, Total secrets: {result.part_count}"
    )
    return EXIT_OK


def find(args: argparse.Namespace, settings: Settings) -> int:
    """Print the part that holds a key path."""
    engine = MultipartSecretEngine(build_store(settings, args.region), settings=settings)
    result = engine.run_find(args.secret_name, args.key_path)
    if not result.found:
        print(f"Key path '{args.key_path}' not found in any part of '{result.base_name}'")
        return EXIT_FAILURE
    print(f"Key path '{args.key_path}' found in '{result.part_name}' (part {result.part_index})")
    return EXIT_OK


def describe(args: argparse.Namespace, settings: Settings) -> int:
    """Print the part layout of a secret."""
    engine = MultipartSecretEngine(
        build_store(settings, args.region),
        settings=settings,
        max_part_bytes=args.max_part_bytes,
    )
    description = engine.describe(args.secret_name)

    print(f"Secret: {description.base_name}")
    print(f"  Limit per part: {description.max_part_bytes} bytes")
    for part in description.parts:
        print(f"  {part.name}: {part.key_count} keys, {part.size_bytes} bytes")
    print(f"Total keys: {description.key_count}, Total secrets: {description.part_count}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--secret-name", "--secret_name", dest="secret_name", required=True,
                        help="Base name of the secret")
    common.add_argument("--region", default=None, help="AWS region (default: boto3 chain)")
    common.add_argument("--max-part-bytes", type=int, default=None,
                        help="Maximum encoded size of one part (default: 51200)")
    common.add_argument("--log-level", default=None, help="Logging level (default: INFO)")

    parser = argparse.ArgumentParser(
        prog="multipart-secrets",
        description="Manage secrets split across multiple Secrets Manager records",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("add", "Add new keys (fails if any key already exists)"),
        ("update", "Update existing keys (fails if any key is missing)"),
    ):
        sub = subparsers.add_parser(command, parents=[common], help=help_text)
        sub.add_argument("--env", required=True, help="The environment (e.g., staging, prod)")
        sub.add_argument("--json-data", "--json_data", dest="json_data", required=True,
                         help="JSON object with the key-value pairs")
        sub.add_argument("--path", default=None,
                         help="Dot-separated path of the nested object to modify")

    find_parser = subparsers.add_parser("find", parents=[common],
                                        help="Show which part holds a key path")
    find_parser.add_argument("--key-path", "--key_path", dest="key_path", required=True,
                             help="Dot-separated key path to look up")

    subparsers.add_parser("describe", parents=[common], help="Show part names, key counts and sizes")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        if args.command == "add":
            return mutate(args, settings, force_update=False)
        if args.command == "update":
            return mutate(args, settings, force_update=True)
        if args.command == "find":
            return find(args, settings)
        if args.command == "describe":
            return describe(args, settings)
    except MultipartSecretError as e:
        log_with_context(logger, logging.ERROR, f"ERROR: {e.message}", **e.details)
        return EXIT_FAILURE
    except ValueError as e:
        logger.error(f"ERROR: {e}")
        return EXIT_FAILURE
    except Exception as e:
        log_exception_with_context(logger, "Unexpected failure", e, command=args.command)
        return EXIT_FAILURE

    logger.error(f"Unknown command: {args.command}")
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
