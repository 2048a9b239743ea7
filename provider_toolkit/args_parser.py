"""
Argument parsing for the provider-toolkit CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse

from .registry import ID_CODECS, ID_HASHES, WAITERS


def add_wait_arguments(subparsers) -> None:
    """Add the `wait` command."""
    parser = subparsers.add_parser("wait", help="Wait for a resource to reach its target state.")
    parser.add_argument("waiter", choices=sorted(WAITERS), help="Waiter to run.")
    parser.add_argument("resource_id", help="ID or ARN of the resource to poll.")
    parser.add_argument("--region", help="AWS region (default: PROVIDER_TOOLKIT_REGION or us-east-1).")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Override the waiter timeout in seconds (sns-subscription-confirmed, "
        "apigatewayv2-domain-name-available).",
    )
    parser.add_argument(
        "--expected",
        default="false",
        help="Expected PendingConfirmation value for sns-subscription-confirmed (default: false).",
    )


def add_id_arguments(subparsers) -> None:
    """Add the `id` command with its create/parse/hash actions."""
    parser = subparsers.add_parser("id", help="Build, split or synthesize composite resource IDs.")
    actions = parser.add_subparsers(dest="id_action", required=True)

    create = actions.add_parser("create", help="Join ID parts with the format's separator.")
    create.add_argument("kind", choices=sorted(ID_CODECS))
    create.add_argument("parts", nargs="+", help="ID parts in order.")

    parse = actions.add_parser("parse", help="Split a composite ID into its parts.")
    parse.add_argument("kind", choices=sorted(ID_CODECS))
    parse.add_argument("token", help="Composite ID to split.")

    hash_parser = actions.add_parser("hash", help="Synthesize a hashed ID.")
    hash_parser.add_argument("kind", choices=sorted(ID_HASHES))
    hash_parser.add_argument("first", help="route: route table ID; vpn-attachment: VPN gateway ID.")
    hash_parser.add_argument("second", help="route: destination; vpn-attachment: VPC ID.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="provider-toolkit",
        description="Poll AWS resources until they settle and work with composite resource IDs.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_wait_arguments(subparsers)
    add_id_arguments(subparsers)
    return parser


def _validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate parsed arguments."""
    if args.command == "wait":
        entry = WAITERS[args.waiter]
        if args.timeout is not None and not entry.accepts_timeout:
            parser.error(f"--timeout is not supported by {args.waiter}")
        if args.timeout is not None and args.timeout <= 0:
            parser.error("--timeout must be positive.")
    if args.command == "id" and args.id_action == "create":
        entry = ID_CODECS[args.kind]
        most = len(entry.part_names)
        least = most - entry.optional_parts
        if not least <= len(args.parts) <= most:
            parser.error(
                f"{args.kind} takes {least if least == most else f'{least} to {most}'} parts: "
                f"{' '.join(entry.part_names)}"
            )


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_args(args, parser)
    return args
