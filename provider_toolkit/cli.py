"""
Command-line interface and main entry point for provider-toolkit.

Exit codes: 0 success, 1 wait failure or invalid ID, 2 AWS error, 130 cancelled.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading

from botocore.exceptions import BotoCoreError, ClientError

from .args_parser import parse_args
from .common.aws_client_factory import create_client, create_default_chain_client
from .common.error_utils import NotFoundError, error_code
from .config import ConfigurationError, load_region
from .registry import ID_CODECS, ID_HASHES, WAITERS
from .services.ec2.id_codec import IdParseError
from .state_waiter import WaitCancelledError, WaitError


def _create_service_client(service: str, region: str):
    """Create a client from the .env credentials, falling back to boto3's default chain."""
    try:
        return create_client(service, region)
    except ValueError as exc:
        logging.debug("%s; using the default boto3 credential chain", exc)
        return create_default_chain_client(service, region)


def _run_wait(args: argparse.Namespace) -> int:
    entry = WAITERS[args.waiter]
    region = args.region or load_region()
    client = _create_service_client(entry.service, region)

    kwargs = {}
    if entry.accepts_expected:
        kwargs["expected_value"] = args.expected
    if entry.accepts_timeout and args.timeout is not None:
        kwargs["timeout"] = args.timeout

    cancel_event = threading.Event()
    previous_handler = signal.signal(signal.SIGTERM, lambda *_: cancel_event.set())
    print(f"⏳ Waiting: {entry.description} ({args.resource_id} in {region})")
    try:
        entry.func(client, args.resource_id, cancel_event=cancel_event, **kwargs)
    except WaitCancelledError as exc:
        print(f"⚠️  {exc}")
        return 130
    except ConfigurationError as exc:
        print(f"❌ Invalid environment configuration: {exc}")
        return 1
    except (WaitError, NotFoundError) as exc:
        print(f"❌ {exc}")
        return 1
    except ClientError as exc:
        logging.error("AWS error (%s) while waiting for %s: %s", error_code(exc), args.resource_id, exc)
        return 2
    except BotoCoreError as exc:
        logging.error("AWS client error while waiting for %s: %s", args.resource_id, exc)
        return 2
    finally:
        signal.signal(signal.SIGTERM, previous_handler)

    print(f"✅ Done: {entry.description} ({args.resource_id})")
    return 0


def _run_id(args: argparse.Namespace) -> int:
    if args.id_action == "hash":
        create, _ = ID_HASHES[args.kind]
        print(create(args.first, args.second))
        return 0

    entry = ID_CODECS[args.kind]
    try:
        if args.id_action == "create":
            print(entry.create(*args.parts))
        else:
            for name, part in zip(entry.part_names, entry.parse(args.token)):
                if part:
                    print(f"{name}: {part}")
    except IdParseError as exc:
        print(f"❌ {exc}")
        return 1
    except ValueError as exc:
        print(f"❌ Cannot build {args.kind} ID: {exc}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the provider-toolkit CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "wait":
        return _run_wait(args)
    return _run_id(args)


if __name__ == "__main__":  # pragma: no cover - script entry point
    raise SystemExit(main())
