"""Command line entrypoint for cola."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

import structlog
from pydantic import ValidationError

from cola import __version__
from cola.cidr import CidrError, CidrParseError
from cola.config import Settings, load_settings
from cola.services.allocation_service import AllocationService
from cola.utils.logger import setup_logging

logger = structlog.get_logger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cola",
        description="CIDR Optimization Lookup & Assignment: recommend CIDR ranges based off of current network usage.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="settings file in .env format (default: ./.env)")
    parser.add_argument("--debug", action="store_true", help="enable debugging logs")
    parser.add_argument("--log-level", default=None, help="log level (ERROR, WARN, INFO, DEBUG)")

    subparsers = parser.add_subparsers(dest="command")

    find = subparsers.add_parser("find", help="find the first available CIDR of a given size")
    find.add_argument("--root", default=None, help="parent CIDR to allocate from (default: $COLA_ROOT_CIDR)")
    find.add_argument(
        "--mask",
        default=None,
        help="desired prefix length, e.g. 24 or /24 (default: $COLA_DESIRED_PREFIX)",
    )
    find.add_argument(
        "--used",
        action="append",
        default=None,
        help="CIDR already in use. Repeatable, accepts comma separated lists (default: $COLA_USED_CIDRS)",
    )
    find.add_argument("--max-visits", type=_positive_int, default=None, help="search node budget")
    find.add_argument("--output", choices=("text", "json"), default="text")

    return parser


def cmd_find(args: argparse.Namespace, settings: Settings) -> int:
    """Run one allocation search and print the result."""

    root_cidr = args.root or settings.root_cidr
    desired_prefix = args.mask if args.mask is not None else settings.desired_prefix
    used_cidrs = args.used if args.used is not None else settings.used_cidr_list

    if not root_cidr:
        print("error: root CIDR is required (--root or COLA_ROOT_CIDR)", file=sys.stderr)
        return 1
    if desired_prefix is None:
        print("error: desired prefix is required (--mask or COLA_DESIRED_PREFIX)", file=sys.stderr)
        return 1

    if args.max_visits is not None:
        settings = settings.model_copy(update={"max_visits": args.max_visits})

    service = AllocationService(settings=settings)
    try:
        block = service.find_from_text(root_cidr, desired_prefix, used_cidrs)
    except (CidrError, CidrParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output == "json":
        print(json.dumps({"cidr": str(block)}))
    else:
        print(block)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and dispatch the subcommand."""

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.debug else (args.log_level or settings.log_level)
    setup_logging(level, settings.log_format, settings.log_file_path)
    if args.config:
        logger.debug("Using config file", path=args.config)

    if args.command == "find":
        return cmd_find(args, settings)

    parser.print_usage(sys.stderr)
    print("error: a subcommand is required", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
