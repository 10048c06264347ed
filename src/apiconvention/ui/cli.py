# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from apiconvention.app import describe_module
from apiconvention.config import ConfigurationError, configure_logging, get_inference_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from apiconvention.config import InferenceConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Infer API response metadata from conventions",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log convention selection details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe = subparsers.add_parser(
        "describe",
        help="Describe every controller action in a Python module",
    )
    describe.add_argument(
        "module",
        type=str,
        help="Dotted name of the module defining the controllers",
    )
    describe.add_argument(
        "--default-error-type",
        type=str,
        help="Dotted path of the fallback error type (defaults to config)",
    )
    describe.add_argument(
        "--no-default-conventions",
        action="store_true",
        help="Do not fall back to the built-in CRUD conventions",
    )
    describe.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log convention selection details",
    )
    describe.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _build_config(args: argparse.Namespace) -> InferenceConfig:
    if args.indent < 0:
        raise ValueError("Indent must be non-negative")
    return get_inference_config(
        default_error_type=args.default_error_type,
        include_default_conventions=False if args.no_default_conventions else None,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.verbose:
            configure_logging(level=logging.DEBUG, force=True)
        config = _build_config(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "describe":
            report = describe_module(parsed_args.module, config=config)
            print(report.model_dump_json(indent=parsed_args.indent or None))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during description")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
