from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

import yaml

from store_config.composite import load_app_and_logger_config
from store_config.config import LoggingSettings, load_dotenv_if_present
from store_config.errors import ConfigLoaderError
from store_config.logging import init_logging
from store_config.selector import get_loader
from store_config.transforms import placeholder_transform

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="store-config", description="Load and print resolved YAML configuration")
    parser.add_argument(
        "--mode",
        default=None,
        help="Store backend: nacos, consul, or anything else for local files (default: $CONFIG_MODE)",
    )
    parser.add_argument(
        "--dotenv",
        default=".env",
        help="Path to a .env file loaded before the backend is selected (default: .env)",
    )
    parser.add_argument(
        "--no-dotenv",
        action="store_true",
        help="Disable loading .env",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: show
    show_parser = subparsers.add_parser("show", help="Load one document and print it")
    show_parser.add_argument("name", nargs="?", default=None, help="Document name (default: $CONFIG_FILE)")

    # Command: pair
    pair_parser = subparsers.add_parser("pair", help="Load an app and a logger document through one backend")
    pair_parser.add_argument("app_file")
    pair_parser.add_argument("logger_file")
    pair_parser.add_argument(
        "--set",
        dest="values",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Placeholder value substituted as #{NAME} in the logger document (repeatable)",
    )

    return parser


def _parse_values(items: Sequence[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for item in items:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got: {item}")
        values[name] = value
    return values


def _dump(document: object) -> str:
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


async def _show(args: argparse.Namespace) -> None:
    name = args.name or os.environ.get("CONFIG_FILE")
    if not name:
        raise ValueError("No document name given and CONFIG_FILE is not set.")
    config = await get_loader(args.mode).load(name)
    sys.stdout.write(_dump(config))


async def _pair(args: argparse.Namespace) -> None:
    transform = placeholder_transform(_parse_values(args.values))
    result = await load_app_and_logger_config(args.mode, args.app_file, args.logger_file, transform)
    sys.stdout.write(_dump({"app": result.app_conf, "logger": result.logger_conf}))


async def _main_async(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    init_logging(LoggingSettings(level=args.log_level))
    if not args.no_dotenv:
        load_dotenv_if_present(Path(args.dotenv))
    if args.mode is None:
        args.mode = os.environ.get("CONFIG_MODE")

    try:
        if args.command == "show":
            await _show(args)
        elif args.command == "pair":
            await _pair(args)
    except (ConfigLoaderError, ValueError) as e:
        logger.error("Failed to load configuration. error=%s", e)
        return 1
    return 0


def main() -> None:
    try:
        sys.exit(asyncio.run(_main_async()))
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")


if __name__ == "__main__":
    main()
