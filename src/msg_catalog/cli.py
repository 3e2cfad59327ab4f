"""Command-line entry point for the message catalog."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from msg_catalog.catalog import MessageCatalog, seed_default_messages
from msg_catalog.core import (
    AppSettings,
    IdAllocator,
    configure_logging,
    load_app_settings,
)
from msg_catalog.core.models import MessageKind
from msg_catalog.shell import MenuShell

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(description="In-memory message catalog")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    parser.add_argument(
        "--no-seed",
        dest="seed",
        action="store_false",
        default=None,
        help="Start with an empty catalog instead of the sample messages.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="menu",
        choices=["menu", "list", "previews", "digital", "search"],
        help="Operation to execute (default: menu).",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Keywords for the search command.",
    )
    return parser


def build_catalog(settings: AppSettings) -> MessageCatalog:
    """Create the catalog, seeding it when configured to."""
    catalog = MessageCatalog(allocator=IdAllocator())
    if settings.catalog.seed_defaults:
        seed_default_messages(catalog)
    return catalog


def execute(
    args: argparse.Namespace, settings: AppSettings, catalog: MessageCatalog
) -> None:
    """Execute the requested CLI command."""
    command = args.command
    if command == "menu":
        MenuShell(catalog, settings.shell).run()
    elif command == "list":
        for message in catalog.all():
            print(f"Message Type: {message.message_type}\n{message}")
    elif command == "previews":
        for preview in catalog.previews():
            print(preview)
    elif command == "digital":
        for message in catalog.filter(MessageKind.DIGITAL):
            print(f"{message.generate_preview()} ({message.communication_method()})")
    elif command == "search":
        result = catalog.search(args.words)
        if not result.keywords:
            print("No valid words provided.")
            return
        print(
            f"Number of messages containing any of [{', '.join(result.keywords)}]: "
            f"{result.count}"
        )
        for message in result.matches:
            print(message.generate_preview())


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_app_settings(env_file=args.env_file)
    if args.seed is False:
        settings = settings.model_copy(
            update={
                "catalog": settings.catalog.model_copy(update={"seed_defaults": False})
            }
        )
    configure_logging(settings.logging)
    LOGGER.debug("Starting %s command", args.command)
    execute(args, settings, build_catalog(settings))


if __name__ == "__main__":
    main()
