"""Command-line argument parsing and configuration setup."""

import argparse
from pathlib import Path

import pytz

from . import config


COMMANDS = {
    "status": "Show the treasure count and the selected pool",
    "show": "Show the selected pool",
    "next": "Select the next pool (wraps around)",
    "prev": "Select the previous pool (wraps around)",
    "claim": "Claim treasure at the selected pool, or at POOL_ID",
    "stamps": "Show the current page of claimed stamps",
    "page-next": "Go to the next stamps page",
    "page-prev": "Go to the previous stamps page",
    "reset": "Forget all claimed treasure on this device",
    "open-maps": "Print a native maps link for the selected pool",
    "gui": "Open the desktop passport window",
}


def parse_args(argv=None):
    """Parse command-line arguments and return parsed args."""
    parser = argparse.ArgumentParser(description="Track your treasure hunt around the harbour pools")
    parser.add_argument(
        "catalog",
        type=str,
        help="Path or URL of the pools JSON catalog",
    )
    parser.add_argument(
        "--state",
        default=str(config.state_path),
        help=f"File where progress is saved (default: {config.state_path})",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=config.page_size,
        help=f"Stamps shown per page (default: {config.page_size})",
    )
    parser.add_argument(
        "--timezone",
        default=config.timezone,
        help=f"Timezone used to date claims (default: {config.timezone})",
    )
    parser.add_argument(
        "--local-time",
        action="store_true",
        help="Date each claim in the pool's own timezone, looked up from its coordinates",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    for name, help_text in COMMANDS.items():
        command = commands.add_parser(name, help=help_text)
        if name == "claim":
            command.add_argument("pool_id", nargs="?", default=None, help="Pool id (default: selected pool)")
        elif name == "reset":
            command.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
        elif name == "open-maps":
            command.add_argument("--ios", action="store_true", help="Use Apple Maps instead of Google Maps")

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "status"
    return args


def setup_config(argv=None):
    """Parse arguments and apply them to config module."""
    args = parse_args(argv)

    # Validate: a page must hold at least one stamp
    if args.page_size < 1:
        print("Error: --page-size must be at least 1.")
        exit(1)

    # Validate: claims need a real timezone to be dated in
    try:
        pytz.timezone(args.timezone)
    except pytz.UnknownTimeZoneError:
        print(f"Error: unknown timezone '{args.timezone}'.")
        exit(1)

    # Apply all args to config
    config.catalog_source = args.catalog
    config.state_path = Path(args.state).expanduser()
    config.page_size = args.page_size
    config.timezone = args.timezone
    config.timezone_from_location = args.local_time

    return args
