"""Main CLI entry point for sd_efficiency."""

import argparse
import sys

from sd_efficiency import __version__
from sd_efficiency.cli.commands import add, clear, export, list_entries, remove, summary
from sd_efficiency.cli.session import config_from_args
from sd_efficiency.utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sd-efficiency",
        description="Log SD card stress-test sessions and analyse their efficiency",
        epilog="Use 'sd-efficiency <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-file",
        help="Path to the JSON entry log (default: ~/.sd_efficiency/entries.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sd-efficiency add <total> <good> <bad>
    add_parser = subparsers.add_parser(
        "add",
        help="Log a new test session",
        description="Log a test session; total hours must equal good + bad hours",
    )
    add_parser.add_argument("total", help="Total hours the test ran")
    add_parser.add_argument("good", help="Hours of valid data")
    add_parser.add_argument("bad", help="Hours of corrupted or lost data")

    # sd-efficiency list
    subparsers.add_parser(
        "list",
        help="List logged entries",
        description="Show all logged entries, newest first",
    )

    # sd-efficiency summary
    subparsers.add_parser(
        "summary",
        help="Show the efficiency analysis",
        description="Show totals, average efficiency, data health ratio and trend",
    )

    # sd-efficiency remove <id>
    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove an entry by id",
        description="Remove a single logged entry",
    )
    remove_parser.add_argument("entry_id", help="Id of the entry to remove")

    # sd-efficiency clear
    clear_parser = subparsers.add_parser(
        "clear",
        help="Remove all entries",
        description="Clear the entire entry log",
    )
    clear_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not ask for confirmation",
    )

    # sd-efficiency export <path>
    export_parser = subparsers.add_parser(
        "export",
        help="Export entries to CSV",
        description="Write all logged entries to a CSV file",
    )
    export_parser.add_argument("output", help="Path of the CSV file to write")

    # sd-efficiency gui
    subparsers.add_parser(
        "gui",
        help="Launch the dashboard window",
        description="Open the SD Efficiency Pro desktop dashboard",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(config_from_args(args).log_level)

    # Dispatch to appropriate command
    if args.command == "add":
        return add.add_command(args)
    elif args.command == "list":
        return list_entries.list_command(args)
    elif args.command == "summary":
        return summary.summary_command(args)
    elif args.command == "remove":
        return remove.remove_command(args)
    elif args.command == "clear":
        return clear.clear_command(args)
    elif args.command == "export":
        return export.export_command(args)
    elif args.command == "gui":
        from sd_efficiency.gui.app import main as gui_main

        return gui_main(data_file=args.data_file)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
