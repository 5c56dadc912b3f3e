#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from songtags.__version__ import __version__
from songtags.helpers.logging_helper import configure_logging
from songtags.interfaces.cli.commands.export import cmd_export
from songtags.interfaces.cli.commands.search import cmd_search
from songtags.interfaces.cli.commands.show import cmd_show
from songtags.interfaces.cli.commands.tags import cmd_tags
from songtags.services.config_service import ConfigService


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="songtags",
        description="songtags - render and search music tags as JSON",
        epilog="Examples:\n"
        "  songtags show ~/Music/album                    # Print JSON records\n"
        "  songtags show song.flac --tags Artist,Title    # Only these tags\n"
        "  songtags search davis ~/Music                  # Substring search\n"
        "  songtags tags                                  # Show resolved tag lists\n"
        "  songtags export songs.json ~/Music             # Write records atomically",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", help="extra YAML config file")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'songtags <command> --help' for command-specific help)",
    )

    # show: Print records
    s = sub.add_parser("show", help="Print the JSON record of audio files")
    s.add_argument("paths", nargs="+", help="audio files or directories")
    s.add_argument("--tags", help="comma-separated tag list (overrides config)")
    s.set_defaults(func=cmd_show)

    # search: Substring search
    s = sub.add_parser("search", help="List audio files whose tags contain TERM")
    s.add_argument("term", help="search term (case-insensitive)")
    s.add_argument("paths", nargs="+", help="audio files or directories")
    s.set_defaults(func=cmd_search)

    # tags: Show tag lists
    s = sub.add_parser("tags", help="Show enabled, search and browse tags")
    s.add_argument("--tags", help="comma-separated tag list (overrides config)")
    s.set_defaults(func=cmd_tags)

    # export: Write records to a file
    s = sub.add_parser("export", help="Write JSON records of audio files to OUTPUT")
    s.add_argument("output", help="destination JSON file")
    s.add_argument("paths", nargs="+", help="audio files or directories")
    s.add_argument("--tags", help="comma-separated tag list (overrides config)")
    s.set_defaults(func=cmd_export)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    level = logging.DEBUG if args.verbose else ConfigService(config_path=args.config).get("log_level", "INFO")
    configure_logging(level)

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
