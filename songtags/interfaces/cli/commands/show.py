"""
Show command: print the JSON record of each audio file.
"""

from __future__ import annotations

import argparse

from songtags.helpers.logging_helper import sanitize_exception_message
from songtags.interfaces.cli.ui import print_error, print_json, print_warning
from songtags.interfaces.cli.utils import build_services, read_songs


def cmd_show(args: argparse.Namespace) -> int:
    """
    Read tags from files and print one JSON object per song.

    Unreadable files are printed as placeholder records.
    """
    try:
        config_service, tags_service = build_services(args)
        songs, failed = read_songs(args.paths, config_service.get("music_directory", ""))

        if not songs and not failed:
            print_warning("No audio files found")
            return 1

        for song in songs:
            print_json(tags_service.render(song))
        for uri in failed:
            print_json(tags_service.render_absent(uri))
        return 0
    except Exception as e:
        print_error(sanitize_exception_message(e, "Failed to show tags"))
        return 1
