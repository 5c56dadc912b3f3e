"""
Search command: list audio files whose tags contain a term.
"""

from __future__ import annotations

import argparse

from songtags.components.tagging.tag_render_comp import render_display
from songtags.helpers.logging_helper import sanitize_exception_message
from songtags.helpers.tag_kinds import TagKind
from songtags.interfaces.cli.ui import print_error, print_info, show_spinner, show_table
from songtags.interfaces.cli.utils import build_services, read_songs


def cmd_search(args: argparse.Namespace) -> int:
    """
    Case-insensitive substring search over the configured search tags.
    """
    try:
        config_service, tags_service = build_services(args)
        songs, _ = show_spinner(
            "Reading tags...",
            read_songs,
            args.paths,
            config_service.get("music_directory", ""),
        )
        found = tags_service.search(songs, args.term)

        if not found:
            print_info(f"No songs match {args.term!r}")
            return 0

        rows = []
        for song in found:
            artist, _ = render_display(song.tags, TagKind.ARTIST, song.uri)
            title, _ = render_display(song.tags, TagKind.TITLE, song.uri)
            rows.append((artist, title, song.uri))
        show_table(f"{len(found)} of {len(songs)} songs match", ["Artist", "Title", "uri"], rows)
        return 0
    except Exception as e:
        print_error(sanitize_exception_message(e, "Search failed"))
        return 1
