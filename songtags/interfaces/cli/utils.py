"""
Shared utility functions for CLI commands.
Helper functions used across multiple command modules.
"""

from __future__ import annotations

import argparse
import logging

from songtags.components.tagging.tagging_reader_comp import read_song_from_file
from songtags.helpers.dto.config_dto import TagConfig
from songtags.helpers.dto.song_dto import Song
from songtags.helpers.files import collect_audio_files, relative_uri
from songtags.services.config_service import ConfigService
from songtags.services.tags_service import TagsService

__all__ = [
    "build_services",
    "read_songs",
]

logger = logging.getLogger(__name__)


def build_services(args: argparse.Namespace) -> tuple[ConfigService, TagsService]:
    """Create the config and tags services for one CLI invocation.

    Local files expose every tag kind, so all kinds are allowed; a
    ``--tags`` option replaces the configured tag list.
    """
    config_service = ConfigService(config_path=getattr(args, "config", None))
    tag_config = config_service.make_tag_config()
    override = getattr(args, "tags", None)
    if override:
        tag_config = TagConfig(tags=override, search_tags=tag_config.search_tags, browse_tags=tag_config.browse_tags)

    tags_service = TagsService()
    tags_service.reconfigure(tag_config)
    return config_service, tags_service


def read_songs(paths: list[str], music_directory: str) -> tuple[list[Song], list[str]]:
    """
    Read every audio file below ``paths``.

    Returns:
        (songs, failed_uris); unreadable files are reported, not raised
    """
    songs: list[Song] = []
    failed: list[str] = []
    for path in collect_audio_files(paths):
        try:
            songs.append(read_song_from_file(path, music_directory))
        except (ValueError, RuntimeError) as e:
            logger.warning(f"[CLI] Skipping {path}: {e}")
            failed.append(relative_uri(path, music_directory))
    return songs, failed
