"""
Media server protocol package: response parsing and tagtypes negotiation.
"""

from .mpd_response_comp import check_ack, parse_audio_format, parse_song_pairs, parse_songs, parse_tagtypes
from .tagtypes_comp import (
    build_disable_all_tags_command,
    build_enable_all_tags_command,
    build_enable_tags_commands,
    parse_server_version,
    supports_tagtypes,
)

__all__ = [
    "build_disable_all_tags_command",
    "build_enable_all_tags_command",
    "build_enable_tags_commands",
    "check_ack",
    "parse_audio_format",
    "parse_server_version",
    "parse_song_pairs",
    "parse_songs",
    "parse_tagtypes",
    "supports_tagtypes",
]
