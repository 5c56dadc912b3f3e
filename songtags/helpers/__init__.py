"""
Helpers package.
"""

from .files import AUDIO_EXTENSIONS, basename_uri, collect_audio_files, is_audio_file, relative_uri
from .json_helper import json_field, json_string, json_string_plain
from .logging_helper import configure_logging, sanitize_exception_message
from .tag_kinds import TAG_COUNT, TagKind, is_multivalue, parse_tag_name, sort_alias, tag_name

__all__ = [
    "AUDIO_EXTENSIONS",
    "TAG_COUNT",
    "TagKind",
    "basename_uri",
    "collect_audio_files",
    "configure_logging",
    "is_audio_file",
    "is_multivalue",
    "json_field",
    "json_string",
    "json_string_plain",
    "parse_tag_name",
    "relative_uri",
    "sanitize_exception_message",
    "sort_alias",
    "tag_name",
]
