"""
Tagging package.
"""

from .tag_filter_comp import filter_songs, matches, normalize_search_term
from .tag_normalization_comp import (
    normalize_id3_tags,
    normalize_mp4_tags,
    normalize_vorbis_tags,
)
from .tag_parsing_comp import parse_enabled_tags, tagset_all, tagset_contains, tagset_from_kinds
from .tag_render_comp import (
    render_absent_record,
    render_audio_format,
    render_display,
    render_json,
    render_object,
    render_record,
    render_song,
)
from .tagging_reader_comp import build_tag_store, read_song_from_file

__all__ = [
    "build_tag_store",
    "filter_songs",
    "matches",
    "normalize_id3_tags",
    "normalize_mp4_tags",
    "normalize_search_term",
    "normalize_vorbis_tags",
    "parse_enabled_tags",
    "read_song_from_file",
    "render_absent_record",
    "render_audio_format",
    "render_display",
    "render_json",
    "render_object",
    "render_record",
    "render_song",
    "tagset_all",
    "tagset_contains",
    "tagset_from_kinds",
]
