"""Tags service - owns the active tag configuration.

Holds the server's capability set and the resolved TagSettings, and offers
rendering and search entry points that always read one consistent settings
snapshot.

Settings are immutable; reconfigure() builds a new TagSettings and swaps it
in with a single assignment, so concurrent readers see either the old or the
new lists, never a mix.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from songtags.components.mpd.tagtypes_comp import build_enable_tags_commands
from songtags.components.tagging.tag_filter_comp import filter_songs, normalize_search_term
from songtags.components.tagging.tag_parsing_comp import parse_enabled_tags, tagset_all
from songtags.components.tagging.tag_render_comp import render_absent_record, render_object, render_song
from songtags.helpers.dto.config_dto import TagConfig, TagSettings
from songtags.helpers.dto.song_dto import Song
from songtags.helpers.dto.tags_dto import TagSet


class TagsService:
    """
    Service for tag capability negotiation and tag list configuration.

    Typical lifecycle:
        service = TagsService()
        service.set_server_capabilities(parse_tagtypes(lines))
        service.reconfigure(config_service.make_tag_config())
        commands = service.enable_tags_commands(server_version)
    """

    def __init__(self, allowed: TagSet | None = None, tags_enabled: bool = True) -> None:
        """Initialize with every kind allowed until the server says otherwise."""
        self._allowed = allowed if allowed is not None else tagset_all()
        self._tags_enabled = tags_enabled
        self._settings = TagSettings()
        self._logger = logging.getLogger(__name__)

    @property
    def allowed(self) -> TagSet:
        """Kinds the server declared it can report."""
        return self._allowed

    @property
    def tags_enabled(self) -> bool:
        """False when the server reports no tags at all."""
        return self._tags_enabled

    @property
    def settings(self) -> TagSettings:
        """Current settings snapshot."""
        return self._settings

    def set_server_capabilities(self, allowed: TagSet, tags_enabled: bool = True) -> None:
        """
        Record the server's capability set.

        Call reconfigure() afterwards to re-validate the tag lists.
        """
        self._allowed = allowed
        self._tags_enabled = tags_enabled and len(allowed) > 0
        if not self._tags_enabled:
            self._logger.warning("[TagsService] Server reports no tags, only titles will be rendered")

    def reconfigure(self, tag_config: TagConfig) -> TagSettings:
        """
        Resolve the configured tag lists and swap them in.

        ``tags`` is validated against the server's capabilities, search and
        browse tags against the resulting ``tags``.

        Args:
            tag_config: Comma-separated tag lists from configuration

        Returns:
            The new settings
        """
        tags = parse_enabled_tags(tag_config.tags, self._allowed, "tags")
        search_tags = parse_enabled_tags(tag_config.search_tags, tags, "search tags")
        browse_tags = parse_enabled_tags(tag_config.browse_tags, tags, "browse tags")
        settings = TagSettings(tags=tags, search_tags=search_tags, browse_tags=browse_tags)
        self._settings = settings
        self._logger.debug(f"[TagsService] Reconfigured with {len(tags)} enabled tags")
        return settings

    def enable_tags_commands(self, server_version: tuple[int, int, int]) -> list[str]:
        """Tagtypes commands asking the server to report the enabled tags only."""
        return build_enable_tags_commands(self._settings.tags, server_version)

    def render(self, song: Song) -> str:
        """Render a song as a JSON object using the enabled tags."""
        settings = self._settings
        return render_object(render_song(song, settings.tags, tags_enabled=self._tags_enabled))

    def render_absent(self, uri: str) -> str:
        """Render the placeholder JSON object for a song without loaded tags."""
        settings = self._settings
        return render_object(render_absent_record(settings.tags, uri, tags_enabled=self._tags_enabled))

    def search(self, songs: Iterable[Song], term: str) -> list[Song]:
        """Songs whose search tags contain ``term`` (case-insensitive)."""
        settings = self._settings
        return filter_songs(songs, normalize_search_term(term), settings.search_tags)
