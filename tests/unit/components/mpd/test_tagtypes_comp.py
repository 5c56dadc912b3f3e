"""Unit tests for tagtypes command builders."""

import pytest

from songtags.components.mpd.tagtypes_comp import (
    build_disable_all_tags_command,
    build_enable_all_tags_command,
    build_enable_tags_commands,
    parse_server_version,
    supports_tagtypes,
)
from songtags.helpers.dto.tags_dto import TagSet
from songtags.helpers.tag_kinds import TagKind

NEW = (0, 23, 5)
OLD = (0, 20, 23)


class TestServerVersion:
    """Test version parsing and the capability gate."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0.23.5", (0, 23, 5)), ("0.21", (0, 21, 0)), ("1.0.0-beta", (1, 0, 0)), ("", (0, 0, 0))],
    )
    def test_parse(self, text: str, expected: tuple[int, int, int]) -> None:
        """Missing and non-numeric parts become 0."""
        assert parse_server_version(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("version", "expected"),
        [((0, 21, 0), True), ((0, 24, 0), True), ((1, 0, 0), True), ((0, 20, 99), False)],
    )
    def test_supports_tagtypes(self, version: tuple[int, int, int], expected: bool) -> None:
        """tagtypes arrived in 0.21.0."""
        assert supports_tagtypes(version) is expected


class TestBuilders:
    """Test command list construction."""

    @pytest.mark.unit
    def test_enable_tags(self) -> None:
        """Clear, then enable the set, inside one command list."""
        commands = build_enable_tags_commands(TagSet((TagKind.ARTIST, TagKind.ALBUM_ARTIST, TagKind.TITLE)), NEW)
        assert commands == [
            "command_list_begin",
            "tagtypes clear",
            "tagtypes enable Artist AlbumArtist Title",
            "command_list_end",
        ]

    @pytest.mark.unit
    def test_enable_tags_sends_names_once(self) -> None:
        """Repeated kinds are enabled once."""
        commands = build_enable_tags_commands(TagSet((TagKind.ARTIST, TagKind.ARTIST)), NEW)
        assert "tagtypes enable Artist" in commands

    @pytest.mark.unit
    def test_enable_empty_set_only_clears(self) -> None:
        """No enable line for an empty set."""
        assert build_enable_tags_commands(TagSet(), NEW) == [
            "command_list_begin",
            "tagtypes clear",
            "command_list_end",
        ]

    @pytest.mark.unit
    def test_clear_and_all(self) -> None:
        """Single-command builders."""
        assert build_disable_all_tags_command(NEW) == ["tagtypes clear"]
        assert build_enable_all_tags_command(NEW) == ["tagtypes all"]

    @pytest.mark.unit
    def test_old_servers_get_nothing(self) -> None:
        """Every builder is a no-op below 0.21.0."""
        assert build_enable_tags_commands(TagSet((TagKind.ARTIST,)), OLD) == []
        assert build_disable_all_tags_command(OLD) == []
        assert build_enable_all_tags_command(OLD) == []
