"""Unit tests for tag list parsing."""

import logging

import pytest

from songtags.components.tagging.tag_parsing_comp import (
    parse_enabled_tags,
    tagset_all,
    tagset_contains,
    tagset_from_kinds,
)
from songtags.helpers.dto.tags_dto import TagSet
from songtags.helpers.tag_kinds import TAG_COUNT, TagKind

LOGGER = "songtags.components.tagging.tag_parsing_comp"


class TestParseEnabledTags:
    """Test parse_enabled_tags()."""

    @pytest.mark.unit
    def test_unknown_names_are_warned_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Whitespace is trimmed, unknown tokens produce a warning."""
        allowed = TagSet((TagKind.ARTIST, TagKind.ALBUM, TagKind.GENRE))
        with caplog.at_level(logging.DEBUG, logger=LOGGER):
            result = parse_enabled_tags("Artist, Album , Bogus", allowed)

        assert result.kinds == (TagKind.ARTIST, TagKind.ALBUM)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Bogus" in warnings[0].getMessage()

    @pytest.mark.unit
    def test_disallowed_kinds_are_skipped_quietly(self, caplog: pytest.LogCaptureFixture) -> None:
        """Known but unsupported kinds are logged at debug level only."""
        allowed = TagSet((TagKind.ARTIST,))
        with caplog.at_level(logging.DEBUG, logger=LOGGER):
            result = parse_enabled_tags("Artist,Composer", allowed)

        assert result.kinds == (TagKind.ARTIST,)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert any("Composer" in r.getMessage() and r.levelno == logging.DEBUG for r in caplog.records)

    @pytest.mark.unit
    def test_logs_summary(self, caplog: pytest.LogCaptureFixture, default_allowed: TagSet) -> None:
        """One info line lists the enabled names."""
        with caplog.at_level(logging.INFO, logger=LOGGER):
            parse_enabled_tags("Title,Artist", default_allowed, "search tags")

        assert "Enabled search tags: Title Artist" in caplog.text

    @pytest.mark.unit
    def test_names_are_case_insensitive(self, default_allowed: TagSet) -> None:
        """User input may use any case."""
        result = parse_enabled_tags("albumartist,TITLE", default_allowed)
        assert result.kinds == (TagKind.ALBUM_ARTIST, TagKind.TITLE)

    @pytest.mark.unit
    def test_tabs_and_newlines_are_trimmed(self, default_allowed: TagSet, caplog: pytest.LogCaptureFixture) -> None:
        """Tokens from env vars or multi-line YAML may carry any whitespace."""
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            result = parse_enabled_tags("Artist,\tAlbum,\nTitle\n, Genre\r", default_allowed)

        assert result.kinds == (TagKind.ARTIST, TagKind.ALBUM, TagKind.TITLE, TagKind.GENRE)
        assert "Unknown tag" not in caplog.text

    @pytest.mark.unit
    def test_input_order_is_kept(self, default_allowed: TagSet) -> None:
        """Result order follows the text, not the allowed set."""
        result = parse_enabled_tags("Genre,Artist,Date", default_allowed)
        assert result.kinds == (TagKind.GENRE, TagKind.ARTIST, TagKind.DATE)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", ",", " , ,"])
    def test_empty_input_yields_empty_set(self, text: str, default_allowed: TagSet) -> None:
        """Empty lists and empty tokens produce nothing."""
        assert len(parse_enabled_tags(text, default_allowed)) == 0

    @pytest.mark.unit
    def test_repeated_names_are_kept(self, default_allowed: TagSet) -> None:
        """Duplicates are not removed by the parser."""
        result = parse_enabled_tags("Artist,Artist", default_allowed)
        assert result.kinds == (TagKind.ARTIST, TagKind.ARTIST)

    @pytest.mark.unit
    def test_result_is_bounded(self, caplog: pytest.LogCaptureFixture) -> None:
        """More than TAG_COUNT tokens never overflow the set."""
        text = ",".join(["Artist"] * (TAG_COUNT + 5))
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            result = parse_enabled_tags(text, tagset_all())

        assert len(result) == TAG_COUNT
        assert "full" in caplog.text

    @pytest.mark.unit
    def test_empty_allowed_set_enables_nothing(self) -> None:
        """A server without tags allows nothing."""
        assert len(parse_enabled_tags("Artist,Title", TagSet())) == 0


class TestTagsetHelpers:
    """Test small TagSet helpers."""

    @pytest.mark.unit
    def test_contains(self, default_allowed: TagSet) -> None:
        """Linear membership test."""
        assert tagset_contains(default_allowed, TagKind.GENRE) is True
        assert tagset_contains(default_allowed, TagKind.COMPOSER) is False

    @pytest.mark.unit
    def test_from_kinds_drops_repeats(self) -> None:
        """First occurrence wins."""
        result = tagset_from_kinds([TagKind.TITLE, TagKind.ARTIST, TagKind.TITLE])
        assert result.kinds == (TagKind.TITLE, TagKind.ARTIST)

    @pytest.mark.unit
    def test_all_has_every_kind(self) -> None:
        """Enumeration order, full capacity."""
        result = tagset_all()
        assert len(result) == TAG_COUNT
        assert result.kinds[0] == TagKind.ARTIST
        assert result.kinds[-1] == TagKind.LOCATION
