"""Unit tests for songtags.helpers.dto.song_dto module."""

import pytest

from songtags.helpers.dto.song_dto import AudioFormat, Song


class TestAudioFormat:
    """Tests for AudioFormat dataclass."""

    @pytest.mark.unit
    def test_defaults_mean_unknown(self) -> None:
        """Every component defaults to 0."""
        fmt = AudioFormat()
        assert (fmt.sample_rate, fmt.bits, fmt.channels) == (0, 0, 0)


class TestSong:
    """Tests for Song dataclass."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """A bare uri builds a song with an empty store."""
        song = Song(uri="a/b.flac")
        assert len(song.tags) == 0
        assert song.duration == 0
        assert song.last_modified == 0
        assert song.audio_format is None

    @pytest.mark.unit
    def test_each_song_owns_its_store(self) -> None:
        """Default stores are not shared between songs."""
        assert Song(uri="a").tags is not Song(uri="b").tags
