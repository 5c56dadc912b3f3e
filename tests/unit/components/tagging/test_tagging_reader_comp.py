"""Unit tests for tagging reader component."""

from pathlib import Path
from types import SimpleNamespace

import pytest

from songtags.components.tagging import tagging_reader_comp
from songtags.components.tagging.tagging_reader_comp import build_tag_store, read_song_from_file
from songtags.helpers.dto.song_dto import AudioFormat
from songtags.helpers.tag_kinds import TagKind


class _FakeID3(dict):
    """Dict with the ID3 frame lookup method mutagen exposes."""

    def getall(self, key):
        return [value for name, value in self.items() if name.startswith(key)]


@pytest.fixture
def music_file(tmp_path: Path) -> tuple[Path, Path]:
    """An (empty) file inside a music directory."""
    music = tmp_path / "music"
    song = music / "Miles Davis" / "So What.flac"
    song.parent.mkdir(parents=True)
    song.write_bytes(b"")
    return music, song


def _patch_mutagen(monkeypatch: pytest.MonkeyPatch, result=None, error: Exception | None = None) -> None:
    def fake_file(path):
        if error is not None:
            raise error
        return result

    monkeypatch.setattr(tagging_reader_comp.mutagen, "File", fake_file)


class TestReadSongFromFile:
    """Test building Song records from files."""

    @pytest.mark.unit
    def test_reads_vorbis_comments_and_stream_info(self, monkeypatch, music_file) -> None:
        """Tags, duration, format and uri are filled in."""
        music, song_path = music_file
        info = SimpleNamespace(length=545.9, sample_rate=44100, bits_per_sample=16, channels=2)
        _patch_mutagen(monkeypatch, SimpleNamespace(tags={"ARTIST": ["Miles Davis"], "TITLE": ["So What"]}, info=info))

        song = read_song_from_file(str(song_path), str(music))

        assert song.uri == "Miles Davis/So What.flac"
        assert song.tags.values(TagKind.ARTIST) == ("Miles Davis",)
        assert song.tags.values(TagKind.TITLE) == ("So What",)
        assert song.duration == 545
        assert song.last_modified == int(song_path.stat().st_mtime)
        assert song.audio_format == AudioFormat(sample_rate=44100, bits=16, channels=2)

    @pytest.mark.unit
    def test_reads_id3_frames(self, monkeypatch, music_file) -> None:
        """Containers with getall() go through the ID3 normalizer."""
        music, song_path = music_file
        tags = _FakeID3({"TPE1": SimpleNamespace(text=["Miles Davis"])})
        _patch_mutagen(monkeypatch, SimpleNamespace(tags=tags, info=None))

        song = read_song_from_file(str(song_path), str(music))

        assert song.tags.values(TagKind.ARTIST) == ("Miles Davis",)
        assert song.duration == 0
        assert song.audio_format is None

    @pytest.mark.unit
    def test_file_without_tags(self, monkeypatch, music_file) -> None:
        """A file without a tag block yields an empty store."""
        music, song_path = music_file
        _patch_mutagen(monkeypatch, SimpleNamespace(tags=None, info=SimpleNamespace(length=1.0)))

        song = read_song_from_file(str(song_path), str(music))

        assert len(song.tags) == 0
        assert song.duration == 1

    @pytest.mark.unit
    def test_unsupported_format_raises_value_error(self, monkeypatch, music_file) -> None:
        """mutagen returning None means the format is unknown."""
        music, song_path = music_file
        _patch_mutagen(monkeypatch, None)

        with pytest.raises(ValueError, match="Unsupported audio format"):
            read_song_from_file(str(song_path), str(music))

    @pytest.mark.unit
    def test_read_errors_become_runtime_errors(self, monkeypatch, music_file) -> None:
        """Any other failure is wrapped and chained."""
        music, song_path = music_file
        _patch_mutagen(monkeypatch, error=OSError("boom"))

        with pytest.raises(RuntimeError, match="Failed to read tags") as excinfo:
            read_song_from_file(str(song_path), str(music))
        assert isinstance(excinfo.value.__cause__, OSError)


class TestBuildTagStore:
    """Test store construction from normalized values."""

    @pytest.mark.unit
    def test_duplicates_are_dropped(self) -> None:
        """Repeated values of a kind are stored once."""
        store = build_tag_store({TagKind.GENRE: ["Jazz", "Bebop", "Jazz"]})
        assert store.values(TagKind.GENRE) == ("Jazz", "Bebop")

    @pytest.mark.unit
    def test_same_value_in_different_kinds(self) -> None:
        """Deduplication is per kind."""
        store = build_tag_store({TagKind.ARTIST: ["X"], TagKind.ALBUM_ARTIST: ["X"]})
        assert store.count(TagKind.ARTIST) == 1
        assert store.count(TagKind.ALBUM_ARTIST) == 1
