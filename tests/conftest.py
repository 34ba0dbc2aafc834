# File: tests/conftest.py

import pytest
import os
import sys

# 1. Add project root to path
sys.path.append(os.getcwd())

# Not real MPEG data. mutagen can't sync to it, so tagging takes the ID3 fallback path.
FAKE_AUDIO = b"FAKE_AUDIO" * 64


def _beatmap_text(title="Foo", artist="Bar", audio="song.mp3", extra=""):
    """Minimal .osu content. Pass None to leave a field out."""
    lines = ["osu file format v14", "", "[General]"]
    if audio is not None:
        lines.append(f"AudioFilename: {audio}")
    lines += ["AudioLeadIn: 0", "PreviewTime: 1234", "", "[Metadata]"]
    if title is not None:
        lines.append(f"Title:{title}")
        lines.append(f"TitleUnicode:{title}")
    if artist is not None:
        lines.append(f"Artist:{artist}")
        lines.append(f"ArtistUnicode:{artist}")
    lines += ["Creator:mapper", "Version:Hard", extra, "", "[HitObjects]", "256,192,1000,1,0,0:0:0:0:"]
    return "\r\n".join(lines)


@pytest.fixture
def beatmap_text():
    return _beatmap_text


@pytest.fixture
def fake_audio():
    return FAKE_AUDIO


@pytest.fixture
def make_song_folder(tmp_path):
    """
    Factory: creates <songs>/<name>/ with a .osu file and (optionally) its audio.
    Returns the folder path.
    """
    songs = tmp_path / "Songs"
    songs.mkdir(exist_ok=True)

    def _make(name, osu_name="map.osu", audio_name="song.mp3", audio_bytes=FAKE_AUDIO, **fields):
        folder = songs / name
        folder.mkdir(parents=True, exist_ok=True)
        (folder / osu_name).write_text(_beatmap_text(audio=audio_name, **fields), encoding="utf-8")
        if audio_bytes is not None and audio_name:
            (folder / audio_name).write_bytes(audio_bytes)
        return folder

    return _make


@pytest.fixture
def songs_root(tmp_path):
    root = tmp_path / "Songs"
    root.mkdir(exist_ok=True)
    return root


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out
