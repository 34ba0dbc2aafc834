import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

import mutagen
from mutagen.asf import ASFTags
from mutagen.easyid3 import EasyID3
from mutagen.id3 import ID3, TIT2, TPE1

from ..domain.interfaces import ITagContainer, ITagOpener

logger = logging.getLogger(__name__)


class MutagenFileTags(ITagContainer):
    """
    Wraps a mutagen FileType whose tags take string keys
    (EasyMP3, OggVorbis, FLAC, EasyMP4, ASF, ...).
    """

    def __init__(self, audio, title_key: str = "title", artist_key: str = "artist"):
        self.audio = audio
        self.title_key = title_key
        self.artist_key = artist_key

    def set_title(self, title: str) -> None:
        self.audio[self.title_key] = title

    def set_artist(self, artist: str) -> None:
        self.audio[self.artist_key] = artist

    def save(self, path: Path) -> None:
        self.audio.save(str(path))


class ID3FrameTags(ITagContainer):
    """
    Formats that embed a raw ID3 block but have no easy wrapper (WAVE, AIFF, DSF).
    Frames are written directly: TIT2 = title, TPE1 = artist.
    """

    def __init__(self, audio):
        self.audio = audio

    def set_title(self, title: str) -> None:
        self.audio.tags["TIT2"] = TIT2(encoding=3, text=title)

    def set_artist(self, artist: str) -> None:
        self.audio.tags["TPE1"] = TPE1(encoding=3, text=artist)

    def save(self, path: Path) -> None:
        self.audio.save(str(path))


class ID3Tags(ITagContainer):
    """
    Bare ID3v2 block. Works on any file, mutagen just prepends the header.
    """

    def __init__(self, tags: Optional[EasyID3] = None):
        self.tags = tags if tags is not None else EasyID3()

    def set_title(self, title: str) -> None:
        self.tags["title"] = title

    def set_artist(self, artist: str) -> None:
        self.tags["artist"] = artist

    def save(self, path: Path) -> None:
        self.tags.save(str(path))


def _open_detected_format(path: Path) -> Optional[ITagContainer]:
    # mutagen sniffs the header (and extension) and picks the FileType
    audio = mutagen.File(str(path), easy=True)
    if audio is None:
        return None
    if audio.tags is None:
        audio.add_tags()

    # No easy interface for these, plain "title"/"artist" keys would fail on save
    if isinstance(audio.tags, ID3):
        return ID3FrameTags(audio)
    if isinstance(audio.tags, ASFTags):
        return MutagenFileTags(audio, title_key="Title", artist_key="Author")
    return MutagenFileTags(audio)


def _open_existing_id3(path: Path) -> Optional[ITagContainer]:
    # e.g. a file we tagged on a previous run whose audio mutagen can't sync to
    return ID3Tags(EasyID3(str(path)))


class MutagenTagOpener(ITagOpener):
    """
    Tries each opener in order of likelihood, else hands out a fresh ID3 block.
    """

    OPENERS: Sequence[Callable[[Path], Optional[ITagContainer]]] = (
        _open_detected_format,
        _open_existing_id3,
    )

    def open(self, path: Path) -> ITagContainer:
        for opener in self.OPENERS:
            try:
                container = opener(path)
            except Exception as e:
                logger.debug(f"{opener.__name__} could not open {path}: {e}")
                continue
            if container is not None:
                return container

        return ID3Tags()
