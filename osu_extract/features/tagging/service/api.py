import logging
from pathlib import Path
from ..data.mutagen_adapter import MutagenTagOpener

logger = logging.getLogger(__name__)

_opener = MutagenTagOpener()

def write_title_artist(path: Path, title: str, artist: str) -> bool:
    """
    Best-effort: sets title/artist on the audio file at `path`.
    Never raises. Returns False if anything went wrong.
    Never creates `path` if it doesn't exist.
    """
    try:
        if not path.is_file():
            raise FileNotFoundError(f"Nothing to tag at {path}")

        tags = _opener.open(path)
        tags.set_title(title)
        tags.set_artist(artist)
        tags.save(path)
        return True
    except Exception as e:
        logger.debug(f"Tagging failed for {path}: {e}")
        return False
