from pathlib import Path
from ..domain.models import BeatmapRecord, BeatmapReadError
from ..data.osu_parser import OsuKeyValueParser


_parser = OsuKeyValueParser()

def read_beatmap(path: Path) -> BeatmapRecord:
    """
    Reads a .osu file and parses it.
    The audio reference is resolved against the beatmap's canonical
    (symlink-resolved, absolute) parent directory.

    Raises:
        BeatmapReadError: If the file can't be read or isn't valid UTF-8.
    """
    try:
        canonical = path.resolve(strict=True)
        # newline="" keeps the raw line endings, values get stripped anyway
        with open(canonical, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BeatmapReadError(path, e) from e

    return _parser.parse(content, canonical.parent)
