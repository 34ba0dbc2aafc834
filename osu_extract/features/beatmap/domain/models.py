from dataclasses import dataclass
from pathlib import Path
from typing import Optional

@dataclass(frozen=True)
class BeatmapRecord:
    """
    The three fields of a beatmap we care about.
    Built once per .osu file and discarded after extraction.
    """
    artist: str = ""
    title: str = ""
    # Absolute path of the referenced audio file. None if the beatmap has no AudioFilename line.
    sound_path: Optional[Path] = None


class BeatmapReadError(OSError):
    """
    Raised when a beatmap file cannot be read as UTF-8 text.
    """
    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Cannot read beatmap {path}: {cause}")
        self.path = path
