# File: osu_extract/core/common/paths.py

from pathlib import Path
from typing import Optional

def extension_of(path: Path) -> Optional[str]:
    """
    Text after the last dot of the file name, without the dot.

    None when the name has no dot at all or is a dotfile (".hidden").
    An empty string when the name ends with a dot ("song.").
    """
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem:
        return None
    return ext
