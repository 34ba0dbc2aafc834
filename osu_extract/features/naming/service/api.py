from pathlib import Path
from osu_extract.features.beatmap.domain.models import BeatmapRecord
from ..data.escaper import DefaultEscaper

_escaper = DefaultEscaper()

def sanitize(text: str) -> str:
    """Escapes text so it can be used as (part of) a single filename."""
    return _escaper.escape(text)

def build_output_destination(output_dir: Path, record: BeatmapRecord, extension: str) -> Path:
    """
    Computes <output_dir>/<title> - <artist>.<ext>.
    Same (title, artist, extension) -> same path. Collisions are last-writer-wins.
    """
    file_name = f"{sanitize(record.title)} - {sanitize(record.artist)}.{sanitize(extension)}"
    return output_dir / file_name
