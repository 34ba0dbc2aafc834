from pathlib import Path
from typing import Optional
from osu_extract.core.config.settings import settings
from ..domain.models import ScanRequest, ScanSummary
from .scheduler import SongScheduler

def extract_songs(songs_root: Path, output_dir: Path, max_workers: Optional[int] = None) -> ScanSummary:
    """
    Standalone API: extracts every beatmap's audio under songs_root into output_dir.

    Raises:
        FileNotFoundError / NotADirectoryError: songs_root is unusable.
        OSError: output_dir can't be created, or a directory can't be read.
    """
    request = ScanRequest(songs_root=Path(songs_root), output_dir=Path(output_dir))
    settings.ensure_output_dir(request.output_dir)

    return SongScheduler(max_workers=max_workers).run(request)
