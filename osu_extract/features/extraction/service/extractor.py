import logging
from pathlib import Path
from typing import Optional

from osu_extract.core.config.settings import settings
from osu_extract.core.common.enums import ExtractionStatus
from osu_extract.core.common.paths import extension_of

# Cross-Feature Imports (Service calls Service)
from osu_extract.features.beatmap.service.api import read_beatmap
from osu_extract.features.beatmap.domain.models import BeatmapReadError
from osu_extract.features.naming.service.api import build_output_destination
from osu_extract.features.tagging.service.api import write_title_artist

from ..domain.interfaces import IFileCopier
from ..domain.models import ExtractionResult
from ..data.atomic_copier import AtomicFileCopier

logger = logging.getLogger(__name__)

class BeatmapExtractor:
    """
    One unit of work: .osu file -> tagged audio file in the output directory.
    Per-entry problems never escape this class.
    """

    def __init__(self, copier: Optional[IFileCopier] = None,
                 beatmap_extension: str = settings.BEATMAP_EXTENSION):
        self.copier = copier or AtomicFileCopier()
        self.beatmap_extension = beatmap_extension

    def extract(self, entry: Path, output_dir: Path) -> ExtractionResult:
        # 1. Only regular files. Directories belong to the walker.
        if not entry.is_file():
            return ExtractionResult(entry, ExtractionStatus.SKIPPED)

        # 2. Filter on extension (exact, case-sensitive)
        extension = extension_of(entry)
        if extension is None:
            logger.warning(f"File {entry} does not have an extension!")
            return ExtractionResult(entry, ExtractionStatus.NO_EXTENSION)
        if extension != self.beatmap_extension:
            return ExtractionResult(entry, ExtractionStatus.SKIPPED)

        # 3. Parse
        try:
            record = read_beatmap(entry)
        except BeatmapReadError as e:
            logger.warning(str(e))
            return ExtractionResult(entry, ExtractionStatus.UNREADABLE)

        # 4. The output needs the audio file's extension
        sound_extension = extension_of(record.sound_path) if record.sound_path else None
        if not sound_extension:
            logger.warning(f"Sound file {record.sound_path} does not have an extension! (beatmap: {entry})")
            return ExtractionResult(entry, ExtractionStatus.NO_SOUND_EXTENSION)

        # 5. Destination
        destination = build_output_destination(output_dir, record, sound_extension)

        def tag(path: Path) -> bool:
            return write_title_artist(path, record.title, record.artist)

        # 6. Copy (tags are written on the staged copy, before it is published)
        try:
            self.copier.copy(record.sound_path, destination, prepare=tag)
        except (OSError, ValueError) as e:
            # Missing audio files are common in real song folders, keep going.
            # ValueError: the path itself is unusable (e.g. an embedded NUL byte)
            logger.debug(f"Copy {record.sound_path} -> {destination} failed: {e}")

            # 7. Tag whatever an earlier writer may have left at the destination
            tag(destination)
            return ExtractionResult(entry, ExtractionStatus.COPY_FAILED, destination)

        return ExtractionResult(entry, ExtractionStatus.EXTRACTED, destination)
