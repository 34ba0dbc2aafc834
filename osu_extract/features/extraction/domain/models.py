from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from osu_extract.core.common.enums import ExtractionStatus

@dataclass(frozen=True)
class ExtractionResult:
    """
    Outcome of one beatmap -> audio file unit of work.
    """
    entry: Path
    status: ExtractionStatus
    destination: Optional[Path] = None

    @property
    def is_beatmap(self) -> bool:
        # Everything past the extension check was a .osu file
        return self.status not in (ExtractionStatus.SKIPPED, ExtractionStatus.NO_EXTENSION)

    @property
    def is_diagnostic(self) -> bool:
        return self.status in (
            ExtractionStatus.NO_EXTENSION,
            ExtractionStatus.NO_SOUND_EXTENSION,
            ExtractionStatus.UNREADABLE,
        )
