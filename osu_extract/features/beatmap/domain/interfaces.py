from abc import ABC, abstractmethod
from pathlib import Path
from .models import BeatmapRecord

class IBeatmapParser(ABC):
    """
    Contract for turning beatmap text into a BeatmapRecord.
    """
    @abstractmethod
    def parse(self, content: str, directory: Path) -> BeatmapRecord:
        """
        Extracts title, artist and the audio reference from beatmap text.

        Args:
            content: Full text of the beatmap file.
            directory: Absolute directory containing the beatmap.
                       The audio reference is resolved against it.

        Returns:
            BeatmapRecord with best-effort fields. Must not raise on malformed lines.
        """
        pass
