from pathlib import Path
from ..domain.interfaces import IBeatmapParser
from ..domain.models import BeatmapRecord

class OsuKeyValueParser(IBeatmapParser):
    """
    Line-by-line `Key:Value` scanner.
    Ignores sections entirely; only three keys are read.
    """

    SEPARATOR = ":"

    def parse(self, content: str, directory: Path) -> BeatmapRecord:
        artist = ""
        title = ""
        sound_path = None

        for line in content.split("\n"):
            if self.SEPARATOR not in line:
                continue

            # Split on the FIRST colon only, values may contain more (e.g. "Title:Re:Zero")
            key, value = line.split(self.SEPARATOR, 1)

            # Later lines overwrite earlier ones
            if key == "AudioFilename":
                sound_path = directory / value.strip()
            elif key == "Title":
                title = value.strip()
            elif key == "Artist":
                artist = value.strip()

        return BeatmapRecord(artist=artist, title=title, sound_path=sound_path)
