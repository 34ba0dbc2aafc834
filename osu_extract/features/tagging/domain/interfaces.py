from abc import ABC, abstractmethod
from pathlib import Path

class ITagContainer(ABC):
    """
    Narrow view of an audio tag block: just the two fields we write.
    """
    @abstractmethod
    def set_title(self, title: str) -> None:
        pass

    @abstractmethod
    def set_artist(self, artist: str) -> None:
        pass

    @abstractmethod
    def save(self, path: Path) -> None:
        """
        Writes the tag block into the audio file at `path`.

        Raises:
            Any library error. Callers decide whether to swallow it.
        """
        pass

class ITagOpener(ABC):
    """
    Contract for obtaining a tag container for an existing audio file.
    """
    @abstractmethod
    def open(self, path: Path) -> ITagContainer:
        """
        Returns the best container for the file's format.
        Must fall back to a generic empty container instead of failing on unknown formats.
        """
        pass
