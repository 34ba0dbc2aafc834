from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a song folder.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every non-directory path under root, recursively.
        A root that is not a directory yields itself.
        Errors reading a directory propagate.
        """
        pass
