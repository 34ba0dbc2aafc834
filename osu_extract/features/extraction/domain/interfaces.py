from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

class IFileCopier(ABC):
    """
    Contract for placing a copy of a file at a destination path.
    """
    @abstractmethod
    def copy(self, source: Path, destination: Path,
             prepare: Optional[Callable[[Path], object]] = None) -> Path:
        """
        Copies source to destination, overwriting it.

        Args:
            source: File to copy.
            destination: Final path. Its parent must exist.
            prepare: Optional hook run on the copied bytes before they become
                     visible at `destination` (e.g. writing tags).

        Returns:
            The destination path.

        Raises:
            OSError: If the copy could not be completed. Nothing is left at
                     `destination` by a failed copy.
        """
        pass
