import logging
import os
from pathlib import Path
from typing import FrozenSet, Iterator, Tuple
from ..domain.interfaces import IFileWalker

logger = logging.getLogger(__name__)

class RecursiveTreeWalker(IFileWalker):
    """
    Depth-first walk using os.scandir.
    Unlike os.walk, unreadable directories raise instead of being skipped.
    Symlinks are followed.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        if not root.is_dir():
            yield root
            return
        yield from self._walk_dir(root, frozenset())

    def _walk_dir(self, directory: Path, ancestors: FrozenSet[Tuple[int, int]]) -> Iterator[Path]:
        # (device, inode) of every directory on the current branch
        st = directory.stat()
        identity = (st.st_dev, st.st_ino)
        if identity in ancestors:
            logger.warning(f"Skipping {directory}: links back to one of its parent directories")
            return
        ancestors = ancestors | {identity}

        # Read the listing up-front so the handle is closed before recursing
        with os.scandir(directory) as it:
            entries = list(it)

        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir():
                yield from self._walk_dir(path, ancestors)
            else:
                yield path
