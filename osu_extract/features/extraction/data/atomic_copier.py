import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Optional
from ..domain.interfaces import IFileCopier

class AtomicFileCopier(IFileCopier):
    """
    Copies into a temp file next to the destination, then renames over it.
    Two workers racing on the same destination each produce a complete file,
    whichever rename lands last wins.
    """

    STAGING_PREFIX = ".osu-extract-"

    def copy(self, source: Path, destination: Path,
             prepare: Optional[Callable[[Path], object]] = None) -> Path:
        # 1. Stage in the same directory so os.replace stays on one filesystem.
        # Keep the suffix so format detection (tagging) still works on the staged file.
        fd, tmp_name = tempfile.mkstemp(
            prefix=self.STAGING_PREFIX,
            suffix=destination.suffix,
            dir=destination.parent,
        )
        os.close(fd)
        staged = Path(tmp_name)

        try:
            # 2. Copy content + permission bits + times
            shutil.copy2(str(source), str(staged))

            # 3. Let the caller touch the bytes before they are published
            if prepare is not None:
                prepare(staged)

            # 4. Publish
            os.replace(staged, destination)
        except BaseException:
            staged.unlink(missing_ok=True)
            raise

        return destination
