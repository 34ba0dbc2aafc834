import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from osu_extract.core.config.settings import settings
from osu_extract.features.extraction.service.extractor import BeatmapExtractor

from ..domain.interfaces import IFileWalker
from ..domain.models import ScanRequest, ScanSummary
from ..data.tree_walker import RecursiveTreeWalker

logger = logging.getLogger(__name__)

class SongScheduler:
    """
    Fans the songs root out over a thread pool.
    One task per top-level entry; each task walks and extracts sequentially.
    """

    def __init__(self, max_workers: Optional[int] = None,
                 walker: Optional[IFileWalker] = None,
                 extractor: Optional[BeatmapExtractor] = None):
        self.max_workers = max_workers or settings.MAX_WORKERS
        self.walker = walker or RecursiveTreeWalker()
        self.extractor = extractor or BeatmapExtractor()

    def run(self, request: ScanRequest) -> ScanSummary:
        # 1. Top-level listing. Failing here is fatal for the whole run.
        entries = list(request.songs_root.iterdir())
        logger.info(f"Scanning {len(entries)} entries in {request.songs_root} ({self.max_workers} workers)")

        summary = ScanSummary()
        if not entries:
            return summary

        # 2. Fan out, then reduce the per-task summaries
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="osu-extract") as pool:
            futures = {
                pool.submit(self._process_entry, entry, request.output_dir): entry
                for entry in entries
            }
            try:
                for future in as_completed(futures):
                    summary = summary.merge(future.result())
            except Exception as e:
                logger.error(f"Walking {futures[future]} failed: {e}")
                for pending in futures:
                    pending.cancel()
                raise

        return summary

    def _process_entry(self, entry: Path, output_dir: Path) -> ScanSummary:
        """Worker body: sequential walk of one top-level directory."""
        summary = ScanSummary()

        # Only directories are descended into, loose files in the songs root are ignored
        if not entry.is_dir():
            return summary

        for file_path in self.walker.walk(entry):
            summary.record(self.extractor.extract(file_path, output_dir))
        return summary
