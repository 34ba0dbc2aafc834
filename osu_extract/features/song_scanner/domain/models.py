from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from osu_extract.core.common.enums import ExtractionStatus
from osu_extract.features.extraction.domain.models import ExtractionResult

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent: pull every beatmap's audio out of `songs_root` into `output_dir`.
    """
    songs_root: Path
    output_dir: Path

    def __post_init__(self):
        if not self.songs_root.exists():
            raise FileNotFoundError(f"Songs directory not found: {self.songs_root}")
        if not self.songs_root.is_dir():
            raise NotADirectoryError(f"Songs directory is not a directory: {self.songs_root}")

@dataclass
class ScanSummary:
    """
    Report returned by one walker task, reduced across tasks by the scheduler.
    """
    files_seen: int = 0
    beatmaps_found: int = 0
    extracted: int = 0
    copy_failed: int = 0
    skipped: int = 0
    diagnostics: List[str] = field(default_factory=list)

    def record(self, result: ExtractionResult) -> None:
        self.files_seen += 1
        if result.is_beatmap:
            self.beatmaps_found += 1
        if result.status == ExtractionStatus.EXTRACTED:
            self.extracted += 1
        elif result.status == ExtractionStatus.COPY_FAILED:
            self.copy_failed += 1
        elif result.status == ExtractionStatus.SKIPPED:
            self.skipped += 1
        if result.is_diagnostic:
            self.diagnostics.append(f"{result.status.value}: {result.entry}")

    def merge(self, other: "ScanSummary") -> "ScanSummary":
        return ScanSummary(
            files_seen=self.files_seen + other.files_seen,
            beatmaps_found=self.beatmaps_found + other.beatmaps_found,
            extracted=self.extracted + other.extracted,
            copy_failed=self.copy_failed + other.copy_failed,
            skipped=self.skipped + other.skipped,
            diagnostics=self.diagnostics + other.diagnostics,
        )
