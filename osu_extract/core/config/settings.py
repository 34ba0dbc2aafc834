# File: osu_extract/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    DEFAULT_OUTPUT_DIR: Path = Path(os.getenv("OSU_EXTRACT_OUTPUT_DIR", "./osu songs"))

    # --- Beatmaps ---
    # Compared case-sensitively against the file suffix (without the dot)
    BEATMAP_EXTENSION: str = "osu"

    # --- Concurrency ---
    # One task per top-level entry of the songs root, so this caps parallelism
    MAX_WORKERS: int = int(os.getenv("OSU_EXTRACT_MAX_WORKERS", min(32, (os.cpu_count() or 1) + 4)))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("OSU_EXTRACT_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"

    def ensure_output_dir(self, output_dir: Path) -> Path:
        """Creates the output directory (and parents) if it doesn't exist."""
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir


settings = Settings()
