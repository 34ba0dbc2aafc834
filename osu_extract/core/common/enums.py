# File: osu_extract/core/common/enums.py

from enum import Enum, unique

@unique
class ExtractionStatus(str, Enum):
    EXTRACTED = "extracted"
    COPY_FAILED = "copy_failed"
    SKIPPED = "skipped"
    NO_EXTENSION = "no_extension"
    NO_SOUND_EXTENSION = "no_sound_extension"
    UNREADABLE = "unreadable"
