"""
Video model representing one file selected for splitting.
"""

import math
from dataclasses import dataclass

from clipsplitter.exceptions import ValidationError
from clipsplitter.utils.file_utils import file_name, file_stem


@dataclass(frozen=True)
class MediaInfo:
    """Duration and size reported by a media tool probe."""

    duration: float  # seconds, may be fractional
    size: int  # bytes


@dataclass
class VideoItem:
    """A video file in a batch.

    ``path`` is the identity key within a batch. ``size`` and
    ``duration_seconds`` stay at 0 until the file has been probed.
    """

    path: str
    name: str = ""
    size: int = 0
    duration_seconds: int = 0

    def __post_init__(self):
        if not self.name:
            self.name = file_name(self.path) or "video"

    @property
    def stem(self) -> str:
        """Get the filename without its final extension."""
        return file_stem(self.name)

    @property
    def is_resolved(self) -> bool:
        return self.duration_seconds > 0

    def apply_metadata(self, info: MediaInfo) -> None:
        """Merge probe results into this item.

        Fractional durations round up so a trailing partial clip is counted.

        Raises:
            ValidationError: If the item was already resolved or the
                probe reported no duration
        """
        if self.is_resolved:
            raise ValidationError(f"Metadata already resolved for {self.path}")

        duration = math.ceil(info.duration) if info.duration > 0 else 0
        if duration <= 0:
            raise ValidationError(f"Probe reported no duration for {self.path}")

        self.duration_seconds = duration
        self.size = max(self.size, int(info.size))
