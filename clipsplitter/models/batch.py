"""
Batch state models: split and output settings, progress and status.
"""

from dataclasses import dataclass
from enum import Enum

from clipsplitter.config import get_config
from clipsplitter.utils.duration import filter_duration_input, parse_duration


class Status(Enum):
    """Overall state of the live batch."""
    IDLE = "idle"
    LOADING = "loading"
    SPLITTING = "splitting"
    SUCCESS = "success"
    ERROR = "error"


def _default_duration_text() -> str:
    return get_config("default_split_duration", "00:05:00")


@dataclass
class SplitConfiguration:
    """The clip length as the user entered it."""

    duration_text: str = ""

    def __post_init__(self):
        if not self.duration_text:
            self.duration_text = _default_duration_text()

    @property
    def duration_seconds(self) -> int:
        """Clip length in seconds; 0 means invalid or empty."""
        return parse_duration(self.duration_text)

    def edit(self, raw: str) -> str:
        """Apply a keystroke-level edit of the combined duration field."""
        self.duration_text = filter_duration_input(raw)
        return self.duration_text


@dataclass
class OutputConfiguration:
    """Where clips go and how they are named.

    With ``prefix_editable`` off (batch mode) the prefix is derived from each
    source file at split time and ``prefix`` is ignored.
    """

    directory: str = ""
    prefix: str = ""
    suffix: str = ""
    prefix_editable: bool = True


@dataclass
class BatchProgress:
    """Progress of a running batch, measured in files started."""

    current_file: int = 0  # 1-based, 0 before start
    total_files: int = 0
    total_clips_created: int = 0
    percentage: int = 0
    expected_clips: int = 0  # estimate for the file in flight
