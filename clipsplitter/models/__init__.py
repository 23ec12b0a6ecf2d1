"""Data models for ClipSplitter."""

from clipsplitter.models.batch import (
    BatchProgress,
    OutputConfiguration,
    SplitConfiguration,
    Status,
)
from clipsplitter.models.video import MediaInfo, VideoItem

__all__ = [
    "BatchProgress",
    "MediaInfo",
    "OutputConfiguration",
    "SplitConfiguration",
    "Status",
    "VideoItem",
]
