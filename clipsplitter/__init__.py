"""
ClipSplitter - Split videos into fixed-length clips in batches.
"""

__version__ = "0.1.0"

from clipsplitter.models.video import VideoItem
from clipsplitter.splitter.batch import BatchSplitter

__all__ = ["BatchSplitter", "VideoItem"]
