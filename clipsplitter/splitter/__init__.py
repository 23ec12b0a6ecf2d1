"""Media tools and the batch split orchestrator."""

from typing import Optional

from clipsplitter.config import get_config
from clipsplitter.exceptions import ValidationError
from clipsplitter.splitter.base import MediaTool
from clipsplitter.splitter.batch import BatchSplitter
from clipsplitter.splitter.ffmpeg_tool import FFmpegTool
from clipsplitter.splitter.metadata import MetadataResolver

BACKENDS = ("ffmpeg", "moviepy")


def get_media_tool(backend: Optional[str] = None) -> MediaTool:
    """Create the media tool for ``backend`` (defaults to configuration).

    Raises:
        ValidationError: If the backend is unknown
    """
    backend = (backend or get_config("backend", "ffmpeg")).lower()
    if backend == "ffmpeg":
        return FFmpegTool()
    if backend == "moviepy":
        from clipsplitter.splitter.moviepy_tool import MoviePyTool
        return MoviePyTool()
    raise ValidationError(f"Unknown backend: {backend}. Must be one of {list(BACKENDS)}")


__all__ = ["BACKENDS", "BatchSplitter", "FFmpegTool", "MediaTool", "MetadataResolver", "get_media_tool"]
