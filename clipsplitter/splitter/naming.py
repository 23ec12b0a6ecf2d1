"""Output naming: default directory, per-file prefixes and example filenames."""

from typing import List, Optional, Tuple

from clipsplitter.config import get_config
from clipsplitter.models.batch import OutputConfiguration
from clipsplitter.models.video import VideoItem
from clipsplitter.utils.file_utils import file_stem, parent_directory

CLIP_NUMBER_WIDTH = 3


def default_prefix(name: str) -> str:
    """Prefix derived from a source filename: its stem plus ``_``."""
    return f"{file_stem(name)}_"


def default_output_dir(path: str) -> str:
    """Clips default to the folder the source file lives in."""
    return parent_directory(path)


def clip_filename(prefix: str, number: int, suffix: str, extension: Optional[str] = None) -> str:
    """Name of the ``number``-th (1-based) clip of a file."""
    extension = (extension or get_config("default_output_format", "mp4")).lstrip(".")
    return f"{prefix}{number:0{CLIP_NUMBER_WIDTH}d}{suffix}.{extension}"


def resolve_naming(output: OutputConfiguration, item: VideoItem) -> Tuple[str, str]:
    """Get the ``(prefix, suffix)`` used for one file's clips.

    When the prefix is not editable it is forced to the file's own stem so
    every source in a batch gets distinct clip names.
    """
    if output.prefix_editable:
        return output.prefix, output.suffix
    return default_prefix(item.name), output.suffix


def preview_filenames(prefix: str, suffix: str, count: Optional[int] = None) -> List[str]:
    """Example filenames for the first ``count`` clips."""
    count = int(count if count is not None else get_config("preview_count", 3))
    return [clip_filename(prefix, number, suffix) for number in range(1, count + 1)]
