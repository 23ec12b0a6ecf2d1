"""Utility functions for the clipsplitter package."""

from clipsplitter.utils.duration import (
    SegmentedDuration,
    filter_duration_input,
    format_clock,
    format_duration,
    parse_duration,
)
from clipsplitter.utils.file_utils import (
    ensure_directory,
    file_name,
    file_stem,
    format_bytes,
    get_file_extension,
    list_files,
    parent_directory,
)
from clipsplitter.utils.validation import (
    validate_output_dir,
    validate_video_file,
)

__all__ = [
    "SegmentedDuration",
    "filter_duration_input",
    "format_clock",
    "format_duration",
    "parse_duration",
    "ensure_directory",
    "file_name",
    "file_stem",
    "format_bytes",
    "get_file_extension",
    "list_files",
    "parent_directory",
    "validate_output_dir",
    "validate_video_file",
]
