"""Validation utilities for ClipSplitter."""

import os

from clipsplitter.config import get_video_extensions
from clipsplitter.exceptions import ValidationError


def validate_video_file(file_path: str) -> str:
    """Validate that a file exists and appears to be a video file.

    Args:
        file_path: Path to the file to validate

    Returns:
        The absolute file path

    Raises:
        ValidationError: If the file doesn't exist or doesn't look like a video
    """
    if not os.path.exists(file_path):
        raise ValidationError(f"File does not exist: {file_path}")

    if not os.path.isfile(file_path):
        raise ValidationError(f"Not a file: {file_path}")

    valid_extensions = get_video_extensions()
    _, ext = os.path.splitext(file_path)
    if ext.lower() not in valid_extensions:
        raise ValidationError(
            f"File doesn't appear to be a video. Extension {ext} not in {valid_extensions}"
        )

    return os.path.abspath(file_path)


def validate_output_dir(directory: str) -> str:
    """Validate that clips can be written to a directory.

    The directory does not have to exist yet; it is created before splitting.

    Args:
        directory: Path to validate

    Returns:
        The absolute directory path

    Raises:
        ValidationError: If the path is empty, not a directory or not writable
    """
    if not directory:
        raise ValidationError("Output directory is required")

    if os.path.exists(directory) and not os.path.isdir(directory):
        raise ValidationError(f"Output directory path exists but is not a directory: {directory}")

    if os.path.exists(directory) and not os.access(directory, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {directory}")

    return os.path.abspath(directory)
