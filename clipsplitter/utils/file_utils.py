"""Utility functions for file operations."""

import os
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Iterable, List, Optional

from clipsplitter.exceptions import FileError

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def _pure_path(path: str) -> PurePath:
    # Paths picked on Windows use backslashes; accept them on any host.
    if "\\" in path:
        return PureWindowsPath(path)
    return PurePosixPath(path)


def file_name(path: str) -> str:
    """Get the last component of a path."""
    return _pure_path(path).name


def file_stem(name: str) -> str:
    """Get a filename without its final extension (``a.b.mp4`` -> ``a.b``)."""
    return _pure_path(name).stem


def parent_directory(path: str) -> str:
    """Get the directory containing ``path``, or "" when there is none."""
    parent = _pure_path(path).parent
    return "" if str(parent) == "." else str(parent)


def ensure_directory(directory: str) -> str:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to the directory

    Returns:
        The directory path

    Raises:
        FileError: If directory creation fails
    """
    if not directory:
        return directory

    try:
        os.makedirs(directory, exist_ok=True)
        return directory
    except OSError as e:
        raise FileError(f"Failed to create directory {directory}: {e}")


def get_file_extension(file_path: str) -> str:
    """Get the extension of a file.

    Args:
        file_path: Path to the file

    Returns:
        File extension with leading dot (e.g., '.mp4')
    """
    return os.path.splitext(file_path)[1].lower()


def list_files(directory: str, extensions: Optional[Iterable[str]] = None) -> List[str]:
    """List files in a directory, optionally filtered by extension.

    Args:
        directory: Directory to list files from
        extensions: Optional file extensions to keep (e.g., ['.mp4'])

    Returns:
        Sorted list of file paths

    Raises:
        FileError: If directory doesn't exist or isn't readable
    """
    if not os.path.isdir(directory):
        raise FileError(f"Directory does not exist: {directory}")

    wanted = {ext.lower() for ext in extensions} if extensions is not None else None
    try:
        files = []
        for entry in sorted(os.listdir(directory)):
            file_path = os.path.join(directory, entry)
            if os.path.isfile(file_path):
                if wanted is None or get_file_extension(entry) in wanted:
                    files.append(file_path)
        return files
    except OSError as e:
        raise FileError(f"Error listing files in {directory}: {e}")


def format_bytes(size: int, decimals: int = 2) -> str:
    """Render a byte count for humans, e.g. ``1536`` -> ``1.5 KB``."""
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    rendered = f"{value:.{decimals}f}".rstrip("0").rstrip(".")
    return f"{rendered} {_SIZE_UNITS[unit]}"
