"""
Custom exceptions for the clipsplitter package.
"""

class ClipSplitterError(Exception):
    """Base exception for the clipsplitter package."""
    pass


class FileError(ClipSplitterError):
    """Exception raised for file-related errors."""
    pass


class ValidationError(ClipSplitterError):
    """Exception raised for validation errors."""
    pass


class ProbeError(ClipSplitterError):
    """Exception raised when a file's duration or size cannot be read."""
    pass


class SplitError(ClipSplitterError):
    """Exception raised when a file cannot be split into clips."""
    pass
