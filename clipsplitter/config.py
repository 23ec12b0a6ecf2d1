"""Configuration settings for the ClipSplitter application."""

import os
from typing import Any, Dict, Optional

# Default configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Split settings
    "default_split_duration": "00:05:00",  # HH:MM:SS per clip
    "preview_count": 3,  # example filenames shown before splitting

    # Output
    "default_output_format": "mp4",
    "default_codec": "libx264",
    "default_audio_codec": "aac",

    # External tools
    "backend": "ffmpeg",  # "ffmpeg" (stream copy) or "moviepy" (re-encode)
    "ffmpeg_path": "ffmpeg",
    "ffprobe_path": "ffprobe",
    "ffmpeg_threads": 2,

    # Accepted input files
    "video_extensions": [".mp4", ".mkv", ".avi", ".mov", ".webm", ".m4v", ".flv"],
}


def get_config(key: str, default: Optional[Any] = None) -> Any:
    """Get configuration value by key.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value
    """
    # Environment variables override defaults
    env_key = f"CLIPSPLITTER_{key.upper()}"
    if env_key in os.environ:
        return os.environ[env_key]

    return DEFAULT_CONFIG.get(key, default)


def get_video_extensions() -> list:
    """Get the accepted video extensions, lower-cased with a leading dot.

    The environment override is a comma-separated list (``mp4,mkv``).
    """
    extensions = get_config("video_extensions")
    if isinstance(extensions, str):
        extensions = [ext.strip() for ext in extensions.split(",") if ext.strip()]
    return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions]
