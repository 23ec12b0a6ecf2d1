"""Media tool backed by the ffprobe and ffmpeg executables."""

import logging
import os
import subprocess
from typing import List, Optional

from clipsplitter.config import get_config
from clipsplitter.exceptions import FileError, ProbeError, SplitError
from clipsplitter.models.video import MediaInfo
from clipsplitter.splitter.base import MediaTool
from clipsplitter.splitter.estimator import estimate_clips
from clipsplitter.splitter.naming import clip_filename
from clipsplitter.utils.file_utils import ensure_directory

logger = logging.getLogger(__name__)

# Where package managers usually put the binaries when PATH misses them
COMMON_BIN_DIRS = [
    "/opt/homebrew/bin",  # Homebrew on Apple Silicon
    "/usr/local/bin",     # Homebrew on Intel Mac
    "/usr/bin",           # System path
]

# ffmpeg reports this when a seek lands past the end of the input
EMPTY_OUTPUT_MARKER = "Output file is empty"


def find_executable(name: str, configured: Optional[str] = None) -> Optional[str]:
    """Locate a working ffmpeg-family executable.

    Tries the configured command first, then the common install locations,
    running ``-version`` against each.

    Args:
        name: Executable name, e.g. "ffmpeg"
        configured: Command or path from configuration

    Returns:
        The first candidate that runs, or None
    """
    candidates = [configured or name] + [os.path.join(d, name) for d in COMMON_BIN_DIRS]
    for path in candidates:
        try:
            subprocess.run([path, "-version"], capture_output=True, check=True)
            logger.debug(f"Found {name} at: {path}")
            return path
        except (subprocess.SubprocessError, OSError):
            continue
    return None


class FFmpegTool(MediaTool):
    """Probes with ffprobe and cuts with ffmpeg stream copy (no re-encoding)."""

    name = "ffmpeg"

    def __init__(self, ffmpeg_path: Optional[str] = None, ffprobe_path: Optional[str] = None) -> None:
        self.ffmpeg_path = ffmpeg_path or get_config("ffmpeg_path", "ffmpeg")
        self.ffprobe_path = ffprobe_path or get_config("ffprobe_path", "ffprobe")
        self.output_format = get_config("default_output_format", "mp4")

    def is_available(self) -> bool:
        return (
            find_executable("ffmpeg", self.ffmpeg_path) is not None
            and find_executable("ffprobe", self.ffprobe_path) is not None
        )

    def probe(self, path: str) -> MediaInfo:
        cmd = [
            self.ffprobe_path,
            "-v", "quiet",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            path,
        ]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise ProbeError(f"Failed to run ffprobe: {e}. Is FFmpeg installed?")

        if result.returncode != 0:
            raise ProbeError(f"ffprobe failed: {result.stderr.strip()}")

        try:
            duration = float(result.stdout.strip())
        except ValueError:
            raise ProbeError("Failed to parse duration")

        try:
            size = os.path.getsize(path)
        except OSError as e:
            raise ProbeError(f"Failed to get file info: {e}")

        return MediaInfo(duration=duration, size=size)

    def _clip_command(self, input_path: str, start: float, length: int, output_path: str) -> List[str]:
        return [
            self.ffmpeg_path,
            "-y",  # Overwrite output files
            "-ss", str(start),
            "-i", input_path,
            "-t", str(length),
            "-c", "copy",  # Copy without re-encoding for speed
            "-avoid_negative_ts", "make_zero",
            output_path,
        ]

    def split(
        self, input_path: str, output_dir: str, prefix: str, suffix: str, interval_seconds: int
    ) -> int:
        try:
            info = self.probe(input_path)
        except ProbeError as e:
            raise SplitError(str(e)) from e

        total_clips = estimate_clips(info.duration, interval_seconds)

        try:
            ensure_directory(output_dir)
        except FileError as e:
            raise SplitError(f"Failed to create output directory: {e}") from e

        for i in range(total_clips):
            output_path = os.path.join(
                output_dir, clip_filename(prefix, i + 1, suffix, self.output_format)
            )
            cmd = self._clip_command(input_path, i * interval_seconds, interval_seconds, output_path)
            logger.debug(f"Running: {' '.join(cmd)}")

            try:
                result = subprocess.run(cmd, capture_output=True, text=True)
            except OSError as e:
                raise SplitError(f"Failed to run ffmpeg: {e}")

            if result.returncode != 0:
                if EMPTY_OUTPUT_MARKER in result.stderr:
                    logger.warning(f"Clip {i + 1} of {input_path} is empty, skipping")
                    continue
                raise SplitError(f"ffmpeg failed for clip {i + 1}: {result.stderr.strip()}")

            logger.info(f"Wrote {output_path}")

        return total_clips
