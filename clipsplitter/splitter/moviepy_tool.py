"""Media tool backed by moviepy, re-encoding each clip."""

import logging
import os

from moviepy import VideoFileClip

from clipsplitter.config import get_config
from clipsplitter.exceptions import FileError, ProbeError, SplitError
from clipsplitter.models.video import MediaInfo
from clipsplitter.splitter.base import MediaTool
from clipsplitter.splitter.estimator import estimate_clips
from clipsplitter.splitter.naming import clip_filename
from clipsplitter.utils.file_utils import ensure_directory

logger = logging.getLogger(__name__)


class MoviePyTool(MediaTool):
    """Cuts on exact frame boundaries by decoding and re-encoding.

    Slower than stream copy but clips start exactly on the interval.
    """

    name = "moviepy"

    def __init__(self) -> None:
        self.codec = get_config("default_codec", "libx264")
        self.audio_codec = get_config("default_audio_codec", "aac")
        self.threads = int(get_config("ffmpeg_threads", 2))
        self.output_format = get_config("default_output_format", "mp4")

    def probe(self, path: str) -> MediaInfo:
        try:
            with VideoFileClip(path) as video:
                duration = float(video.duration or 0)
            size = os.path.getsize(path)
        except Exception as e:
            raise ProbeError(f"Failed to load video {path}: {e}")
        return MediaInfo(duration=duration, size=size)

    def split(
        self, input_path: str, output_dir: str, prefix: str, suffix: str, interval_seconds: int
    ) -> int:
        try:
            ensure_directory(output_dir)
        except FileError as e:
            raise SplitError(f"Failed to create output directory: {e}") from e

        try:
            video = VideoFileClip(input_path)
        except Exception as e:
            raise SplitError(f"Failed to load video {input_path}: {e}")

        try:
            total_clips = estimate_clips(video.duration, interval_seconds)
            for i in range(total_clips):
                start = i * interval_seconds
                end = min(video.duration, start + interval_seconds)
                output_path = os.path.join(
                    output_dir, clip_filename(prefix, i + 1, suffix, self.output_format)
                )
                clip = video.subclipped(start, end)
                try:
                    clip.write_videofile(
                        output_path,
                        codec=self.codec,
                        audio_codec=self.audio_codec,
                        threads=self.threads,
                        logger=None,
                    )
                except Exception as e:
                    raise SplitError(f"Failed to write clip {i + 1}: {e}")
                finally:
                    clip.close()
                logger.info(f"Wrote {output_path}")
            return total_clips
        finally:
            video.close()
