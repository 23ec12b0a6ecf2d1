"""Base media tool class."""

from abc import ABC, abstractmethod

from clipsplitter.models.video import MediaInfo


class MediaTool(ABC):
    """Base class for the external program that reads and cuts media files.

    Implementations run one operation at a time and block until it finishes.
    """

    name = "media tool"

    @abstractmethod
    def probe(self, path: str) -> MediaInfo:
        """Read the duration and size of a media file without changing it.

        Args:
            path: Path to the media file

        Returns:
            Probe results

        Raises:
            ProbeError: If the file is unreadable or the tool is unavailable
        """
        pass

    @abstractmethod
    def split(
        self, input_path: str, output_dir: str, prefix: str, suffix: str, interval_seconds: int
    ) -> int:
        """Split a media file into clips of ``interval_seconds`` each.

        Clips are written to ``output_dir`` as ``{prefix}{NNN}{suffix}.{ext}``
        with a 1-based, 3-digit sequence number.

        Args:
            input_path: Path to the source file
            output_dir: Directory to write clips to
            prefix: Text before the sequence number
            suffix: Text after the sequence number
            interval_seconds: Length of each clip

        Returns:
            Number of clips written

        Raises:
            SplitError: If reading, encoding or writing fails
        """
        pass

    def is_available(self) -> bool:
        """Check whether the tool can be used on this machine."""
        return True
