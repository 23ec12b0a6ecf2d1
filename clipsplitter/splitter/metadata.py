"""Resolve duration and size for files that have not been probed yet."""

import logging
from typing import Callable, List, Optional

from clipsplitter.exceptions import ClipSplitterError, ProbeError
from clipsplitter.models.video import VideoItem
from clipsplitter.splitter.base import MediaTool

logger = logging.getLogger(__name__)

PROBE_FAILURE_MESSAGE = "Failed to get video information. Is FFmpeg installed?"


class MetadataResolver:
    """Probes unresolved items one at a time and merges the results back."""

    def __init__(self, tool: MediaTool) -> None:
        """Initialize the resolver.

        Args:
            tool: Media tool used to probe files
        """
        self.tool = tool

    def resolve(
        self,
        items: List[VideoItem],
        on_resolved: Optional[Callable[[VideoItem], None]] = None,
    ) -> int:
        """Probe every item whose duration is unknown.

        Results are matched back by path, so items removed from ``items``
        while a probe runs are skipped rather than misassigned.

        Args:
            items: The live batch list
            on_resolved: Called with each item right after it resolves

        Returns:
            Number of items resolved

        Raises:
            ProbeError: On the first failed probe; remaining items are not probed
        """
        pending = [item.path for item in items if not item.is_resolved]
        resolved = 0

        for path in pending:
            logger.debug(f"Probing {path}")
            try:
                info = self.tool.probe(path)
            except ClipSplitterError as e:
                raise ProbeError(str(e)) from e
            except OSError as e:
                raise ProbeError(f"Failed to probe {path}: {e}") from e

            item = next((candidate for candidate in items if candidate.path == path), None)
            if item is None:
                logger.info(f"{path} was removed while probing, ignoring result")
                continue
            if item.is_resolved:
                continue

            if info.duration <= 0:
                raise ProbeError(f"Probe reported no duration for {path}")
            item.apply_metadata(info)
            resolved += 1
            logger.info(f"Resolved {item.name}: {item.duration_seconds}s, {item.size} bytes")

            if on_resolved is not None:
                on_resolved(item)

        return resolved
