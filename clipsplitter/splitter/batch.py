"""Batch orchestration: select files, configure, then split them one by one."""

import logging
import math
from typing import Callable, Iterable, List, Optional

from clipsplitter.exceptions import ProbeError, ValidationError
from clipsplitter.models.batch import (
    BatchProgress,
    OutputConfiguration,
    SplitConfiguration,
    Status,
)
from clipsplitter.models.video import VideoItem
from clipsplitter.splitter.base import MediaTool
from clipsplitter.splitter.estimator import estimate_clips
from clipsplitter.splitter.metadata import PROBE_FAILURE_MESSAGE, MetadataResolver
from clipsplitter.splitter.naming import default_output_dir, default_prefix, resolve_naming

logger = logging.getLogger(__name__)

ChangeCallback = Callable[["BatchSplitter"], None]


def _percent(done: int, total: int) -> int:
    # Half rounds up, 12.5 -> 13
    if total <= 0:
        return 0
    return int(math.floor(done / total * 100 + 0.5))


class BatchSplitter:
    """State machine that turns a list of videos into clips.

    Files are probed and split strictly one at a time, in list order. A
    failure stops the run and moves the batch to ``Status.ERROR``; clips
    already written stay on disk. ``reset()`` always returns to a clean
    ``Status.IDLE``.

    In single-file mode (``multi_file=False``) the batch holds at most one
    file and the clip prefix is editable. In batch mode each file's prefix
    is forced to its own stem and only the suffix is shared.
    """

    def __init__(
        self,
        tool: MediaTool,
        multi_file: bool = True,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        """Initialize the splitter.

        Args:
            tool: Media tool that probes and splits files
            multi_file: Batch mode when True, single-file mode otherwise
            on_change: Called with the splitter after every state change
        """
        self.tool = tool
        self.multi_file = multi_file
        self.on_change = on_change
        self.resolver = MetadataResolver(tool)

        self.items: List[VideoItem] = []
        self.config = SplitConfiguration()
        self.output = OutputConfiguration(prefix_editable=not multi_file)
        self.progress = BatchProgress()
        self.status = Status.IDLE
        self.error: Optional[str] = None

    # Observation

    @property
    def is_processing(self) -> bool:
        return self.status in (Status.LOADING, Status.SPLITTING)

    @property
    def is_ready(self) -> bool:
        """Whether ``start()`` would run."""
        return (
            bool(self.items)
            and all(item.is_resolved for item in self.items)
            and bool(self.output.directory)
            and self.config.duration_seconds > 0
        )

    def estimated_clips(self, item: VideoItem) -> int:
        return estimate_clips(item.duration_seconds, self.config.duration_seconds)

    def total_estimated_clips(self) -> int:
        return sum(self.estimated_clips(item) for item in self.items)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def _set_status(self, status: Status) -> None:
        if status != self.status:
            logger.debug(f"Status {self.status.value} -> {status.value}")
        self.status = status
        self._notify()

    def _guard_busy(self, action: str) -> bool:
        if self.is_processing:
            logger.warning(f"Ignoring {action} while {self.status.value}")
            return True
        return False

    # File selection

    def _clear_run_state(self) -> None:
        self.error = None
        self.progress = BatchProgress()
        self.status = Status.IDLE

    def select_files(self, paths: Iterable[str]) -> None:
        """Add files to the batch and probe any that are new.

        Single-file mode replaces the current file. Batch mode appends,
        skipping paths already in the batch.

        Raises:
            ValidationError: If several files are given in single-file mode
        """
        if self._guard_busy("file selection"):
            return

        paths = list(paths)
        if not self.multi_file and len(paths) > 1:
            raise ValidationError("Only one file can be selected in single-file mode")

        new_items = [VideoItem(path=path) for path in paths]
        if self.multi_file:
            known = {item.path for item in self.items}
            for item in new_items:
                if item.path in known:
                    logger.info(f"{item.path} is already in the batch")
                    continue
                known.add(item.path)
                self.items.append(item)
        elif new_items:
            self.items = new_items

        self._clear_run_state()
        self._notify()
        self.resolve_metadata()

    def remove_file(self, index: int) -> Optional[VideoItem]:
        """Remove the file at ``index`` from the batch.

        Files still waiting for metadata are probed again afterwards.

        Raises:
            ValidationError: If there is no file at ``index``
        """
        if self._guard_busy("file removal"):
            return None
        if not 0 <= index < len(self.items):
            raise ValidationError(f"No file at index {index}")

        item = self.items.pop(index)
        logger.info(f"Removed {item.name} from the batch")
        self._clear_run_state()
        self._notify()
        self.resolve_metadata()
        return item

    def resolve_metadata(self) -> None:
        """Probe every file with an unknown duration.

        The first failure aborts the remaining probes and moves the batch
        to ``Status.ERROR`` with a fixed message.
        """
        if not any(not item.is_resolved for item in self.items):
            return

        self._set_status(Status.LOADING)
        try:
            self.resolver.resolve(self.items, on_resolved=self._apply_defaults)
        except Exception as e:
            logger.error(f"Failed to get video info: {e}", exc_info=not isinstance(e, ProbeError))
            self.error = PROBE_FAILURE_MESSAGE
            self._set_status(Status.ERROR)
            return
        self._set_status(Status.IDLE)

    def _apply_defaults(self, item: VideoItem) -> None:
        if not self.output.directory:
            self.output.directory = default_output_dir(item.path)
            logger.info(f"Output directory defaults to {self.output.directory}")
        if self.output.prefix_editable:
            self.output.prefix = default_prefix(item.name)
        self._notify()

    # Configuration

    def set_duration(self, text: str) -> None:
        if self._guard_busy("duration change"):
            return
        self.config.duration_text = text
        self._notify()

    def edit_duration(self, raw: str) -> str:
        """Apply a keystroke to the combined duration field."""
        if self._guard_busy("duration change"):
            return self.config.duration_text
        text = self.config.edit(raw)
        self._notify()
        return text

    def set_output_directory(self, path: str) -> None:
        if self._guard_busy("output directory change"):
            return
        self.output.directory = path
        self._notify()

    def set_prefix(self, text: str) -> None:
        """Set the clip prefix.

        Raises:
            ValidationError: In batch mode, where prefixes come from filenames
        """
        if not self.output.prefix_editable:
            raise ValidationError("The prefix is derived from each filename in batch mode")
        if self._guard_busy("prefix change"):
            return
        self.output.prefix = text
        self._notify()

    def set_suffix(self, text: str) -> None:
        if self._guard_busy("suffix change"):
            return
        self.output.suffix = text
        self._notify()

    # Running

    def start(self) -> None:
        """Split every file in the batch, in order.

        Does nothing unless ``is_ready``. A failing file stops the run; later
        files are not processed and earlier clips are kept.
        """
        if self._guard_busy("start"):
            return
        if not self.is_ready:
            logger.debug("Start ignored, batch is not ready")
            return

        interval = self.config.duration_seconds
        output_dir = self.output.directory
        items = list(self.items)
        total = len(items)

        self.error = None
        self.progress = BatchProgress(total_files=total)
        self._set_status(Status.SPLITTING)
        logger.info(f"Splitting {total} file(s) into {interval}s clips in {output_dir}")

        for i, item in enumerate(items):
            prefix, suffix = resolve_naming(self.output, item)
            self.progress.current_file = i + 1
            self.progress.percentage = _percent(i, total)
            self.progress.expected_clips = self.estimated_clips(item)
            self._notify()

            logger.info(f"[{i + 1}/{total}] Splitting {item.name}")
            try:
                created = self.tool.split(item.path, output_dir, prefix, suffix, interval)
            except Exception as e:
                logger.exception(f"Split failed for {item.path}")
                self.error = str(e)
                self._set_status(Status.ERROR)
                return

            self.progress.total_clips_created += created
            logger.info(f"Created {created} clip(s) from {item.name}")

        self.progress.percentage = 100
        self._set_status(Status.SUCCESS)
        logger.info(f"Split complete, {self.progress.total_clips_created} clips created")

    def reset(self) -> None:
        """Clear the batch, settings, progress and error, whatever the status."""
        self.items = []
        self.config = SplitConfiguration()
        self.output = OutputConfiguration(prefix_editable=not self.multi_file)
        self.progress = BatchProgress()
        self.error = None
        self._set_status(Status.IDLE)

    def summary(self) -> str:
        """One-line description of the finished run."""
        if self.status == Status.SUCCESS:
            return (
                f"Split complete! {self.progress.total_clips_created} clips created "
                f"in {self.output.directory}"
            )
        if self.status == Status.ERROR:
            return self.error or "Split failed"
        return ""
