"""Shared fixtures for the clipsplitter tests."""

import pytest

from clipsplitter.exceptions import ProbeError, SplitError
from clipsplitter.models.video import MediaInfo
from clipsplitter.splitter.base import MediaTool
from clipsplitter.splitter.estimator import estimate_clips


class FakeMediaTool(MediaTool):
    """In-memory media tool that records every call."""

    name = "fake"

    def __init__(self, durations=None, probe_failures=(), split_failures=None):
        self.durations = dict(durations or {})
        self.probe_failures = set(probe_failures)
        self.split_failures = dict(split_failures or {})
        self.probe_calls = []
        self.split_calls = []

    def probe(self, path):
        self.probe_calls.append(path)
        if path in self.probe_failures:
            raise ProbeError(f"ffprobe failed: cannot read {path}")
        return MediaInfo(duration=self.durations.get(path, 60), size=1024)

    def split(self, input_path, output_dir, prefix, suffix, interval_seconds):
        self.split_calls.append((input_path, output_dir, prefix, suffix, interval_seconds))
        if input_path in self.split_failures:
            raise SplitError(self.split_failures[input_path])
        return estimate_clips(self.durations.get(input_path, 60), interval_seconds)


@pytest.fixture
def fake_tool():
    """A media tool for three videos of 100, 200 and 300 seconds."""
    return FakeMediaTool(
        durations={
            "/videos/a.mp4": 100,
            "/videos/b.mp4": 200,
            "/videos/c.mp4": 300,
        }
    )


@pytest.fixture
def video_paths():
    return ["/videos/a.mp4", "/videos/b.mp4", "/videos/c.mp4"]
