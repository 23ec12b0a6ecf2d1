"""Tests for the moviepy-backed media tool."""

import os
from unittest import mock

import pytest

from clipsplitter.exceptions import ProbeError, SplitError
from clipsplitter.splitter.moviepy_tool import MoviePyTool


@pytest.fixture
def video_file(tmp_path):
    path = tmp_path / "trip.mp4"
    path.write_bytes(b"\0" * 512)
    return str(path)


class TestMoviePyTool:
    """Tests for the MoviePyTool class."""

    @mock.patch("clipsplitter.splitter.moviepy_tool.VideoFileClip")
    def test_probe(self, mock_clip, video_file):
        mock_clip.return_value.__enter__.return_value.duration = 61.5

        info = MoviePyTool().probe(video_file)

        assert info.duration == 61.5
        assert info.size == 512

    @mock.patch("clipsplitter.splitter.moviepy_tool.VideoFileClip")
    def test_probe_failure(self, mock_clip, video_file):
        mock_clip.side_effect = OSError("cannot decode")

        with pytest.raises(ProbeError, match="cannot decode"):
            MoviePyTool().probe(video_file)

    @mock.patch("clipsplitter.splitter.moviepy_tool.VideoFileClip")
    def test_split(self, mock_clip, video_file, tmp_path):
        video = mock_clip.return_value
        video.duration = 250.0

        created = MoviePyTool().split(video_file, str(tmp_path), "trip_", "", 100)

        assert created == 3
        assert [c.args for c in video.subclipped.call_args_list] == [(0, 100), (100, 200), (200, 250.0)]
        written = [c.args[0] for c in video.subclipped.return_value.write_videofile.call_args_list]
        assert written == [os.path.join(str(tmp_path), f"trip_00{n}.mp4") for n in range(1, 4)]
        video.close.assert_called_once()

    @mock.patch("clipsplitter.splitter.moviepy_tool.VideoFileClip")
    def test_split_write_failure(self, mock_clip, video_file, tmp_path):
        video = mock_clip.return_value
        video.duration = 250.0
        video.subclipped.return_value.write_videofile.side_effect = IOError("disk full")

        with pytest.raises(SplitError, match="Failed to write clip 1: disk full"):
            MoviePyTool().split(video_file, str(tmp_path), "trip_", "", 100)
        video.close.assert_called_once()
