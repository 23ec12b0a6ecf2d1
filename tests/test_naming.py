"""Tests for output naming and path helpers."""

import os

import pytest

from clipsplitter.models.batch import OutputConfiguration
from clipsplitter.models.video import VideoItem
from clipsplitter.splitter.naming import (
    clip_filename,
    default_output_dir,
    default_prefix,
    preview_filenames,
    resolve_naming,
)
from clipsplitter.utils.file_utils import (
    file_name,
    file_stem,
    format_bytes,
    list_files,
    parent_directory,
)
from clipsplitter.exceptions import FileError


class TestPathHelpers:
    """Tests for path handling on both separator styles."""

    def test_posix_paths(self):
        assert file_name("/home/me/videos/trip.mp4") == "trip.mp4"
        assert parent_directory("/home/me/videos/trip.mp4") == "/home/me/videos"

    def test_windows_paths(self):
        assert file_name("C:\\Users\\me\\trip.mov") == "trip.mov"
        assert parent_directory("C:\\Users\\me\\trip.mov") == "C:\\Users\\me"

    def test_bare_name_has_no_parent(self):
        assert parent_directory("trip.mp4") == ""

    def test_stem_strips_last_extension(self):
        assert file_stem("trip.mp4") == "trip"
        assert file_stem("trip.final.mkv") == "trip.final"
        assert file_stem("trip") == "trip"

    def test_format_bytes(self):
        assert format_bytes(0) == "0 Bytes"
        assert format_bytes(512) == "512 Bytes"
        assert format_bytes(1536) == "1.5 KB"
        assert format_bytes(1024 * 1024) == "1 MB"

    def test_list_files_filters_and_sorts(self, tmp_path):
        for name in ["b.mp4", "a.mkv", "notes.txt"]:
            (tmp_path / name).write_text("x")
        (tmp_path / "sub").mkdir()

        found = list_files(str(tmp_path), extensions=[".mp4", ".mkv"])
        assert [os.path.basename(path) for path in found] == ["a.mkv", "b.mp4"]

    def test_list_files_missing_directory(self, tmp_path):
        with pytest.raises(FileError):
            list_files(str(tmp_path / "missing"))


class TestNaming:
    """Tests for clip naming."""

    def test_defaults_from_source(self):
        assert default_prefix("holiday.mp4") == "holiday_"
        assert default_output_dir("/videos/holiday.mp4") == "/videos"

    def test_clip_filename(self):
        assert clip_filename("video_", 1, "") == "video_001.mp4"
        assert clip_filename("video_", 12, "_hd", "mkv") == "video_012_hd.mkv"
        assert clip_filename("", 1000, "") == "1000.mp4"

    def test_preview_filenames(self):
        assert preview_filenames("trip_", "_part") == [
            "trip_001_part.mp4",
            "trip_002_part.mp4",
            "trip_003_part.mp4",
        ]

    def test_editable_prefix_is_used(self):
        output = OutputConfiguration(prefix="custom-", suffix="_x", prefix_editable=True)
        item = VideoItem(path="/videos/trip.mp4")
        assert resolve_naming(output, item) == ("custom-", "_x")

    def test_batch_prefix_follows_each_file(self):
        output = OutputConfiguration(prefix="ignored", suffix="_x", prefix_editable=False)
        assert resolve_naming(output, VideoItem(path="/v/a.mp4")) == ("a_", "_x")
        assert resolve_naming(output, VideoItem(path="/v/b.mov")) == ("b_", "_x")
