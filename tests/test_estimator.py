"""Tests for clip count estimation."""

from clipsplitter.splitter.estimator import describe_clip_count, estimate_clips


def test_rounds_up():
    assert estimate_clips(930, 300) == 4
    assert estimate_clips(900, 300) == 3
    assert estimate_clips(900.2, 300) == 4


def test_non_positive_inputs():
    assert estimate_clips(0, 300) == 0
    assert estimate_clips(300, 0) == 0
    assert estimate_clips(-10, 300) == 0


def test_describe_clip_count():
    assert describe_clip_count(1) == "This will create 1 clip"
    assert describe_clip_count(4) == "This will create 4 clips"
    assert describe_clip_count(0) == ""
