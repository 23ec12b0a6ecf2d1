"""Tests for duration parsing and editing."""

import pytest

from clipsplitter.utils.duration import (
    SegmentedDuration,
    filter_duration_input,
    format_clock,
    format_duration,
    parse_duration,
)


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("00:05:00", 300),
            ("5:00", 300),
            ("90", 90),
            ("01:30:15", 5415),
            ("1:2:3", 3723),
        ],
    )
    def test_segments(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "::", "1:2:3:4", "-5"])
    def test_unparsable_is_zero(self, text):
        assert parse_duration(text) == 0

    def test_bad_segment_counts_as_zero(self):
        assert parse_duration("5:ab") == 300
        assert parse_duration("01::30") == 3630

    def test_canonical_round_trip(self):
        for text in ["00:05:00", "12:34:56", "99:59:59", "00:00:01"]:
            assert parse_duration(format_duration(parse_duration(text))) == parse_duration(text)


class TestFormatting:
    """Tests for the display helpers."""

    def test_format_duration(self):
        assert format_duration(300) == "00:05:00"
        assert format_duration(5415) == "01:30:15"
        assert format_duration(0) == "00:00:00"
        assert format_duration(-3) == "00:00:00"

    def test_format_duration_long(self):
        assert format_duration(100 * 3600) == "100:00:00"

    def test_format_clock(self):
        assert format_clock(930) == "15:30"
        assert format_clock(59) == "0:59"


class TestFilterDurationInput:
    """Tests for the combined-field keystroke filter."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("5", "5"),
            ("59", "59"),
            ("593", "5:93"),
            ("0500", "05:00"),
            ("00:05:001", "00:05:00"),
            ("1h30m", "1:30"),
            ("", ""),
        ],
    )
    def test_regroups_digits(self, raw, expected):
        assert filter_duration_input(raw) == expected

    def test_caps_digits(self):
        assert filter_duration_input("1234567") == "12:34:56"

    def test_well_formed_text_is_stable(self):
        for text in ["00:05:00", "5:00", "90", "1:30:00"]:
            assert filter_duration_input(text) == text


class TestSegmentedDuration:
    """Tests for the three-field editor."""

    def test_minutes_clamp_on_blur(self):
        editor = SegmentedDuration()
        editor.edit("minutes", "75")
        assert editor.minutes == "75"
        assert editor.blur("minutes") == "59"

    def test_hours_not_clamped(self):
        editor = SegmentedDuration()
        editor.edit("hours", "75")
        assert editor.blur("hours") == "75"

    def test_keystrokes_keep_two_digits(self):
        editor = SegmentedDuration()
        assert editor.edit("seconds", "5") == "5"
        assert editor.edit("seconds", "5x9") == "59"
        assert editor.edit("seconds", "123") == "12"

    def test_blur_pads_and_fills_empty(self):
        editor = SegmentedDuration()
        editor.edit("seconds", "7")
        assert editor.blur("seconds") == "07"
        editor.edit("minutes", "")
        assert editor.blur("minutes") == "00"

    def test_text_and_seconds(self):
        editor = SegmentedDuration.from_text("5:00")
        assert editor.text == "00:05:00"
        assert editor.total_seconds == 300
        assert editor.as_dict() == {"hours": "00", "minutes": "05", "seconds": "00"}

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            SegmentedDuration().edit("days", "1")
