"""Parsing and formatting of HH:MM:SS clip durations.

Two editing front-ends share one canonical parser:

* a single combined field, re-segmented from its digits on every keystroke
  (:func:`filter_duration_input`), and
* three two-digit fields edited independently and clamped when the user
  leaves a field (:class:`SegmentedDuration`).
"""

import re
from typing import Dict

SEGMENT_FIELDS = ("hours", "minutes", "seconds")
MAX_DIGITS = 6


def _segment_value(segment: str) -> int:
    segment = segment.strip()
    return int(segment) if segment.isdigit() else 0


def parse_duration(text: str) -> int:
    """Convert ``SS``, ``MM:SS`` or ``HH:MM:SS`` text to seconds.

    Empty or non-numeric segments count as 0. Never raises; anything that
    cannot be read yields 0.

    Args:
        text: Duration text

    Returns:
        Duration in seconds
    """
    if not text:
        return 0

    parts = [_segment_value(part) for part in text.split(":")]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    if len(parts) == 1:
        return parts[0]
    return 0


def format_duration(seconds: int) -> str:
    """Render seconds in the canonical ``HH:MM:SS`` form."""
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_clock(seconds: float) -> str:
    """Render a media length as ``M:SS`` for file listings."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def filter_duration_input(raw: str) -> str:
    """Normalize the combined duration field after a keystroke.

    Everything but digits is dropped and the digits are regrouped in pairs
    from the right, so the text always reads ``SS``, ``M:SS`` or ``H:MM:SS``.
    At most six digits are kept.
    """
    digits = re.sub(r"\D", "", raw or "")[:MAX_DIGITS]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:-2]}:{digits[-2:]}"
    return f"{digits[:-4]}:{digits[-4:-2]}:{digits[-2:]}"


class SegmentedDuration:
    """Duration edited as separate hours, minutes and seconds fields.

    Keystrokes keep up to two digits without clamping so intermediate states
    like "5" on the way to "59" stay editable. Leaving a field clamps minutes
    and seconds to 59 and pads to two digits; hours are never clamped.
    """

    def __init__(self, hours: str = "00", minutes: str = "00", seconds: str = "00") -> None:
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds

    @classmethod
    def from_text(cls, text: str) -> "SegmentedDuration":
        hours, minutes, seconds = format_duration(parse_duration(text)).split(":")
        return cls(hours, minutes, seconds)

    def _check_field(self, field: str) -> None:
        if field not in SEGMENT_FIELDS:
            raise ValueError(f"Unknown duration field: {field}")

    def edit(self, field: str, raw: str) -> str:
        """Store a keystroke in ``field``, keeping the first two digits."""
        self._check_field(field)
        value = re.sub(r"\D", "", raw or "")[:2]
        setattr(self, field, value)
        return value

    def blur(self, field: str) -> str:
        """Clamp and zero-pad ``field`` after it loses focus."""
        self._check_field(field)
        value = _segment_value(getattr(self, field))
        if field != "hours":
            value = min(value, 59)
        rendered = f"{value:02d}"
        setattr(self, field, rendered)
        return rendered

    def as_dict(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in SEGMENT_FIELDS}

    @property
    def text(self) -> str:
        return f"{self.hours}:{self.minutes}:{self.seconds}"

    @property
    def total_seconds(self) -> int:
        return parse_duration(self.text)
