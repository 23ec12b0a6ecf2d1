"""Clip count estimation for previews and progress."""

import math


def estimate_clips(source_seconds: float, split_seconds: float) -> int:
    """Get the number of clips a split will produce.

    Args:
        source_seconds: Length of the source video
        split_seconds: Length of each clip

    Returns:
        ``ceil(source / split)``, or 0 if either length is not positive
    """
    if source_seconds <= 0 or split_seconds <= 0:
        return 0
    return math.ceil(source_seconds / split_seconds)


def describe_clip_count(count: int) -> str:
    """Preview sentence shown before splitting; empty when nothing would be made."""
    if count <= 0:
        return ""
    return f"This will create {count} clip{'' if count == 1 else 's'}"
