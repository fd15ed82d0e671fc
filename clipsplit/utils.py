"""
clipsplit.utils - Shared utility functions.
"""

from __future__ import annotations


def format_duration(seconds: float) -> str:
    """Format an elapsed time for the run summary.

    Args:
        seconds: Duration in seconds

    Returns:
        "12.3s" under a minute, otherwise MM:SS or H:MM:SS
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
