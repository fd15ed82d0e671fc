"""
clipsplit.extract - Clip extraction with FFmpeg.

Each clip is trimmed from the input audio and re-encoded to its own file
by one blocking FFmpeg call.
"""

from __future__ import annotations
