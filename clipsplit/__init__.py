"""
clipsplit - Split a long audio recording into labeled clips.

Reads a manifest of timestamp ranges and cuts one audio file per entry:
manifest parsing → output naming → parallel FFmpeg extraction.
"""

__version__ = "0.1.0"
