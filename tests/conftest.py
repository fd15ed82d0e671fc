"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path

import pytest

from clipsplit.manifest import ClipDescriptor


@pytest.fixture
def make_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing manifest text to a file in tmp_path."""

    def _make(content: str, name: str = "clips.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def input_audio(tmp_path: Path) -> Path:
    """Create a placeholder input audio file."""
    path = tmp_path / "recording.wav"
    path.write_bytes(b"RIFF fake wav content")
    return path


class FakeExtractor:
    """Stands in for FFmpeg: writes an empty file at each clip's output path."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def __call__(self, input_path: Path, clip: ClipDescriptor, config=None) -> Path:
        with self._lock:
            self.calls.append(clip.name)
        if self.fail_on is not None and Path(clip.name).stem == self.fail_on:
            from clipsplit.exceptions import ExtractionError

            raise ExtractionError("error running ffmpeg: exit status 1", returncode=1)
        output = Path(clip.name)
        output.touch(exist_ok=False)
        return output


@pytest.fixture
def fake_extract() -> FakeExtractor:
    return FakeExtractor()


@pytest.fixture
def failing_extract() -> FakeExtractor:
    """Extractor that fails on the clip whose output stem is 'bad'."""
    return FakeExtractor(fail_on="bad")
