"""
clipsplit.validation - Preflight checks before a run.

Verifies FFmpeg is available and the input files can be read.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from clipsplit.exceptions import DependencyError, ManifestError, ValidationError


def check_ffmpeg(ffmpeg_path: str = "ffmpeg") -> str:
    """Check that FFmpeg is installed and return its version.

    Args:
        ffmpeg_path: Binary name or path

    Returns:
        Version string, or "unknown" if it could not be read

    Raises:
        DependencyError: If FFmpeg is not found
    """
    resolved = shutil.which(ffmpeg_path)
    if not resolved:
        raise DependencyError(
            "ffmpeg",
            f"{ffmpeg_path} not found in PATH",
            "Install with: brew install ffmpeg (macOS) or apt install ffmpeg (Linux)",
        )

    try:
        proc = subprocess.run(
            [resolved, "-version"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        version_line = proc.stdout.split("\n")[0]
        return version_line.split()[2] if version_line else "unknown"
    except (subprocess.TimeoutExpired, IndexError):
        return "unknown"


def validate_inputs(manifest_path: Path, input_path: Path) -> None:
    """Check that the manifest and input audio are existing files.

    Raises:
        ManifestError: If the manifest is missing or not a file
        ValidationError: If the input audio is missing or not a file
    """
    if not manifest_path.is_file():
        raise ManifestError(f"could not open clip file: {manifest_path}")
    if not input_path.is_file():
        raise ValidationError(f"Input audio not found: {input_path}")
