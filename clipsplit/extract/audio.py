"""
clipsplit.extract.audio - FFmpeg clip extraction.

Builds and runs one FFmpeg invocation per clip. FFmpeg overwrites the
target without prompting and only reports errors.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

from clipsplit.config import SplitConfig
from clipsplit.dispatch import dispatch
from clipsplit.exceptions import DependencyError, ExtractionError
from clipsplit.manifest import ClipDescriptor, parse_manifest
from clipsplit.naming import assign_output_paths, output_dir_for, prepare_output_dir
from clipsplit.timestamp import format_seconds


def build_ffmpeg_command(
    input_path: Path,
    clip: ClipDescriptor,
    config: SplitConfig | None = None,
) -> list[str]:
    """Build the FFmpeg argument list for one clip.

    Args:
        input_path: Source audio file
        clip: Clip whose name is already the resolved output path
        config: Codec, quality and binary settings (defaults if None)

    Returns:
        Argument list suitable for subprocess.run
    """
    config = config or SplitConfig()
    return [
        config.ffmpeg_path,
        "-nostats",
        "-nostdin",
        "-y",
        "-i",
        str(input_path),
        "-ss",
        format_seconds(clip.start),
        "-to",
        format_seconds(clip.end),
        "-c:a",
        config.audio_codec,
        "-q:a",
        config.quality,
        "-v",
        "error",
        clip.name,
    ]


def extract_clip(
    input_path: Path,
    clip: ClipDescriptor,
    config: SplitConfig | None = None,
) -> Path:
    """Cut one clip from the input audio using FFmpeg.

    Blocks until FFmpeg exits. There is no timeout.

    Args:
        input_path: Source audio file
        clip: Clip whose name is already the resolved output path
        config: Extraction settings (defaults if None)

    Returns:
        Path of the written clip

    Raises:
        ExtractionError: If FFmpeg exits non-zero; carries its combined output
        DependencyError: If the FFmpeg binary is missing or cannot be executed
    """
    cmd = build_ffmpeg_command(input_path, clip, config)

    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as e:
        raise DependencyError(
            "ffmpeg",
            f"cannot run {cmd[0]}: {e}",
            "Install with: brew install ffmpeg (macOS) or apt install ffmpeg (Linux)",
        ) from e

    if proc.returncode != 0:
        raise ExtractionError(
            f"error running ffmpeg: exit status {proc.returncode}\n\n"
            "the output of the command was\n\n"
            f"---------\n{proc.stdout}\n---------\n",
            returncode=proc.returncode,
            output=proc.stdout,
        )

    return Path(clip.name)


def split_audio(
    manifest_path: Path,
    input_path: Path,
    config: SplitConfig | None = None,
    extract: Callable[..., Any] | None = None,
) -> dict[str, Any]:
    """Cut every clip listed in a manifest out of one audio file.

    The output directory (manifest path minus ``.txt``) is wiped and
    recreated before the manifest is read. Names are resolved for all clips
    before the first job is dispatched.

    Args:
        manifest_path: Clip manifest
        input_path: Source audio file
        config: Run settings (defaults if None)
        extract: Called as ``extract(input_path, clip, config)`` per clip;
            defaults to extract_clip

    Returns:
        Dict with 'output_dir', 'clips' (resolved output paths in manifest
        order) and the dispatch counters

    Raises:
        ClipSplitError: On the first fatal error anywhere in the run
    """
    config = config or SplitConfig()
    extract = extract or extract_clip

    output_dir = prepare_output_dir(output_dir_for(manifest_path))
    clips = parse_manifest(manifest_path)
    assign_output_paths(clips, output_dir, config.extension)

    results = dispatch(
        clips,
        input_path,
        config.worker_count,
        lambda source, clip: extract(source, clip, config),
    )
    results["output_dir"] = str(output_dir)
    results["clips"] = [clip.name for clip in clips]
    return results
