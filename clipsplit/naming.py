"""
clipsplit.naming - Output naming, collision avoidance and directory setup.

Clip labels become filenames: unsafe characters are replaced, and clashes
with existing files (or with names already handed out in this run) are
resolved by appending 2, 3, ... before the extension.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path

from clipsplit.exceptions import OutputPathError
from clipsplit.logging import logger
from clipsplit.manifest import ClipDescriptor

_UNSAFE_CHARS = re.compile(r'[\s<>:"/\\|*?]')


def sanitize_name(name: str) -> str:
    """Replace whitespace and ``< > : " / \\ | * ?`` with underscores."""
    return _UNSAFE_CHARS.sub("_", name)


def _is_taken(candidate: Path) -> bool:
    try:
        candidate.stat()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise OutputPathError(f"cannot check {candidate}: {e}") from e
    return True


def _reserve_key(candidate: Path) -> Path:
    # case-insensitive filesystems treat Intro.mp3 and intro.mp3 as one file
    return Path(str(candidate).casefold())


def find_next_name(path: Path, reserved: set[Path] | None = None) -> Path:
    """Find the first free variant of a path.

    Tries ``path``, then ``{base}2{ext}``, ``{base}3{ext}`` and so on. A
    candidate is free when nothing exists there and it is not in
    ``reserved``. The chosen path is added to ``reserved`` in casefolded
    form, so names differing only in case never share a run.

    This is a plain existence check, not an atomic claim: two processes
    writing to the same directory can still race.

    Args:
        path: Desired output path including extension
        reserved: Casefolded paths already assigned during this run

    Returns:
        A path that was free at the time of checking

    Raises:
        OutputPathError: If a candidate cannot be stat'ed for a reason
            other than not existing
    """
    # Extension is everything from the last dot of the final component, so
    # an empty label (".mp3") still keeps its extension.
    dot = path.name.rfind(".")
    ext = path.name[dot:] if dot >= 0 else ""
    base = str(path)[: len(str(path)) - len(ext)]
    candidate = path
    count = 1
    logger.debug("finding next name for %s", path)
    while True:
        logger.debug("trying %s", candidate)
        key = _reserve_key(candidate)
        if not _is_taken(candidate) and (reserved is None or key not in reserved):
            logger.debug("found %s", candidate)
            if reserved is not None:
                reserved.add(key)
            return candidate
        count += 1
        candidate = Path(f"{base}{count}{ext}")


def assign_output_paths(
    clips: list[ClipDescriptor],
    output_dir: Path,
    extension: str = ".mp3",
    reserved: set[Path] | None = None,
) -> list[ClipDescriptor]:
    """Rewrite each clip's name into its final, collision-free output path.

    Runs once per clip before any job is dispatched.

    Returns:
        The same clip objects, in the same order
    """
    if reserved is None:
        reserved = set()
    for clip in clips:
        desired = output_dir / f"{sanitize_name(clip.name)}{extension}"
        clip.name = str(find_next_name(desired, reserved))
    return clips


def output_dir_for(manifest_path: Path) -> Path:
    """Return the output directory for a manifest: its path minus ``.txt``.

    Raises:
        OutputPathError: If the manifest has no suffix to strip, since the
            directory would then replace the manifest itself
    """
    name = manifest_path.name
    if name.endswith(".txt"):
        return manifest_path.with_name(name[: -len(".txt")])
    if manifest_path.suffix:
        return manifest_path.with_suffix("")
    raise OutputPathError(
        f"cannot derive an output directory from {manifest_path}: "
        "manifest name needs an extension such as .txt"
    )


def prepare_output_dir(path: Path) -> Path:
    """Remove ``path`` if it exists and recreate it as an empty directory.

    Raises:
        OutputPathError: If removal or creation fails
    """
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.exists():
            shutil.rmtree(path)
    except OSError as e:
        raise OutputPathError(f"cannot remove {path}: {e}") from e

    if path.exists():
        raise OutputPathError(f"cannot remove {path}: still present after removal")

    try:
        path.mkdir()
    except OSError as e:
        raise OutputPathError(f"cannot create {path}: {e}") from e

    return path
