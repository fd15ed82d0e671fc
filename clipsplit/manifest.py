"""
clipsplit.manifest - Clip manifest loading and validation.

A manifest is a plain text file: one header line (ignored), then one clip
per line as ``<start>,<end>,<name>``. The name may itself contain commas.
Blank lines are skipped.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, model_validator

from clipsplit.exceptions import ManifestError, TimestampError
from clipsplit.timestamp import parse_timestamp

_BLANK_LINE = re.compile(r"^\s*$")


class ClipDescriptor(BaseModel):
    """One named time range to cut from the input audio."""

    start: float
    end: float
    name: str
    line: int | None = None

    @model_validator(mode="after")
    def coerce_end(self) -> ClipDescriptor:
        if self.end < self.start:
            self.end = self.start + 1
        return self

    def __str__(self) -> str:
        return f"clip{{{self.start}, {self.end}, {self.name}}}"


class Job(BaseModel):
    """A clip paired with the shared input audio path."""

    input_path: Path
    clip: ClipDescriptor


def parse_clip_line(line: str, line_no: int | None = None) -> ClipDescriptor:
    """Parse one ``start,end,name`` manifest line.

    Args:
        line: Line content without its newline
        line_no: 1-based line number, used in error messages

    Returns:
        ClipDescriptor with end coerced to start + 1 if it precedes start

    Raises:
        ManifestError: If the line has fewer than three fields or a
            timestamp with too many colons
    """
    fields = line.split(",", 2)
    if len(fields) < 3:
        raise ManifestError(f"could not parse line #{line_no}: {line}", line=line_no)

    try:
        start = parse_timestamp(fields[0])
        end = parse_timestamp(fields[1])
    except TimestampError as e:
        raise ManifestError(f"could not parse line #{line_no}: {e}", line=line_no) from e

    return ClipDescriptor(start=start, end=end, name=fields[2], line=line_no)


def parse_manifest(path: Path) -> list[ClipDescriptor]:
    """Read every clip from a manifest file, preserving file order.

    Line numbers in errors are physical file lines; the header is line 1.

    Raises:
        ManifestError: If the file cannot be opened, read or parsed
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise ManifestError(f"could not open clip file: {path}: {e}") from e

    clips: list[ClipDescriptor] = []
    line_no = 0
    with handle:
        try:
            handle.readline()
            line_no = 1
            for raw in handle:
                line_no += 1
                # decoded per line so a bad byte is reported on its own line
                line = raw.decode("utf-8").rstrip("\r\n")
                if _BLANK_LINE.match(line):
                    continue
                clips.append(parse_clip_line(line, line_no))
        except UnicodeDecodeError as e:
            raise ManifestError(f"could not read line #{line_no}: {e}", line=line_no) from e
        except OSError as e:
            line_no += 1
            raise ManifestError(f"could not read line #{line_no}: {e}", line=line_no) from e

    return clips
