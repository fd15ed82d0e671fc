"""
clipsplit.exceptions - Custom exception classes.

All clipsplit-specific exceptions inherit from ClipSplitError.
"""

from __future__ import annotations


class ClipSplitError(Exception):
    """Base exception for all clipsplit errors."""

    pass


class ConfigError(ClipSplitError):
    """Configuration loading or validation error."""

    pass


class TimestampError(ClipSplitError):
    """Timestamp has a malformed colon structure."""

    pass


class ManifestError(ClipSplitError):
    """Manifest file could not be opened, read or parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)


class ValidationError(ClipSplitError):
    """Input file validation error."""

    pass


class OutputPathError(ClipSplitError):
    """Output directory setup or collision probing error."""

    pass


class ExtractionError(ClipSplitError):
    """FFmpeg exited with a non-zero status."""

    def __init__(self, message: str, returncode: int | None = None, output: str = ""):
        self.returncode = returncode
        self.output = output
        super().__init__(message)


class DependencyError(ClipSplitError):
    """Required dependency missing or misconfigured."""

    def __init__(self, dependency: str, message: str, install_hint: str | None = None):
        self.dependency = dependency
        self.message = message
        self.install_hint = install_hint
        super().__init__(f"{dependency}: {message}")
