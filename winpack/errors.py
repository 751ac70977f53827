"""Exceptions raised by the packaging steps. All are fatal to a release run."""

from pathlib import Path


class WinpackError(Exception):
    """Base class; the CLI turns any of these into exit status 1."""


class ConfigError(WinpackError):
    """Version missing or unparsable, or the manifest could not be read."""


class BuildToolError(WinpackError):
    """Flutter not found, could not be spawned, or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ArtifactMissingError(WinpackError):
    """Expected build output is absent after the build step."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Executable not found at {path}")
        self.path = path


class FilesystemError(WinpackError):
    """Creating, removing, or copying files or directories failed."""


class ArchiveError(WinpackError):
    """Opening, writing, or finalizing the zip archive failed."""
