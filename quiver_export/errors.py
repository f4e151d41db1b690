"""Exceptions raised while converting a Quiver library."""

from pathlib import Path


class QuiverExportError(Exception):
    """Base class for all conversion errors."""


class MissingArgumentError(QuiverExportError):
    """A required path argument was not supplied."""


class MissingFileError(QuiverExportError):
    """An expected source path, metadata file or content file is missing."""

    def __init__(self, path: str | Path, what: str = "File") -> None:
        self.path = Path(path)
        super().__init__(f"{what} does not exist: {self.path}")


class InvalidInputError(QuiverExportError):
    """The source is not a library or notebook, or its JSON is unusable."""
