"""Library model representing a .qvlibrary directory."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Library:
    """A library (corresponds to a directory) containing notebooks."""

    dir_path: str = ""
    notebook_dirs: list[Path] = field(default_factory=list)
