"""Note model representing a single .qvnote directory."""

from dataclasses import dataclass, field

from quiver_export.model.cell import Cell


@dataclass
class Note:
    """A single note in a Quiver notebook."""

    title: str = ""
    cells: list[Cell] = field(default_factory=list)
