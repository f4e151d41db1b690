"""Content cells that make up a Quiver note."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """Base class for content cells."""
    data: str = ""


@dataclass(frozen=True)
class TextCell(Cell):
    """A markdown or plain text cell, emitted verbatim."""
    pass


@dataclass(frozen=True)
class CodeCell(Cell):
    """A source code cell."""
    language: str = ""


@dataclass(frozen=True)
class LatexCell(Cell):
    """A LaTeX cell."""
    pass


@dataclass(frozen=True)
class DiagramCell(Cell):
    """A sequence or flowchart diagram cell."""
    pass


@dataclass(frozen=True)
class UnknownCell(Cell):
    """A cell whose type is not recognised."""
    cell_type: str = ""
