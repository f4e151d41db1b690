"""Markdown converter for the Quiver content model.

Converts Note objects with Cells into Markdown text, and writes the files
into a directory per notebook.
"""

import logging
from pathlib import Path

from quiver_export.converter.index import INDEX_FILE
from quiver_export.errors import (
    InvalidInputError,
    MissingArgumentError,
    MissingFileError,
)
from quiver_export.model.cell import (
    Cell,
    CodeCell,
    DiagramCell,
    LatexCell,
    TextCell,
    UnknownCell,
)
from quiver_export.model.note import Note
from quiver_export.model.notebook import Notebook
from quiver_export.parser.quiver_reader import QuiverReader
from quiver_export.utils import (
    LIBRARY_SUFFIX,
    NOTE_SUFFIX,
    NOTEBOOK_SUFFIX,
    list_children,
    output_name,
)

logger = logging.getLogger(__name__)

LATEX_PLACEHOLDER = "LATEX"
DIAGRAM_PLACEHOLDER = "DIAGRAM"


class MarkdownConverter:
    """Converts Quiver notebooks to Markdown files."""

    def __init__(
        self, output_dir: str | Path, reader: QuiverReader | None = None
    ) -> None:
        if not output_dir:
            raise MissingArgumentError("Output directory was not given")
        self.output_dir = Path(output_dir)
        self.reader = reader or QuiverReader()
        self._written: set[Path] = set()

    def convert(self, source: str | Path) -> list[Path]:
        """Convert a .qvlibrary or a single .qvnotebook.

        Returns list of created file paths.
        """
        if not source:
            raise MissingArgumentError("Source path was not given")
        source = Path(source)
        if not source.exists():
            raise MissingFileError(source, "Source path")

        if source.name.endswith(NOTEBOOK_SUFFIX):
            return self.convert_notebook(source)
        elif source.name.endswith(LIBRARY_SUFFIX):
            return self.convert_library(source)

        raise InvalidInputError(
            f"{source} is neither a {LIBRARY_SUFFIX} library "
            f"nor a {NOTEBOOK_SUFFIX} notebook"
        )

    def convert_library(self, library_dir: str | Path) -> list[Path]:
        """Convert every notebook in a library.

        Returns list of created file paths.
        """
        library = self.reader.read_library(library_dir)
        logger.info("Converting library %s", library.dir_path)
        created: list[Path] = []

        for notebook_dir in library.notebook_dirs:
            created.extend(self.convert_notebook(notebook_dir))

        return created

    def convert_notebook(self, notebook_dir: str | Path) -> list[Path]:
        """Convert every note in a notebook, unless it is a default notebook.

        Returns list of created file paths.
        """
        notebook = self.reader.read_notebook(notebook_dir)
        if notebook.is_default:
            logger.info(
                "Skipping default notebook %s (%s)", notebook.name, notebook.uuid
            )
            return []

        logger.info("Converting notebook %s", notebook.name)
        created: list[Path] = []
        for note_dir in list_children(Path(notebook.dir_path), NOTE_SUFFIX):
            created.append(self.convert_note(notebook, note_dir))

        return created

    def convert_note(self, notebook: Notebook, note_dir: str | Path) -> Path:
        """Convert a single note and write it below the notebook directory.

        Returns the path of the written file.
        """
        note = self.reader.read_note(note_dir)
        file_path = self.note_path(notebook, note)

        if file_path in self._written:
            logger.warning(
                "Note %s overwrites %s written earlier in this run",
                note_dir,
                file_path,
            )

        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.render_note(note), encoding="utf-8")
        self._written.add(file_path)
        logger.info("Wrote %s", file_path)

        return file_path

    def note_path(self, notebook: Notebook, note: Note) -> Path:
        """Destination path of a note's Markdown file."""
        notebook_dir = self.output_dir / output_name(notebook.name)
        filename = f"{output_name(note.title)}.md"

        # The index writer owns README.md in every output directory
        if filename.casefold() == INDEX_FILE.casefold():
            renamed = f"{filename[:-3]} (note).md"
            logger.warning(
                "Note %r written as %s to avoid the index file", note.title, renamed
            )
            filename = renamed

        return notebook_dir / filename

    def render_note(self, note: Note) -> str:
        """Render a single note to Markdown text."""
        return render_markdown(note.title, note.cells)


def render_markdown(title: str, cells: list[Cell]) -> str:
    """Render a title and its cells to a Markdown document.

    Cells are concatenated in order with nothing inserted between them.
    """
    parts = [f"{title}\n===\n"]
    parts.extend(_render_cell(cell) for cell in cells)
    return "".join(parts)


def _render_cell(cell: Cell) -> str:
    """Render a single cell to Markdown."""
    if isinstance(cell, TextCell):
        return cell.data
    elif isinstance(cell, CodeCell):
        return f"```{cell.language}\n{cell.data}\n```"
    elif isinstance(cell, LatexCell):
        return LATEX_PLACEHOLDER
    elif isinstance(cell, DiagramCell):
        return DIAGRAM_PLACEHOLDER

    if isinstance(cell, UnknownCell):
        cell_type = cell.cell_type
    else:
        cell_type = type(cell).__name__
    logger.warning("Dropping cell of unrecognised type %r", cell_type)
    return ""
