"""Builds Cell objects from the ``cells`` array of a content.json file."""

import logging

from quiver_export.errors import InvalidInputError
from quiver_export.model.cell import (
    Cell,
    CodeCell,
    DiagramCell,
    LatexCell,
    TextCell,
    UnknownCell,
)

logger = logging.getLogger(__name__)

# Cell type values as written by Quiver
_MARKDOWN = "markdown"
_TEXT = "text"
_CODE = "code"
_LATEX = "latex"
_DIAGRAM = "diagram"


def extract_cells(raw_cells: object) -> list[Cell]:
    """Convert the raw JSON cell list into Cell objects, keeping order."""
    if not isinstance(raw_cells, list):
        raise InvalidInputError(
            f"'cells' must be a list, got {type(raw_cells).__name__}"
        )
    return [_extract_cell(raw, i) for i, raw in enumerate(raw_cells)]


def _extract_cell(raw: object, index: int) -> Cell:
    if not isinstance(raw, dict):
        raise InvalidInputError(f"Cell {index} is not an object")

    cell_type = str(raw.get("type", ""))
    data = _as_text(raw.get("data"))

    if cell_type in (_MARKDOWN, _TEXT):
        return TextCell(data=data)
    elif cell_type == _CODE:
        return CodeCell(data=data, language=_as_text(raw.get("language")))
    elif cell_type == _LATEX:
        return LatexCell(data=data)
    elif cell_type == _DIAGRAM:
        return DiagramCell(data=data)

    logger.debug("Cell %d has unrecognised type %r", index, cell_type)
    return UnknownCell(data=data, cell_type=cell_type)


def _as_text(value: object) -> str:
    """Coerce an optional JSON value to a string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
