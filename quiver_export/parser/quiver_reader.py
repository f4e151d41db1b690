"""Reads Quiver library, notebook and note directories from disk.

Each notebook and note directory carries a ``meta.json``; notes also carry a
``content.json`` with the ordered cell list.
"""

import json
import logging
from pathlib import Path

from quiver_export.errors import InvalidInputError, MissingFileError
from quiver_export.model.library import Library
from quiver_export.model.note import Note
from quiver_export.model.notebook import Notebook
from quiver_export.parser.cell_extractor import extract_cells
from quiver_export.utils import NOTEBOOK_SUFFIX, list_children

logger = logging.getLogger(__name__)

META_FILE = "meta.json"
CONTENT_FILE = "content.json"


class QuiverReader:
    """Loads the Quiver source format into the model classes."""

    def read_library(self, library_dir: str | Path) -> Library:
        """Enumerate the notebooks of a .qvlibrary directory."""
        library_dir = Path(library_dir)
        if not library_dir.is_dir():
            raise MissingFileError(library_dir, "Library directory")

        return Library(
            dir_path=str(library_dir),
            notebook_dirs=list_children(library_dir, NOTEBOOK_SUFFIX),
        )

    def read_notebook(self, notebook_dir: str | Path) -> Notebook:
        """Read a notebook's meta.json.

        Notes are not loaded here; the converter reads them one at a time.
        """
        notebook_dir = Path(notebook_dir)
        meta_path = notebook_dir / META_FILE
        meta = _load_json(meta_path, "Notebook metadata")
        return Notebook(
            name=str(_require(meta, "name", meta_path)),
            uuid=str(_require(meta, "uuid", meta_path)),
            dir_path=str(notebook_dir),
        )

    def read_note(self, note_dir: str | Path) -> Note:
        """Read a note's meta.json and content.json."""
        note_dir = Path(note_dir)
        meta_path = note_dir / META_FILE
        content_path = note_dir / CONTENT_FILE

        # Both files must exist before either is parsed
        if not meta_path.is_file():
            raise MissingFileError(meta_path, "Note metadata")
        if not content_path.is_file():
            raise MissingFileError(content_path, "Note content")

        meta = _load_json(meta_path, "Note metadata")
        content = _load_json(content_path, "Note content")

        raw_cells = _require(content, "cells", content_path)
        try:
            cells = extract_cells(raw_cells)
        except InvalidInputError as e:
            raise InvalidInputError(f"{content_path}: {e}") from e

        return Note(
            title=str(_require(meta, "title", meta_path)),
            cells=cells,
        )


def _load_json(path: Path, what: str) -> dict:
    if not path.is_file():
        raise MissingFileError(path, what)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"{path} is not valid UTF-8 JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidInputError(f"{path} must contain a JSON object")

    logger.debug("Loaded %s", path)
    return data


def _require(data: dict, key: str, path: Path):
    if key not in data:
        raise InvalidInputError(f"{path} has no '{key}' field")
    return data[key]
