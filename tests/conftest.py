"""Shared fixtures that build Quiver source trees in tmp_path."""

import json
from pathlib import Path

import pytest


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def make_notebook():
    """Create a .qvnotebook directory with a meta.json."""

    def _make(parent: Path, name: str, uuid: str = "", dirname: str = "") -> Path:
        notebook_dir = parent / (dirname or f"{uuid or name}.qvnotebook")
        notebook_dir.mkdir(parents=True)
        _write_json(
            notebook_dir / "meta.json",
            {"name": name, "uuid": uuid or name.upper()},
        )
        return notebook_dir

    return _make


@pytest.fixture
def make_note():
    """Create a .qvnote directory with meta.json and content.json."""

    def _make(
        notebook_dir: Path,
        title: str,
        cells: list[dict] | None = None,
        dirname: str = "",
    ) -> Path:
        note_dir = notebook_dir / (dirname or f"{title}.qvnote")
        note_dir.mkdir(parents=True)
        _write_json(
            note_dir / "meta.json",
            {
                "title": title,
                "uuid": f"uuid-{title}",
                "created_at": 1500000000,
                "updated_at": 1500000100,
                "tags": ["quiver"],
            },
        )
        _write_json(
            note_dir / "content.json",
            {"title": title, "cells": cells if cells is not None else []},
        )
        return note_dir

    return _make


@pytest.fixture
def library(tmp_path, make_notebook, make_note):
    """A library with two regular notebooks and the three default ones."""
    lib = tmp_path / "Quiver.qvlibrary"
    lib.mkdir()

    work = make_notebook(lib, "Work", uuid="W-1")
    make_note(work, "Standup", [{"type": "markdown", "data": "- shipped it"}])
    make_note(
        work,
        "Deploy",
        [
            {"type": "text", "data": "Run this:\n"},
            {"type": "code", "language": "bash", "data": "make deploy"},
        ],
    )

    home = make_notebook(lib, "Home", uuid="H-1")
    make_note(home, "Groceries", [{"type": "markdown", "data": "eggs"}])

    for uuid in ("Inbox", "Trash", "Tutorial"):
        default = make_notebook(lib, uuid, uuid=uuid)
        make_note(default, f"{uuid} note", [{"type": "markdown", "data": "x"}])

    return lib
