"""README.md table-of-contents generation for the exported tree.

Every directory of the output tree gets a README.md listing the Markdown
files and subdirectories below it. An existing README keeps its first three
lines (the title block) and any text written after the generated list.
"""

import logging
import re
from pathlib import Path
from urllib.parse import quote

from quiver_export.errors import MissingFileError

logger = logging.getLogger(__name__)

INDEX_FILE = "README.md"
DEFAULT_INDEX_TITLE = "Table of Contents"
HEADER_LINES = 3

# A generated entry: optional indent, list marker, [text](target)
_ENTRY_RE = re.compile(r"^\s*[-*] \[.*\]\(.*\)\s*$")


def generate_entries(root: Path, base_dir: Path, depth: int = 0) -> list[str]:
    """List the Markdown files and directories below *base_dir*.

    Link targets are relative to *root*. Directories are followed by their
    own entries, indented one level deeper.
    """
    root = Path(root)
    base_dir = Path(base_dir)
    entries: list[str] = []
    indent = "  " * depth

    for child in sorted(base_dir.iterdir(), key=lambda p: p.name):
        if child.name == INDEX_FILE or child.name.startswith("."):
            continue

        rel = child.relative_to(root).as_posix()
        if child.is_dir():
            entries.append(f"{indent}- [{rel}]({quote(rel)})")
            entries.extend(generate_entries(root, child, depth + 1))
        elif child.suffix == ".md":
            text = _first_line(child) or child.stem
            entries.append(f"{indent}- [{text}]({quote(rel)})")

    return entries


def merge_index(
    existing: str | None,
    entries: list[str],
    title: str = DEFAULT_INDEX_TITLE,
) -> str:
    """Build README text from an existing README (if any) and fresh entries.

    Without an existing README the result is a three-line title block
    followed by the entries. With one, its first three lines are kept
    verbatim, any preface text before the first old entry is kept, the old
    entry list is replaced, and whatever followed the old list is appended
    after the new one.
    """
    body = "".join(f"{entry}\n" for entry in entries)

    if not existing:
        return f"{title}\n===\n\n{body}"

    lines = existing.splitlines(keepends=True)
    header = "".join(lines[:HEADER_LINES])
    if not header.endswith("\n"):
        header += "\n"

    # Text between the header and the first entry is kept as a preface
    rest = lines[HEADER_LINES:]
    start = next(
        (i for i, line in enumerate(rest) if _ENTRY_RE.match(line)), len(rest)
    )
    preface = "".join(rest[:start])
    if preface and not preface.endswith("\n"):
        preface += "\n"

    end = start
    while end < len(rest) and (_ENTRY_RE.match(rest[end]) or not rest[end].strip()):
        end += 1
    trailer = "".join(rest[end:])

    if trailer:
        return f"{header}{preface}{body}\n{trailer}"
    return f"{header}{preface}{body}"


def write_index(directory: Path, title: str = DEFAULT_INDEX_TITLE) -> Path:
    """(Re)write the README.md of *directory*.

    Returns the path of the index file.
    """
    directory = Path(directory)
    index_path = directory / INDEX_FILE

    existing = None
    if index_path.is_file():
        existing = index_path.read_text(encoding="utf-8")

    entries = generate_entries(directory, directory)
    index_path.write_text(merge_index(existing, entries, title), encoding="utf-8")
    logger.info("Wrote index %s (%d entries)", index_path, len(entries))

    return index_path


def write_indexes(output_dir: Path, title: str = DEFAULT_INDEX_TITLE) -> list[Path]:
    """Write the root index and a local index for every directory below it.

    Returns list of index file paths.
    """
    output_dir = Path(output_dir)
    if not output_dir.is_dir():
        raise MissingFileError(output_dir, "Output directory")

    written = [write_index(output_dir, title)]
    for directory in _subdirectories(output_dir):
        written.append(write_index(directory, title))

    return written


def _subdirectories(directory: Path) -> list[Path]:
    """All non-hidden directories below *directory*, parents first."""
    found: list[Path] = []
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        if child.is_dir() and not child.name.startswith("."):
            found.append(child)
            found.extend(_subdirectories(child))
    return found


def _first_line(path: Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.readline().strip()
