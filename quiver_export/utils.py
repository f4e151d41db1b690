"""Utility functions for the Quiver export tool."""

import re
from pathlib import Path

LIBRARY_SUFFIX = ".qvlibrary"
NOTEBOOK_SUFFIX = ".qvnotebook"
NOTE_SUFFIX = ".qvnote"

# Leaves room for the ".md" suffix within common 255-byte filename limits
MAX_NAME_BYTES = 200


def list_children(directory: Path, suffix: str) -> list[Path]:
    """Return the immediate child directories of *directory* ending in *suffix*.

    Sorted by name so conversion order does not depend on the filesystem.
    """
    return sorted(
        p for p in directory.iterdir() if p.is_dir() and p.name.endswith(suffix)
    )


def output_name(name: str) -> str:
    """Turn a notebook name or note title into a single path component.

    Case and whitespace are kept as they are; only characters that would
    split the name into several path components are replaced. Names are
    limited to MAX_NAME_BYTES of UTF-8.

    Examples:
        'Meeting Notes' -> 'Meeting Notes'
        'TCP/IP' -> 'TCP_IP'
        '..' -> '_'
        '   ' -> 'Untitled'
    """
    sanitized = re.sub(r"[/\\\x00]", "_", name).strip()
    # Limit length
    if len(sanitized) > MAX_NAME_BYTES:
        sanitized = sanitized[:MAX_NAME_BYTES]
    while len(sanitized.encode("utf-8")) > MAX_NAME_BYTES:
        sanitized = sanitized[:-1]
    sanitized = sanitized.rstrip()

    if sanitized in (".", ".."):
        return "_"
    return sanitized or "Untitled"
