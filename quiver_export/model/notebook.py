"""Notebook model representing a .qvnotebook directory."""

from dataclasses import dataclass

# Quiver's built-in notebooks use these fixed uuids and are never exported.
DEFAULT_NOTEBOOK_UUIDS = frozenset({"Inbox", "Trash", "Tutorial"})


@dataclass
class Notebook:
    """A notebook (corresponds to a directory) containing notes."""

    name: str = ""
    uuid: str = ""
    dir_path: str = ""

    @property
    def is_default(self) -> bool:
        return self.uuid in DEFAULT_NOTEBOOK_UUIDS
