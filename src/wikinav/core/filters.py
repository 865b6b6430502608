"""Entry predicates deciding what shows up in navigation.

Names starting with "." or "_" are private and never listed.
"""

import os
from dataclasses import dataclass
from enum import Enum

from wikinav.core.names import CONTENT_EXTENSION


class EntryKind(Enum):
    """Kind of a directory entry."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """Directory entry metadata needed for filtering and linking."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @classmethod
    def from_dir_entry(cls, dir_entry: os.DirEntry[str]) -> "Entry":
        """Build an Entry from an os.scandir() result (symlinks followed)."""
        if dir_entry.is_dir():
            kind = EntryKind.DIRECTORY
        elif dir_entry.is_file():
            kind = EntryKind.FILE
        else:
            kind = EntryKind.OTHER
        return cls(name=dir_entry.name, kind=kind)


def is_private_name(name: str) -> bool:
    return name.startswith((".", "_"))


def is_navigable_directory(entry: Entry) -> bool:
    """Directories that are not private."""
    return entry.kind is EntryKind.DIRECTORY and not is_private_name(entry.name)


def is_content_file(entry: Entry) -> bool:
    """Regular markdown files that are not private."""
    return (
        entry.kind is EntryKind.FILE
        and not is_private_name(entry.name)
        and entry.name.endswith(CONTENT_EXTENSION)
    )
