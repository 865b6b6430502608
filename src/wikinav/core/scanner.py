"""Directory listing with filtering and deterministic ordering."""

import os
from collections.abc import Callable
from pathlib import Path

from wikinav.core.filters import Entry


class ScanError(Exception):
    """Directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot list directory {path}: {reason}")
        self.path = path
        self.reason = reason


class ScanNotFoundError(ScanError):
    """Directory does not exist."""


class ScanPermissionError(ScanError):
    """Directory is not readable."""


class ScanNotADirectoryError(ScanError):
    """Path exists but is not a directory."""


def scan(directory: Path, predicate: Callable[[Entry], bool]) -> list[Entry]:
    """List the entries of a directory accepted by a predicate.

    Args:
        directory: Directory to list (not recursive)
        predicate: Filter applied to each entry

    Returns:
        Accepted entries sorted by name (case-sensitive, by code point)

    Raises:
        ScanNotFoundError: If the directory doesn't exist
        ScanPermissionError: If the directory can't be read
        ScanNotADirectoryError: If the path is not a directory
        ScanError: On any other listing failure
    """
    try:
        with os.scandir(directory) as it:
            entries = [Entry.from_dir_entry(dir_entry) for dir_entry in it]
    except FileNotFoundError as e:
        raise ScanNotFoundError(directory, "not found") from e
    except PermissionError as e:
        raise ScanPermissionError(directory, "permission denied") from e
    except NotADirectoryError as e:
        raise ScanNotADirectoryError(directory, "not a directory") from e
    except OSError as e:
        raise ScanError(directory, e.strerror or str(e)) from e

    return sorted((entry for entry in entries if predicate(entry)), key=lambda entry: entry.name)
