"""Current document context.

Maps a request path onto the documentation source directory, producing
the filesystem and URL locations navigation is built from.
"""

from dataclasses import dataclass
from pathlib import Path

from wikinav.core.filters import is_private_name
from wikinav.core.names import CONTENT_EXTENSION, strip_known_extension

INDEX_FILENAME = f"index{CONTENT_EXTENSION}"


@dataclass(frozen=True)
class PageContext:
    """Location of the document being rendered."""

    # Absolute path of the current document
    file_path: Path
    # Absolute parent directory of the current document
    file_dir: Path
    # Request-relative path of the current document
    base_path: str
    # Request-relative parent directory of the current document
    base_dir: str
    # True if the current document is / (home)
    is_home: bool = False

    @property
    def link_prefix(self) -> str:
        """URL of the document's directory, prefix for sibling links."""
        return self.base_dir

    @classmethod
    def resolve(cls, source_dir: Path, request_path: str) -> "PageContext":
        """Resolve a request path to a document context.

        Directories resolve to their index document; other paths resolve
        to "<path>.md". Private segments and ".." are never served.

        Args:
            source_dir: Root directory containing markdown sources
            request_path: URL path (e.g., "/guide/setup" or "guide/")

        Returns:
            PageContext for the document

        Raises:
            FileNotFoundError: If no document matches the path
        """
        segments = [segment for segment in request_path.split("/") if segment]

        if not segments:
            return cls(
                file_path=source_dir / INDEX_FILENAME,
                file_dir=source_dir,
                base_path="/",
                base_dir="/",
                is_home=True,
            )

        for segment in segments:
            if segment == ".." or is_private_name(segment):
                raise FileNotFoundError(f"Document not found: {request_path}")

        rel = "/".join(segments)
        candidate = source_dir.joinpath(*segments)
        if candidate.is_dir():
            return cls(
                file_path=candidate / INDEX_FILENAME,
                file_dir=candidate,
                base_path=f"/{rel}/",
                base_dir=f"/{rel}/",
            )

        segments[-1] = strip_known_extension(segments[-1])
        source_path = source_dir.joinpath(*segments[:-1], segments[-1] + CONTENT_EXTENSION)
        if not source_path.is_file():
            raise FileNotFoundError(f"Document not found: {request_path}")

        parent = "/".join(segments[:-1])
        return cls(
            file_path=source_path,
            file_dir=source_path.parent,
            base_path="/" + "/".join(segments),
            base_dir=f"/{parent}/" if parent else "/",
        )
