"""Display names derived from file and directory names."""

import re

# Extensions stripped from file names when building titles and links
KNOWN_EXTENSIONS = (".html", ".md")

# Extension of renderable document sources
CONTENT_EXTENSION = ".md"

_SEPARATORS = re.compile(r"[-_]")


def strip_known_extension(name: str) -> str:
    """Remove a single recognized extension from a file name.

    Args:
        name: File name (e.g., "guide.md")

    Returns:
        Name without the extension, or the name unchanged if the
        extension is not recognized
    """
    for ext in KNOWN_EXTENSIONS:
        if name.endswith(ext):
            return name[: -len(ext)]
    return name


def title_from_name(name: str) -> str:
    """Build a human title from a file name.

    Dashes and underscores become spaces and only the first character is
    upper-cased, so "my-page_name.md" becomes "My page name".
    """
    title = _SEPARATORS.sub(" ", strip_known_extension(name))
    return title[:1].upper() + title[1:]
