"""Navigation links for filesystem entries."""

from wikinav.core.filters import Entry
from wikinav.core.names import strip_known_extension, title_from_name
from wikinav.core.types import NavItem


def build_link(entry: Entry, prefix: str) -> NavItem:
    """Build a navigation item for an entry.

    Directories link to "<prefix><name>/", files to their name with the
    known extension stripped. Children are never attached here.

    Args:
        entry: Filtered directory entry
        prefix: URL prefix (usually the current base path)

    Returns:
        NavItem with title text and link
    """
    if entry.is_dir:
        link = f"{prefix}{entry.name}/"
    else:
        link = prefix + strip_known_extension(entry.name)
    return NavItem(text=title_from_name(entry.name), link=link)
