"""Core type definitions.

Navigation records consumed by templates and the JSON API.
"""

from dataclasses import dataclass
from typing import TypedDict


class NavItemDict(TypedDict, total=False):
    """Dictionary representation of a navigation item."""

    text: str
    link: str
    children: list["NavItemDict"]


@dataclass(frozen=True)
class NavItem:
    """Menu or side menu entry.

    children is None when the item has no children at all, which is
    distinct from an empty list.
    """

    text: str
    link: str
    children: list["NavItem"] | None = None

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"text": self.text, "link": self.link}
        if self.children is not None:
            result["children"] = [child.to_dict() for child in self.children]
        return result


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item."""

    text: str
    link: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"text": self.text, "link": self.link}
