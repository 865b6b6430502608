"""Navigation builder for a single document.

Builds the top menu, side menu and breadcrumb trail of the current
document by inspecting the filesystem around it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from wikinav.core.filters import Entry, is_content_file, is_navigable_directory
from wikinav.core.links import build_link
from wikinav.core.names import title_from_name
from wikinav.core.page import PageContext
from wikinav.core.scanner import ScanError, ScanNotFoundError, scan
from wikinav.core.types import BreadcrumbItem, NavItem

logger = logging.getLogger(__name__)

HOME = BreadcrumbItem(text="Home", link="/")


class ScanObserver(Protocol):
    """Hook called around every directory scan."""

    def scan_started(self, directory: Path) -> None: ...

    def scan_finished(self, directory: Path, count: int) -> None: ...


class LoggingScanObserver:
    """Reports scans to the module logger."""

    def scan_started(self, directory: Path) -> None:
        logger.debug(f"Scanning {directory}")

    def scan_finished(self, directory: Path, count: int) -> None:
        logger.debug(f"Found {count} entries in {directory}")


@dataclass(frozen=True)
class PageNavigation:
    """All navigation structures of one document."""

    menu: list[NavItem]
    side_menu: list[NavItem]
    breadcrumbs: list[BreadcrumbItem]
    current_page: BreadcrumbItem | None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "menu": [item.to_dict() for item in self.menu],
            "side_menu": [item.to_dict() for item in self.side_menu],
            "breadcrumbs": [item.to_dict() for item in self.breadcrumbs],
            "current_page": self.current_page.to_dict() if self.current_page else None,
        }


class PageNavigator:
    """Populates navigation for the document described by a PageContext.

    Each build method replaces the matching attribute, so calling it again
    on an unchanged filesystem yields the same result.
    """

    def __init__(
        self,
        context: PageContext,
        root_dir: Path,
        *,
        root_path: str = "/",
        observer: ScanObserver | None = None,
    ) -> None:
        """Initialize navigator.

        Args:
            context: Current document context
            root_dir: Document root the top menu is built from
            root_path: URL the document root is served at, prefix for menu links
            observer: Scan hook (default: log scans at debug level)
        """
        self._context = context
        self._root_dir = root_dir
        self._root_path = root_path
        self._observer = observer or LoggingScanObserver()

        self.menu: list[NavItem] = []
        self.side_menu: list[NavItem] = []
        self.breadcrumbs: list[BreadcrumbItem] = [HOME]
        self.current_page: BreadcrumbItem | None = None

    @property
    def context(self) -> PageContext:
        return self._context

    def build_menu(self) -> list[NavItem]:
        """Build the top menu from the document root.

        Lists navigable directories of the root and, one level deep, their
        navigable sub-directories. Links are rooted at root_path whatever
        the current document is.

        Returns:
            Menu items, sorted by directory name

        Raises:
            ScanError: If the document root can't be listed
        """
        prefix = self._root_path
        menu: list[NavItem] = []

        for entry in self._scan(self._root_dir, is_navigable_directory):
            item = build_link(entry, prefix)
            children = self._menu_children(entry, prefix)
            if children:
                item = NavItem(text=item.text, link=item.link, children=children)
            menu.append(item)

        self.menu = menu
        return menu

    def _menu_children(self, parent: Entry, prefix: str) -> list[NavItem]:
        directory = self._root_dir / parent.name
        try:
            entries = self._scan(directory, is_navigable_directory)
        except ScanError as e:
            logger.warning(f"Skipping menu children: {e}")
            return []

        child_prefix = f"{prefix}{parent.name}/"
        return [build_link(entry, child_prefix) for entry in entries]

    def build_side_menu(self) -> list[NavItem]:
        """Build the side menu from content files next to the document.

        The directory's index document is not listed. A directory that
        can't be listed yields an empty side menu.

        Returns:
            Side menu items, sorted by file name
        """
        directory = self._context.file_dir
        try:
            entries = self._scan(directory, is_content_file)
        except ScanNotFoundError:
            logger.debug(f"No side menu, directory not found: {directory}")
            entries = []
        except ScanError as e:
            logger.warning(f"No side menu: {e}")
            entries = []

        items = (build_link(entry, self._context.link_prefix) for entry in entries)
        self.side_menu = [item for item in items if item.text.lower() != "index"]
        return self.side_menu

    def build_breadcrumb(self) -> list[BreadcrumbItem]:
        """Build the breadcrumb trail from the base path.

        Starts with Home, then one item per path segment. The last item
        also becomes current_page. No filesystem access.

        Returns:
            Breadcrumb items
        """
        breadcrumbs = [HOME]
        prefix = ""

        for segment in self._context.base_path.strip("/").split("/"):
            if not segment:
                continue
            item = BreadcrumbItem(text=title_from_name(segment), link=f"{prefix}/{segment}/")
            prefix = f"{prefix}/{segment}"
            breadcrumbs.append(item)
            self.current_page = item

        self.breadcrumbs = breadcrumbs
        return breadcrumbs

    def build(self) -> PageNavigation:
        """Build menu, side menu and breadcrumbs.

        Raises:
            ScanError: If the document root can't be listed
        """
        self.build_breadcrumb()
        self.build_menu()
        self.build_side_menu()
        return PageNavigation(
            menu=self.menu,
            side_menu=self.side_menu,
            breadcrumbs=self.breadcrumbs,
            current_page=self.current_page,
        )

    def _scan(self, directory: Path, predicate: Callable[[Entry], bool]) -> list[Entry]:
        self._observer.scan_started(directory)
        entries = scan(directory, predicate)
        self._observer.scan_finished(directory, len(entries))
        return entries
