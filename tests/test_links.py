"""Tests for navigation link building."""

from wikinav.core.filters import Entry, EntryKind
from wikinav.core.links import build_link
from wikinav.core.types import NavItem


class TestBuildLink:
    """Tests for build_link()."""

    def test__directory__links_with_trailing_slash(self) -> None:
        item = build_link(Entry("user-guide", EntryKind.DIRECTORY), "/docs/")

        assert item == NavItem(text="User guide", link="/docs/user-guide/")

    def test__file__links_without_extension(self) -> None:
        item = build_link(Entry("getting_started.md", EntryKind.FILE), "/docs/guide/")

        assert item == NavItem(text="Getting started", link="/docs/guide/getting_started")

    def test__file_with_unknown_extension__keeps_name(self) -> None:
        item = build_link(Entry("notes.txt", EntryKind.FILE), "/")

        assert item.link == "/notes.txt"

    def test__empty_prefix__relative_link(self) -> None:
        item = build_link(Entry("blog", EntryKind.DIRECTORY), "")

        assert item.link == "blog/"

    def test__no_children_attached(self) -> None:
        item = build_link(Entry("blog", EntryKind.DIRECTORY), "/")

        assert item.children is None
        assert item.to_dict() == {"text": "Blog", "link": "/blog/"}
