"""Tests for name transforms."""

from wikinav.core.names import strip_known_extension, title_from_name


class TestStripKnownExtension:
    """Tests for strip_known_extension()."""

    def test__markdown__strips_extension(self) -> None:
        assert strip_known_extension("guide.md") == "guide"

    def test__html__strips_extension(self) -> None:
        assert strip_known_extension("guide.html") == "guide"

    def test__unknown_extension__returns_unchanged(self) -> None:
        assert strip_known_extension("photo.png") == "photo.png"

    def test__no_extension__returns_unchanged(self) -> None:
        assert strip_known_extension("guide") == "guide"

    def test__double_extension__strips_only_last(self) -> None:
        """Only a single extension is removed."""
        assert strip_known_extension("notes.md.md") == "notes.md"
        assert strip_known_extension("page.html.md") == "page.html"

    def test__bare_extension__returns_empty(self) -> None:
        assert strip_known_extension(".md") == ""


class TestTitleFromName:
    """Tests for title_from_name()."""

    def test__separators__replaced_and_first_letter_capitalized(self) -> None:
        """Strip extension, replace separators, capitalize only first letter."""
        assert title_from_name("my-page_name.md") == "My page name"

    def test__directory_name__capitalized(self) -> None:
        assert title_from_name("docs") == "Docs"

    def test__rest_of_name__left_unchanged(self) -> None:
        assert title_from_name("api-REFERENCE") == "Api REFERENCE"
        assert title_from_name("iOS-guide.md") == "IOS guide"

    def test__empty_name__returns_empty(self) -> None:
        assert title_from_name("") == ""

    def test__single_character__capitalized(self) -> None:
        assert title_from_name("a") == "A"
        assert title_from_name("-") == " "

    def test__extension_only__returns_empty(self) -> None:
        assert title_from_name(".md") == ""
