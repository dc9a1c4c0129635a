"""Tests for sidebar item parsing."""

import pytest
from navstage.core.types import (
    CategoryRef,
    DocRef,
    LinkRef,
    ResolvedCategory,
    parse_sidebar_item,
    parse_sidebar_items,
)


class TestParseSidebarItem:
    """Tests for parse_sidebar_item()."""

    def test__string__stays_shorthand(self) -> None:
        """Keep bare strings as doc id shorthand."""
        assert parse_sidebar_item("intro", "sidebar.guides[0]") == "intro"

    def test__doc_table__parses_doc(self) -> None:
        """Parse doc tables with optional label."""
        item = parse_sidebar_item({"type": "doc", "id": "setup", "label": "Setup"}, "x")

        assert item == DocRef(id="setup", label="Setup")

    def test__link_table__parses_link(self) -> None:
        """Parse link tables."""
        item = parse_sidebar_item({"type": "link", "href": "/api", "label": "API"}, "x")

        assert item == LinkRef(href="/api", label="API")

    def test__category_table__parses_nested_items_and_extras(self) -> None:
        """Parse categories recursively and keep extra keys."""
        item = parse_sidebar_item(
            {
                "type": "category",
                "label": "Guides",
                "items": ["intro", {"type": "doc", "id": "setup"}],
                "link": {"id": "overview"},
                "collapsible": False,
            },
            "x",
        )

        assert item == CategoryRef(
            label="Guides",
            items=("intro", DocRef(id="setup")),
            link=DocRef(id="overview"),
            extras={"collapsible": False},
        )

    def test__unknown_type__raises_with_location(self) -> None:
        """Name the offending position in the error."""
        with pytest.raises(ValueError, match=r"sidebar\.guides\[1\]\.type"):
            parse_sidebar_items(["intro", {"type": "page"}], "sidebar.guides")

    def test__doc_without_id__raises(self) -> None:
        """Require a doc id."""
        with pytest.raises(ValueError, match="id must be a non-empty string"):
            parse_sidebar_item({"type": "doc"}, "x")

    def test__category_without_items__raises(self) -> None:
        """Require category items to be a list."""
        with pytest.raises(ValueError, match=r"x\.items must be a list"):
            parse_sidebar_item({"type": "category", "label": "A"}, "x")

    def test__category_link_of_other_type__raises(self) -> None:
        """Only docs can be category links."""
        with pytest.raises(ValueError, match="link.type"):
            parse_sidebar_item(
                {"type": "category", "label": "A", "items": [], "link": {"type": "link", "id": "a"}},
                "x",
            )

    def test__number__raises(self) -> None:
        """Reject values that are neither strings nor tables."""
        with pytest.raises(ValueError, match="must be a string or a table"):
            parse_sidebar_item(3, "x")

    def test__empty_string__raises(self) -> None:
        """Reject an empty doc id shorthand."""
        with pytest.raises(ValueError, match=r"sidebar\.guides\[1\] must be a non-empty doc id"):
            parse_sidebar_items(["intro", ""], "sidebar.guides")

    @pytest.mark.parametrize("label", ["", "   "])
    def test__doc_with_blank_label__raises(self, label: str) -> None:
        """Reject explicit labels that would render as nothing."""
        with pytest.raises(ValueError, match=r"x\.label must be a non-empty string"):
            parse_sidebar_item({"type": "doc", "id": "setup", "label": label}, "x")

    def test__category_link_with_blank_label__raises(self) -> None:
        """Apply the doc label rule to category link tables."""
        with pytest.raises(ValueError, match=r"x\.link\.label must be a non-empty string"):
            parse_sidebar_item(
                {"type": "category", "label": "A", "items": [], "link": {"id": "a", "label": ""}},
                "x",
            )

    def test__category_with_empty_link__has_no_link(self) -> None:
        """Treat an empty link string as an absent link."""
        item = parse_sidebar_item({"type": "category", "label": "A", "items": [], "link": ""}, "x")

        assert isinstance(item, CategoryRef)
        assert item.link is None


class TestCategoryExtras:
    """Tests for category extras ownership."""

    def test__parsed_extras__are_read_only(self) -> None:
        """Refuse writes to extras of a parsed category."""
        item = parse_sidebar_item(
            {"type": "category", "label": "A", "items": [], "collapsed": True},
            "x",
        )

        assert isinstance(item, CategoryRef)
        with pytest.raises(TypeError):
            item.extras["collapsed"] = False  # type: ignore[index]

    def test__source_mapping__is_copied(self) -> None:
        """Keep extras unaffected by later changes to the caller's mapping."""
        source = {"collapsed": True}
        category = CategoryRef(label="A", items=(), extras=source)
        resolved = ResolvedCategory(label="A", items=(), extras=source)

        source["collapsed"] = False

        assert category.extras == {"collapsed": True}
        assert resolved.to_dict()["collapsed"] is True
