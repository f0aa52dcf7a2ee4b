"""Tests for TagCatalog and TagCatalogBuilder."""

from __future__ import annotations

import pytest

from pairparse.catalog import (
    DEFAULT_DEFINITIONS,
    TagCatalog,
    TagCatalogBuilder,
    create_default_catalog,
)
from pairparse.errors import CatalogError
from pairparse.tags import TagDefinition, TagKind

ITALIC = TagDefinition(TagKind.ITALIC, "_", "_")
BOLD = TagDefinition(TagKind.BOLD, "__", "__")
ESCAPE = TagDefinition(TagKind.ESCAPE, "\\")
LINE_FEED = TagDefinition(TagKind.LINE_FEED, "\n")


class TestTagCatalogBuilder:
    """Tests for the mutable builder."""

    def test_empty_builder(self):
        builder = TagCatalogBuilder()
        assert len(builder) == 0
        assert len(builder.build()) == 0

    def test_register_returns_self(self):
        """register() supports chaining."""
        builder = TagCatalogBuilder()
        assert builder.register(ITALIC) is builder

    def test_register_all(self):
        catalog = TagCatalogBuilder().register_all([ITALIC, BOLD]).build()
        assert catalog.definitions == (ITALIC, BOLD)

    def test_duplicate_definition_rejected(self):
        """Registering the same definition twice raises."""
        builder = TagCatalogBuilder().register(ITALIC)
        with pytest.raises(CatalogError, match="already registered"):
            builder.register(TagDefinition(TagKind.ITALIC, "_", "_"))

    def test_same_kind_different_markers_allowed(self):
        """A kind may be bound to several markers."""
        star = TagDefinition(TagKind.ITALIC, "*", "*")
        catalog = TagCatalogBuilder().register(ITALIC).register(star).build()
        assert len(catalog) == 2
        assert catalog.get(TagKind.ITALIC) is ITALIC

    def test_non_definition_rejected(self):
        with pytest.raises(TypeError):
            TagCatalogBuilder().register("_")  # type: ignore[arg-type]

    def test_build_is_snapshot(self):
        """Later registrations do not leak into an already built catalog."""
        builder = TagCatalogBuilder().register(ITALIC)
        catalog = builder.build()
        builder.register(BOLD)
        assert len(catalog) == 1


class TestTagCatalog:
    """Tests for catalog lookup."""

    @pytest.fixture
    def catalog(self) -> TagCatalog:
        return TagCatalog.of([ITALIC, BOLD, ESCAPE, LINE_FEED])

    def test_iteration_order(self, catalog: TagCatalog):
        assert list(catalog) == [ITALIC, BOLD, ESCAPE, LINE_FEED]

    def test_contains_kind(self, catalog: TagCatalog):
        assert TagKind.BOLD in catalog
        assert "line_feed" in catalog
        assert "strike" not in catalog
        assert catalog.has_kind(TagKind.ESCAPE)

    def test_kinds(self, catalog: TagCatalog):
        assert catalog.kinds == frozenset({"italic", "bold", "escape", "line_feed"})

    def test_get_missing(self, catalog: TagCatalog):
        assert catalog.get("strike") is None

    def test_find_first_registered_wins(self, catalog: TagCatalog):
        """Both Italic and Bold start with "_"; Italic is registered first."""
        assert catalog.find("_") is ITALIC
        assert catalog.find("__") is BOLD
        assert catalog.find("___") is None

    def test_find_prefers_opening_marker(self):
        """Opening markers win over closing markers for the same text."""
        closer = TagDefinition("close-only", closing="!")
        opener = TagDefinition("open-only", opening="!")
        catalog = TagCatalog.of([closer, opener])
        assert catalog.find("!") is opener

    def test_find_falls_back_to_closing(self):
        quote = TagDefinition("quote", "<<", ">>")
        catalog = TagCatalog.of([quote])
        assert catalog.find(">") is quote
        assert catalog.first_by_opening(">") is None
        assert catalog.first_by_closing(">>") is quote

    def test_repr(self, catalog: TagCatalog):
        assert repr(catalog).startswith("TagCatalog(")


class TestDefaultCatalog:
    """Tests for the shipped default catalog."""

    def test_contents(self):
        catalog = create_default_catalog()
        assert catalog.definitions == DEFAULT_DEFINITIONS
        assert [d.kind for d in catalog] == [
            TagKind.ITALIC,
            TagKind.BOLD,
            TagKind.ESCAPE,
            TagKind.LINE_FEED,
        ]

    def test_cached(self):
        assert create_default_catalog() is create_default_catalog()

    def test_italic_before_bold(self):
        """A single underscore resolves to Italic, a double one extends to Bold."""
        catalog = create_default_catalog()
        assert catalog.find("_").kind == TagKind.ITALIC
        assert catalog.find("__").kind == TagKind.BOLD
