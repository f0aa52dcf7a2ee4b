"""Tag catalog for marker lookup during scanning.

The catalog is an ordered set of tag definitions. Order matters: when several
definitions match the scanned text, the first one registered wins.

Thread Safety:
TagCatalog is immutable after creation. Safe to share.
Use TagCatalogBuilder for mutable construction.

Example:
    >>> builder = TagCatalogBuilder()
    >>> builder.register(TagDefinition(TagKind.ITALIC, "_", "_"))
    >>> builder.register(TagDefinition(TagKind.BOLD, "__", "__"))
    >>> catalog = builder.build()
    >>> catalog.find("__").kind
    <TagKind.BOLD: 'bold'>
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import cache

from pairparse.errors import CatalogError
from pairparse.tags import TagDefinition, TagKind


class TagCatalog:
    """Immutable, ordered collection of tag definitions.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_definitions", "_by_kind")

    def __init__(
        self,
        definitions: tuple[TagDefinition, ...],
        by_kind: dict[str, TagDefinition],
    ) -> None:
        """Initialize catalog with pre-built mappings.

        Use TagCatalogBuilder (or TagCatalog.of) to create instances.
        """
        self._definitions = definitions
        self._by_kind = by_kind

    @classmethod
    def of(cls, definitions: Iterable[TagDefinition]) -> TagCatalog:
        """Build a catalog from definitions in iteration order."""
        return TagCatalogBuilder().register_all(definitions).build()

    def get(self, kind: TagKind | str) -> TagDefinition | None:
        """Get the first definition registered for a kind.

        Args:
            kind: Tag kind (e.g., TagKind.BOLD or "strike")

        Returns:
            Definition if registered, None otherwise
        """
        return self._by_kind.get(kind)

    def has_kind(self, kind: TagKind | str) -> bool:
        """Check if any definition of this kind is registered."""
        return kind in self._by_kind

    def first_by_opening(self, prefix: str) -> TagDefinition | None:
        """First definition whose opening marker starts with ``prefix``."""
        for definition in self._definitions:
            if definition.matches_opening(prefix):
                return definition
        return None

    def first_by_closing(self, prefix: str) -> TagDefinition | None:
        """First definition whose closing marker starts with ``prefix``."""
        for definition in self._definitions:
            if definition.matches_closing(prefix):
                return definition
        return None

    def find(self, prefix: str) -> TagDefinition | None:
        """First definition matching ``prefix``, opening markers preferred.

        Args:
            prefix: Text scanned so far at the current position

        Returns:
            Definition whose opening marker (or, failing that, closing marker)
            starts with ``prefix``; None if nothing matches
        """
        return self.first_by_opening(prefix) or self.first_by_closing(prefix)

    @property
    def kinds(self) -> frozenset[str]:
        """Get all registered kinds."""
        return frozenset(self._by_kind.keys())

    @property
    def definitions(self) -> tuple[TagDefinition, ...]:
        """Get all definitions in registration order."""
        return self._definitions

    def __contains__(self, kind: object) -> bool:
        """Support 'kind in catalog' syntax."""
        return kind in self._by_kind

    def __iter__(self) -> Iterator[TagDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        """Number of registered definitions."""
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"TagCatalog({list(self._definitions)!r})"


class TagCatalogBuilder:
    """Mutable builder for TagCatalog.

    Register definitions in priority order, then call build() to create an
    immutable catalog.

    Example:
        >>> builder = TagCatalogBuilder()
        >>> builder.register(TagDefinition(TagKind.ESCAPE, "\\\\"))
        >>> catalog = builder.build()
    """

    __slots__ = ("_definitions", "_by_kind")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._definitions: list[TagDefinition] = []
        self._by_kind: dict[str, TagDefinition] = {}

    def register(self, definition: TagDefinition) -> TagCatalogBuilder:
        """Register a tag definition.

        Args:
            definition: Definition to append to the catalog

        Returns:
            Self for chaining

        Raises:
            CatalogError: If the same definition is already registered
        """
        if not isinstance(definition, TagDefinition):
            msg = f"Expected TagDefinition, got {type(definition).__name__}"
            raise TypeError(msg)

        if definition in self._definitions:
            raise CatalogError(
                f"Tag '{definition.kind}' with markers "
                f"{definition.opening!r}/{definition.closing!r} already registered",
                kind=definition.kind,
            )

        # Several definitions may share a kind; lookups by kind return the first
        self._by_kind.setdefault(definition.kind, definition)
        self._definitions.append(definition)
        return self

    def register_all(self, definitions: Iterable[TagDefinition]) -> TagCatalogBuilder:
        """Register multiple definitions.

        Args:
            definitions: Definitions in priority order

        Returns:
            Self for chaining
        """
        for definition in definitions:
            self.register(definition)
        return self

    def build(self) -> TagCatalog:
        """Build immutable catalog from registered definitions.

        Returns:
            Immutable TagCatalog
        """
        return TagCatalog(
            definitions=tuple(self._definitions),
            by_kind=dict(self._by_kind),
        )

    def __len__(self) -> int:
        """Number of registered definitions."""
        return len(self._definitions)


# Italic is registered before Bold: under greedy prefix scanning a lone "_"
# must resolve to Italic, while "__" still extends to Bold.
DEFAULT_DEFINITIONS: tuple[TagDefinition, ...] = (
    TagDefinition(TagKind.ITALIC, "_", "_"),
    TagDefinition(TagKind.BOLD, "__", "__"),
    TagDefinition(TagKind.ESCAPE, "\\"),
    TagDefinition(TagKind.LINE_FEED, "\n"),
)


@cache
def create_default_catalog() -> TagCatalog:
    """Get the default catalog (cached).

    Contains Italic ``_``, Bold ``__``, Escape ``\\`` and LineFeed ``\\n``.

    Returns:
        Immutable TagCatalog shared by every caller
    """
    return TagCatalog.of(DEFAULT_DEFINITIONS)


__all__ = [
    "DEFAULT_DEFINITIONS",
    "TagCatalog",
    "TagCatalogBuilder",
    "create_default_catalog",
]
