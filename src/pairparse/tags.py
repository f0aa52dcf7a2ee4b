"""Tag kinds and tag definitions for pairparse.

A tag definition describes one markup kind by its textual markers. Kinds are
a tagged-variant table rather than a class hierarchy: no kind needs behaviour
beyond its opening and closing markers.

Thread Safety:
TagKind is an enum (inherently immutable).
TagDefinition is frozen and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pairparse.errors import CatalogError


class TagKind(StrEnum):
    """Built-in markup kinds.

    Catalogs may define further kinds with plain strings (e.g. ``"strike"``);
    kinds compare by string value, so ``TagKind.BOLD == "bold"``.

    """

    BOLD = "bold"
    ITALIC = "italic"
    ESCAPE = "escape"
    LINE_FEED = "line_feed"


@dataclass(frozen=True, slots=True)
class TagDefinition:
    """Textual markers of one markup kind.

    A definition without a closing marker is self-closing: it never waits for
    a partner and is dropped rather than auto-closed at a line boundary.

    Attributes:
        kind: Markup kind (a TagKind member or an extension name).
        opening: Marker that opens the span, if any.
        closing: Marker that closes the span, if any.

    """

    kind: TagKind | str
    opening: str | None = None
    closing: str | None = None

    def __post_init__(self) -> None:
        if self.opening is None and self.closing is None:
            raise CatalogError(
                f"Tag '{self.kind}' defines neither an opening nor a closing marker",
                kind=self.kind,
            )
        if self.opening == "" or self.closing == "":
            raise CatalogError(f"Tag '{self.kind}' has an empty marker", kind=self.kind)

    @property
    def is_self_closing(self) -> bool:
        """True when the kind has no closing marker."""
        return self.closing is None

    def matches_opening(self, prefix: str) -> bool:
        """Check whether the opening marker starts with ``prefix``."""
        return self.opening is not None and self.opening.startswith(prefix)

    def matches_closing(self, prefix: str) -> bool:
        """Check whether the closing marker starts with ``prefix``."""
        return self.closing is not None and self.closing.startswith(prefix)


__all__ = [
    "TagDefinition",
    "TagKind",
]
