"""Delimiter occurrences and matched pairs.

Uses NamedTuples for both records:
- Immutable, so scanner output can be shared between stages and threads
- Tuple unpacking support
- Pattern matching on attributes in the pair matcher

Usage:
    from pairparse.tokens import DelimiterOccurrence, MatchedPair

    match occurrence:
        case DelimiterOccurrence(kind=TagKind.LINE_FEED):
            ...

"""

from __future__ import annotations

from typing import NamedTuple

from pairparse.tags import TagDefinition, TagKind


class DelimiterOccurrence(NamedTuple):
    """One located marker in the source text.

    Attributes:
        tag: The catalog definition whose marker matched.
        start: Index of the first marker character.
        end: Index of the last marker character (inclusive).
        preceded_by_whitespace: Whitespace was seen since the previous occurrence.
        in_number: A digit sits immediately before and after the marker.
        in_word: A letter (or non-backslash punctuation) before and a letter after.
        can_open: Whitespace or non-alphanumeric before and a letter after.
        can_close: Whitespace or non-alphanumeric after and a letter before.
        synthetic: Zero-width closer manufactured at a line boundary.

    """

    tag: TagDefinition
    start: int
    end: int
    preceded_by_whitespace: bool = False
    in_number: bool = False
    in_word: bool = False
    can_open: bool = False
    can_close: bool = False
    synthetic: bool = False

    @property
    def kind(self) -> TagKind | str:
        """Markup kind of the matched definition."""
        return self.tag.kind

    @property
    def length(self) -> int:
        """Number of source characters covered by the marker."""
        if self.synthetic:
            return 0
        return self.end - self.start + 1

    @classmethod
    def closer_at(cls, tag: TagDefinition, index: int) -> DelimiterOccurrence:
        """Create a synthetic zero-width closer positioned at ``index``."""
        return cls(tag=tag, start=index, end=index, synthetic=True)


class MatchedPair(NamedTuple):
    """An opening occurrence paired with its closing occurrence.

    Pairs reference positions in the parsed text, never copies of it.

    Attributes:
        opening: The occurrence that opened the span.
        closing: The occurrence that closed it (possibly synthetic).

    """

    opening: DelimiterOccurrence
    closing: DelimiterOccurrence

    @property
    def kind(self) -> TagKind | str:
        """Markup kind of the span."""
        return self.opening.kind

    @property
    def start(self) -> int:
        """Index of the first opening marker character."""
        return self.opening.start

    @property
    def end(self) -> int:
        """Index one past the closing marker (``closing.start`` when synthetic)."""
        return self.closing.start + self.closing.length

    @property
    def content_start(self) -> int:
        """Index of the first character inside the span."""
        return self.opening.end + 1

    @property
    def content_end(self) -> int:
        """Index one past the last character inside the span."""
        return self.closing.start

    @property
    def is_synthetic(self) -> bool:
        """True when the span was auto-closed at a line boundary."""
        return self.closing.synthetic

    def content(self, text: str) -> str:
        """Return the text enclosed between the two markers."""
        return text[self.content_start : self.content_end]


__all__ = [
    "DelimiterOccurrence",
    "MatchedPair",
]
