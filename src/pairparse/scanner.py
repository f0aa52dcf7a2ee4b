"""Delimiter scanning for pairparse.

Walks the text once, left to right. At each position the longest marker
prefix known to the catalog is taken, and the resulting occurrence is
classified from the characters immediately around it.

Thread Safety:
DelimiterScanner holds only the immutable catalog. scan() uses local state
only, so one scanner can serve concurrent callers.

"""

from __future__ import annotations

from pairparse.catalog import TagCatalog
from pairparse.charsets import is_letter, is_number, is_whitespace, is_word_char
from pairparse.tags import TagDefinition
from pairparse.tokens import DelimiterOccurrence


class DelimiterScanner:
    """Find marker occurrences in text.

    Usage:
        >>> scanner = DelimiterScanner(create_default_catalog())
        >>> [occ.kind for occ in scanner.scan("_a_")]
        [<TagKind.ITALIC: 'italic'>, <TagKind.ITALIC: 'italic'>]

    """

    __slots__ = ("_catalog",)

    def __init__(self, catalog: TagCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> TagCatalog:
        return self._catalog

    def scan(self, text: str) -> list[DelimiterOccurrence]:
        """Scan text for delimiter occurrences.

        Args:
            text: Source text.

        Returns:
            Occurrences in position order; each starts after the previous ends.
        """
        occurrences: list[DelimiterOccurrence] = []
        seen_whitespace = False
        pos = 0
        text_len = len(text)
        while pos < text_len:
            found = self._match_at(text, pos)
            if is_whitespace(text[pos]):
                seen_whitespace = True
            if found is None:
                pos += 1
                continue

            tag, end = found
            occurrences.append(self._classify(text, tag, pos, end, seen_whitespace))
            seen_whitespace = False
            pos = end + 1

        return occurrences

    def _match_at(self, text: str, start: int) -> tuple[TagDefinition, int] | None:
        """Greedy longest-prefix match at ``start``.

        Extends the candidate one character at a time while some definition
        still starts with it; the last definition found wins.

        Returns:
            (definition, inclusive end index), or None when nothing matches.
        """
        result: TagDefinition | None = None
        end = start
        text_len = len(text)
        while end < text_len:
            tag = self._catalog.find(text[start : end + 1])
            if tag is None:
                break
            result = tag
            end += 1

        if result is None:
            return None
        return result, end - 1

    def _classify(
        self,
        text: str,
        tag: TagDefinition,
        start: int,
        end: int,
        seen_whitespace: bool,
    ) -> DelimiterOccurrence:
        """Build an occurrence with flanking flags from its neighbours.

        A missing neighbour (text boundary) is whitespace-like and neither a
        letter nor a digit.
        """
        before = text[start - 1] if start > 0 else ""
        after = text[end + 1] if end + 1 < len(text) else ""

        # Empty neighbours are neither letters nor numbers
        left_number = is_number(before)
        right_number = is_number(after)
        left_letter = is_word_char(before)
        right_letter = is_letter(after)

        return DelimiterOccurrence(
            tag=tag,
            start=start,
            end=end,
            preceded_by_whitespace=seen_whitespace,
            in_number=left_number and right_number,
            in_word=left_letter and right_letter,
            can_open=(is_whitespace(before) or not (left_letter or left_number)) and right_letter,
            can_close=(is_whitespace(after) or not (right_letter or right_number)) and left_letter,
        )


__all__ = [
    "DelimiterScanner",
]
