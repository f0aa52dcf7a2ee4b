"""Unit tests for DelimiterOccurrence and MatchedPair."""

from __future__ import annotations

import pytest

from pairparse import parse_tag_pairs
from pairparse.tags import TagDefinition, TagKind
from pairparse.tokens import DelimiterOccurrence, MatchedPair

BOLD = TagDefinition(TagKind.BOLD, "__", "__")


class TestDelimiterOccurrence:
    """Tests for DelimiterOccurrence."""

    def test_defaults(self):
        occ = DelimiterOccurrence(tag=BOLD, start=0, end=1)
        assert occ.kind == TagKind.BOLD
        assert occ.preceded_by_whitespace is False
        assert occ.in_number is False
        assert occ.in_word is False
        assert occ.can_open is False
        assert occ.can_close is False
        assert occ.synthetic is False

    def test_length(self):
        assert DelimiterOccurrence(tag=BOLD, start=4, end=5).length == 2

    def test_immutability(self):
        occ = DelimiterOccurrence(tag=BOLD, start=0, end=1)
        with pytest.raises(AttributeError):
            occ.start = 3  # type: ignore[misc]

    def test_synthetic_closer(self):
        closer = DelimiterOccurrence.closer_at(BOLD, 7)
        assert closer.start == closer.end == 7
        assert closer.synthetic is True
        assert closer.length == 0
        assert closer.tag is BOLD


class TestMatchedPair:
    """Tests for MatchedPair accessors."""

    def test_span_accessors(self):
        text = "x __bold__ y"
        (pair,) = parse_tag_pairs(text)
        assert pair.kind == TagKind.BOLD
        assert pair.start == 2
        assert pair.end == 10
        assert pair.content_start == 4
        assert pair.content_end == 8
        assert pair.content(text) == "bold"
        assert text[pair.start : pair.end] == "__bold__"
        assert pair.is_synthetic is False

    def test_synthetic_span(self):
        text = "__bold\nnext"
        (pair,) = parse_tag_pairs(text)
        assert pair.is_synthetic is True
        assert pair.end == 6
        assert pair.content(text) == "bold"

    def test_tuple_unpacking(self):
        opening = DelimiterOccurrence(tag=BOLD, start=0, end=1, can_open=True)
        closing = DelimiterOccurrence(tag=BOLD, start=5, end=6, can_close=True)
        first, second = MatchedPair(opening, closing)
        assert first is opening
        assert second is closing
