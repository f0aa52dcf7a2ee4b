"""Stack-based pairing of delimiter occurrences.

The matcher consumes escape-filtered occurrences in order and pairs openers
with closers. Every ambiguity is resolved by policy rather than by raising:

1. Same kind as the pending opener: close it (or ignore / abandon).
2. Line feed: auto-close everything still open.
3. A closer of another kind: abandon the pending opener.
4. Otherwise: push the occurrence if it can open.

Openers left on the stack at the end of input produce no pair.

Thread Safety:
match() keeps its stack and output local to the call. A PairMatcher holds
no state and can serve concurrent callers.

"""

from __future__ import annotations

from collections.abc import Iterable

from pairparse.tags import TagKind
from pairparse.tokens import DelimiterOccurrence, MatchedPair
from pairparse.utils.logger import get_logger

logger = get_logger(__name__)


class PairMatcher:
    """Pair openers with closers using a LIFO stack.

    Usage:
        >>> matcher = PairMatcher()
        >>> pairs = matcher.match(remove_escaped_tags(scanner.scan(text)))

    """

    __slots__ = ()

    def match(self, occurrences: Iterable[DelimiterOccurrence]) -> list[MatchedPair]:
        """Pair occurrences.

        Args:
            occurrences: Escape-filtered occurrences in position order.

        Returns:
            Matched pairs in the order they were closed (innermost first).
        """
        stack: list[DelimiterOccurrence] = []
        pairs: list[MatchedPair] = []

        for cur in occurrences:
            top = stack[-1] if stack else None
            match cur:
                case _ if top is not None and top.kind == cur.kind:
                    self._close_same_kind(stack, cur, pairs)
                case DelimiterOccurrence(kind=TagKind.LINE_FEED):
                    self._close_all(stack, cur, pairs)
                case _ if top is not None and cur.can_close:
                    # A closer of another kind abandons the pending opener
                    stack.pop()
                case _ if cur.can_open or cur.in_word:
                    stack.append(cur)
                case _:
                    pass

        if stack:
            logger.debug("Discarding %d unmatched opener(s) at end of input", len(stack))
        return pairs

    def _close_same_kind(
        self,
        stack: list[DelimiterOccurrence],
        cur: DelimiterOccurrence,
        pairs: list[MatchedPair],
    ) -> None:
        """Resolve ``cur`` against an opener of the same kind on top of the stack."""
        if not cur.can_close and not cur.in_word:
            return

        opener = stack.pop()
        if opener.in_word and cur.preceded_by_whitespace:
            # An in-word opener cannot close across whitespace
            logger.debug("Abandoned in-word %s opener at %d", opener.kind, opener.start)
            return

        # Bold may not close directly on top of a pending Italic opener
        if stack and stack[-1].kind == TagKind.ITALIC and cur.kind == TagKind.BOLD:
            logger.debug("Suppressed bold pair %d..%d inside open italic", opener.start, cur.end)
            return

        pairs.append(MatchedPair(opener, cur))

    def _close_all(
        self,
        stack: list[DelimiterOccurrence],
        line_feed: DelimiterOccurrence,
        pairs: list[MatchedPair],
    ) -> None:
        """Close every pending opener at a line boundary, top to bottom.

        Self-closing kinds are dropped; the rest are paired with a zero-width
        closer placed at the line feed.
        """
        while stack:
            opener = stack.pop()
            if opener.tag.is_self_closing:
                continue
            pairs.append(MatchedPair(opener, DelimiterOccurrence.closer_at(opener.tag, line_feed.start)))


__all__ = [
    "PairMatcher",
]
