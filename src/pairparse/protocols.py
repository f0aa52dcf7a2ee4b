"""Protocols for pairparse.

Defines the contract renderers depend on, so any conforming parser can be
substituted for PairParser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pairparse.tokens import MatchedPair


@runtime_checkable
class PairParserProtocol(Protocol):
    """Protocol for objects that turn markdown text into matched pairs.

    Thread Safety:
        Implementations should keep per-call state local so one instance can
        serve concurrent parses.

    """

    def parse(self, text: str) -> list[MatchedPair]:
        """Parse text into matched opening/closing pairs.

        Args:
            text: Raw markdown text

        Returns:
            Matched pairs referencing positions in ``text``
        """
        ...
