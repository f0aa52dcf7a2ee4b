"""Escape filtering for pairparse.

An escape marker hides the occurrence that starts right after it, so
``\\_`` is plain text rather than an italic marker. The escape occurrence
itself never reaches the pair matcher.

"""

from __future__ import annotations

from collections.abc import Sequence

from pairparse.tags import TagKind
from pairparse.tokens import DelimiterOccurrence


def remove_escaped_tags(occurrences: Sequence[DelimiterOccurrence]) -> list[DelimiterOccurrence]:
    """Drop escape occurrences and the occurrences they escape.

    An occurrence is escaped when it starts exactly one character after an
    escape occurrence. A non-adjacent follower is kept and examined normally,
    so an escape that follows a lone escape still takes effect and no escape
    survives a single pass.

    Args:
        occurrences: Scanner output in position order.

    Returns:
        New list without escape occurrences or escaped markers.
    """
    filtered: list[DelimiterOccurrence] = []
    idx = 0
    count = len(occurrences)
    while idx < count:
        current = occurrences[idx]
        idx += 1
        if current.kind != TagKind.ESCAPE:
            filtered.append(current)
            continue

        if idx < count and occurrences[idx].start == current.start + 1:
            # Escaped marker: skip it as well
            idx += 1

    return filtered


__all__ = [
    "remove_escaped_tags",
]
