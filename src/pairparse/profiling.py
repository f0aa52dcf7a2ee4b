"""pairparse ParseAccumulator: opt-in profiling for pair parsing.

This module provides accumulated metrics during parsing:
- Total parse time
- Source length
- Occurrences scanned, removed by escaping, and pairs emitted

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from pairparse import parse_tag_pairs
    from pairparse.profiling import profiled_parse

    with profiled_parse() as metrics:
        parse_tag_pairs("__Hello__ _World_")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 17, "occurrence_count": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics during pair parsing.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of parsed text.
        occurrence_count: Occurrences found by the scanner.
        escaped_count: Occurrences removed by the escape filter.
        pair_count: Pairs emitted by the matcher.
        parse_calls: Number of parse calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    occurrence_count: int = 0
    escaped_count: int = 0
    pair_count: int = 0
    parse_calls: int = 0

    def record_parse(
        self,
        source_length: int,
        occurrence_count: int,
        escaped_count: int,
        pair_count: int,
    ) -> None:
        """Record a parse call.

        Args:
            source_length: Length of the text parsed.
            occurrence_count: Occurrences found by the scanner.
            escaped_count: Occurrences dropped by the escape filter.
            pair_count: Pairs in the result.

        """
        self.parse_calls += 1
        self.source_length += source_length
        self.occurrence_count += occurrence_count
        self.escaped_count += escaped_count
        self.pair_count += pair_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of parse metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "occurrence_count": self.occurrence_count,
            "escaped_count": self.escaped_count,
            "pair_count": self.pair_count,
            "parse_calls": self.parse_calls,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "pairparse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Creates a ParseAccumulator and makes it available via
    get_parse_accumulator() for the duration of the with block.

    Yields:
        ParseAccumulator that will be populated during parse calls.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
]
