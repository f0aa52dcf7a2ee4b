"""Pair parser: scanner, escape filter and matcher in one entry point.

Architecture:
Data flows strictly through three stages:
- `DelimiterScanner`: text -> occurrences with flanking flags
- `remove_escaped_tags`: occurrences -> occurrences without escapes
- `PairMatcher`: occurrences -> matched pairs

Thread Safety:
- A PairParser holds only its immutable catalog
- All per-parse state is local to parse()
- Safe to share one parser across threads

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pairparse.catalog import TagCatalog, create_default_catalog
from pairparse.config import get_parse_config
from pairparse.errors import CatalogError
from pairparse.escapes import remove_escaped_tags
from pairparse.matcher import PairMatcher
from pairparse.profiling import get_parse_accumulator
from pairparse.scanner import DelimiterScanner
from pairparse.tags import TagDefinition, TagKind
from pairparse.tokens import DelimiterOccurrence, MatchedPair
from pairparse.utils.logger import get_logger

logger = get_logger(__name__)

# Kinds the pipeline relies on; without them escaping or line closing is skipped
REQUIRED_KINDS: tuple[TagKind, ...] = (TagKind.ESCAPE, TagKind.LINE_FEED)


class PairParser:
    """Find matched markup pairs in markdown text.

    Usage:
        >>> parser = PairParser()
        >>> [(p.start, p.end) for p in parser.parse("__bold__")]
        [(0, 8)]

    Configuration:
        When no catalog is given, the catalog from the active ParseConfig is
        used, falling back to the default catalog.

    """

    __slots__ = ("_catalog", "_scanner", "_matcher")

    def __init__(self, catalog: TagCatalog | Iterable[TagDefinition] | None = None) -> None:
        """Initialize parser.

        Args:
            catalog: Tag catalog, or definitions in priority order

        Raises:
            CatalogError: If strict_catalog is configured and the catalog
                lacks the escape or line-feed kinds
        """
        config = get_parse_config()
        if catalog is None:
            catalog = config.catalog if config.catalog is not None else create_default_catalog()
        elif not isinstance(catalog, TagCatalog):
            catalog = TagCatalog.of(catalog)

        missing = [kind.value for kind in REQUIRED_KINDS if kind not in catalog]
        if missing:
            if config.strict_catalog:
                raise CatalogError(f"Catalog is missing required kinds: {', '.join(missing)}")
            logger.warning(
                "Catalog is missing %s; parsing continues without them",
                ", ".join(missing),
            )

        self._catalog = catalog
        self._scanner = DelimiterScanner(catalog)
        self._matcher = PairMatcher()

    @property
    def catalog(self) -> TagCatalog:
        """The catalog this parser scans with."""
        return self._catalog

    def parse(self, text: str) -> list[MatchedPair]:
        """Parse text into matched pairs.

        Args:
            text: Markdown source text

        Returns:
            Matched pairs in closing order

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            msg = f"Expected str, got {type(text).__name__}"
            raise TypeError(msg)

        occurrences = self.scan(text)
        filtered = self.remove_escaped(occurrences)
        pairs = self.create_pairs(filtered)

        acc = get_parse_accumulator()
        if acc is not None:
            acc.record_parse(
                source_length=len(text),
                occurrence_count=len(occurrences),
                escaped_count=len(occurrences) - len(filtered),
                pair_count=len(pairs),
            )

        logger.debug(
            "Parsed %d chars: %d occurrences, %d after escapes, %d pairs",
            len(text),
            len(occurrences),
            len(filtered),
            len(pairs),
        )
        return pairs

    def scan(self, text: str) -> list[DelimiterOccurrence]:
        """Run only the scanning stage."""
        return self._scanner.scan(text)

    def remove_escaped(self, occurrences: Sequence[DelimiterOccurrence]) -> list[DelimiterOccurrence]:
        """Run only the escape filtering stage."""
        return remove_escaped_tags(occurrences)

    def create_pairs(self, occurrences: Iterable[DelimiterOccurrence]) -> list[MatchedPair]:
        """Run only the pairing stage."""
        return self._matcher.match(occurrences)

    def __repr__(self) -> str:
        return f"PairParser(kinds={sorted(self._catalog.kinds)!r})"


def parse_tag_pairs(
    text: str,
    *,
    catalog: TagCatalog | Iterable[TagDefinition] | None = None,
) -> list[MatchedPair]:
    """Parse text into matched pairs with a one-off parser.

    Args:
        text: Markdown source text
        catalog: Tag catalog (uses the configured or default catalog if None)

    Returns:
        Matched pairs in closing order

    Example:
        >>> pairs = parse_tag_pairs("_a_ and __b__")
        >>> [str(p.kind) for p in pairs]
        ['italic', 'bold']
    """
    return PairParser(catalog).parse(text)


__all__ = [
    "PairParser",
    "REQUIRED_KINDS",
    "parse_tag_pairs",
]
