"""
pairparse — Inline markup pair detection for markdown

Finds emphasis markers, escapes and line breaks in raw markdown text and pairs
openers with closers. The result is a list of matched spans; rendering them
into output markup is left to the caller.

Quick Start:
    >>> from pairparse import parse_tag_pairs
    >>> text = "Some _italic_ and __bold__ text"
    >>> [(str(p.kind), p.content(text)) for p in parse_tag_pairs(text)]
    [('italic', 'italic'), ('bold', 'bold')]

Custom Catalogs:
    >>> from pairparse import PairParser, TagCatalogBuilder, TagDefinition, TagKind
    >>>
    >>> builder = TagCatalogBuilder()
    >>> builder.register(TagDefinition(TagKind.ITALIC, "*", "*"))
    >>> builder.register(TagDefinition("strike", "~~", "~~"))
    >>> builder.register(TagDefinition(TagKind.ESCAPE, "\\\\"))
    >>> builder.register(TagDefinition(TagKind.LINE_FEED, "\\n"))
    >>> parser = PairParser(builder.build())
    >>> pairs = parser.parse("*a* ~~b~~")

Pipeline:
    scan -> remove escaped -> create pairs, each available on PairParser.
"""

from pairparse.catalog import (
    DEFAULT_DEFINITIONS,
    TagCatalog,
    TagCatalogBuilder,
    create_default_catalog,
)
from pairparse.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pairparse.errors import CatalogError, PairParseError
from pairparse.escapes import remove_escaped_tags
from pairparse.matcher import PairMatcher
from pairparse.parser import PairParser, parse_tag_pairs
from pairparse.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from pairparse.protocols import PairParserProtocol
from pairparse.scanner import DelimiterScanner
from pairparse.tags import TagDefinition, TagKind
from pairparse.tokens import DelimiterOccurrence, MatchedPair

__version__ = "0.1.0"

__all__ = [
    # Main API
    "PairParser",
    "parse_tag_pairs",
    "__version__",
    # Stages
    "DelimiterScanner",
    "PairMatcher",
    "remove_escaped_tags",
    # Data model
    "DelimiterOccurrence",
    "MatchedPair",
    "TagDefinition",
    "TagKind",
    # Catalog
    "DEFAULT_DEFINITIONS",
    "TagCatalog",
    "TagCatalogBuilder",
    "create_default_catalog",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Protocols
    "PairParserProtocol",
    # Errors
    "CatalogError",
    "PairParseError",
]
