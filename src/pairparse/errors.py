"""Exception classes for pairparse.

Parsing itself never raises on malformed text; these exceptions cover
catalog and configuration mistakes made by the caller.
"""

from __future__ import annotations


class PairParseError(Exception):
    """Base exception for all pairparse errors.

    Subclass this for specific error categories.
    """

    pass


class CatalogError(PairParseError):
    """Error in a tag definition or tag catalog.

    Raised when a definition has no usable marker, when a definition is
    registered twice, or when a strict parser is given a catalog that lacks
    the escape or line-feed kinds.
    """

    def __init__(self, message: str, kind: str | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Description of the problem
            kind: Tag kind involved (optional)
        """
        self.kind = kind
        super().__init__(message)
