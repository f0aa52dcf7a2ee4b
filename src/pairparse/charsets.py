"""Character classification for delimiter flanking.

Only the basic letter/number/whitespace/punctuation predicates are used; an
empty string stands for a missing neighbour at the start or end of the text.

Usage:
    from pairparse.charsets import is_letter, is_whitespace

    if is_whitespace(before) and is_letter(after):
        ...
"""

import unicodedata

BACKSLASH = "\\"


def is_letter(char: str) -> bool:
    """Check if character is a Unicode letter."""
    return char.isalpha()


def is_number(char: str) -> bool:
    """Check if character is numeric (digits, fractions, numerals)."""
    return char.isnumeric()


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace.

    Treats the empty string as whitespace (for boundary checks).

    """
    if not char:
        return True
    return char.isspace()


def is_punctuation(char: str) -> bool:
    """Check if character is Unicode punctuation (Pc, Pd, Pe, Pf, Pi, Po, Ps).

    Symbols (S*) are not punctuation here.

    """
    if not char:
        return False
    return unicodedata.category(char).startswith("P")


def is_word_char(char: str) -> bool:
    """Letter, or punctuation other than backslash.

    This is the left-hand side of an in-word delimiter: ``a*b`` and ``.*b``
    both count, ``\\*b`` does not.

    """
    return is_letter(char) or (is_punctuation(char) and char != BACKSLASH)
