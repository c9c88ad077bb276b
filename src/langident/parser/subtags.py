"""Validators for the language, script, region and variant subtags.

Each function takes the raw text of one grammar slot and returns the
case-normalized compact string, or raises ParserError. Only the shape of
a subtag is checked, never whether the code is registered.
"""

from langident.core.compact_str import CompactStr4, CompactStr8
from langident.core.errors import CompactStrError, ErrorKind, ParserError

# The language code that stands for "no language given"
UND = "und"


def parse_language_subtag(subtag: str) -> CompactStr8 | None:
    """Parse a 2-3 or 5-8 letter language subtag, lowercased.

    Returns None for "und" so that it is indistinguishable from an
    absent language.
    """
    try:
        s = CompactStr8.parse(subtag)
    except CompactStrError as e:
        raise ParserError(ErrorKind.INVALID_LANGUAGE, "language", subtag) from e

    slen = len(s)
    # 4 letters is the shape of a script subtag
    if slen < 2 or slen == 4 or not s.is_ascii_alphabetic():
        raise ParserError(ErrorKind.INVALID_LANGUAGE, "language", subtag)

    value = s.to_ascii_lowercase()
    if value.as_str() == UND:
        return None
    return value


def parse_script_subtag(subtag: str) -> CompactStr4:
    """Parse a 4 letter script subtag, titlecased."""
    try:
        s = CompactStr4.parse(subtag)
    except CompactStrError as e:
        raise ParserError(ErrorKind.INVALID_SUBTAG, "script", subtag) from e

    if len(s) != 4 or not s.is_ascii_alphabetic():
        raise ParserError(ErrorKind.INVALID_SUBTAG, "script", subtag)
    return s.to_ascii_titlecase()


def parse_region_subtag(subtag: str) -> CompactStr4:
    """Parse a 2 letter (uppercased) or 3 digit region subtag."""
    try:
        s = CompactStr4.parse(subtag)
    except CompactStrError as e:
        raise ParserError(ErrorKind.INVALID_SUBTAG, "region", subtag) from e

    slen = len(s)
    if slen == 2 and s.is_ascii_alphabetic():
        return s.to_ascii_uppercase()
    if slen == 3 and s.is_ascii_numeric():
        return s
    raise ParserError(ErrorKind.INVALID_SUBTAG, "region", subtag)


def parse_variant_subtag(subtag: str) -> CompactStr8:
    """Parse a variant subtag, lowercased.

    5-8 characters must all be alphanumeric. A 4 character variant is
    rejected only when it starts with a non-digit and its last three
    characters are not all alphanumeric.
    """
    try:
        s = CompactStr8.parse(subtag)
    except CompactStrError as e:
        raise ParserError(ErrorKind.INVALID_SUBTAG, "variant", subtag) from e

    slen = len(s)
    if slen < 4:
        raise ParserError(ErrorKind.INVALID_SUBTAG, "variant", subtag)

    if slen >= 5 and not s.is_ascii_alphanumeric():
        raise ParserError(ErrorKind.INVALID_SUBTAG, "variant", subtag)

    if slen == 4:
        # byte 0 is the low-order byte; the other three sit above it
        word = int(s)
        first = CompactStr4.new_unchecked(word & 0xFF)
        rest = CompactStr4.new_unchecked(word >> 8)
        if not first.is_ascii_numeric() and not rest.is_ascii_alphanumeric():
            raise ParserError(ErrorKind.INVALID_SUBTAG, "variant", subtag)

    return s.to_ascii_lowercase()
