"""Language identifier parser.

Grammar (separator "-" or "_"):

    language ("-" script)? ("-" region)? ("-" variant)* ("-" extensions)?

Subtags are assigned by shape, left to right, without backtracking: after
the language, a token goes to the first slot it fits among script, region
and variant, and slots only move forward. Parsing stops at the first token
that fits no remaining slot. Whatever is left is either handed back to the
caller (when extensions are allowed) or reported as an error.
"""

import re
from collections import namedtuple

from langident.core.errors import ErrorKind, ParserError

from .subtags import (
    parse_language_subtag,
    parse_script_subtag,
    parse_region_subtag,
    parse_variant_subtag,
)

_SEPARATOR = re.compile(r"[-_]")

# Grammar slots, in order
_POS_SCRIPT = 1
_POS_REGION = 2
_POS_VARIANT = 3

ParsedIdentifier = namedtuple(
    "ParsedIdentifier", ["language", "script", "region", "variants"])


def split_subtags(text):
    """Split an identifier on "-" and "_" separators."""
    return _SEPARATOR.split(text)


def _try(parse, subtag):
    try:
        return parse(subtag)
    except ParserError:
        return None


def parse_language_identifier_from_iter(tokens, allow_extension=False):
    """Parse subtag tokens into a ParsedIdentifier.

    Args:
        tokens: List of subtag strings (already split).
        allow_extension: If True, tokens that follow the last variant are
            returned to the caller instead of raising.

    Returns:
        (ParsedIdentifier, remaining_tokens)

    Raises:
        ParserError: The first token is not a language subtag, or tokens
            remain and allow_extension is False.
    """
    if not tokens:
        raise ParserError(ErrorKind.INVALID_LANGUAGE, "language", "")

    language = parse_language_subtag(tokens[0])
    script = None
    region = None
    variants = []

    position = _POS_SCRIPT
    i = 1
    while i < len(tokens):
        subtag = tokens[i]
        script_value = _try(parse_script_subtag, subtag) if position == _POS_SCRIPT else None
        region_value = _try(parse_region_subtag, subtag) if position <= _POS_REGION else None

        if script_value is not None:
            script = script_value
            position = _POS_REGION
        elif region_value is not None:
            region = region_value
            position = _POS_VARIANT
        else:
            variant = _try(parse_variant_subtag, subtag)
            if variant is None:
                break
            variants.append(variant)
            position = _POS_VARIANT
        i += 1

    remaining = tokens[i:]
    if remaining and not allow_extension:
        raise ParserError(
            ErrorKind.INVALID_SUBTAG, "extension", remaining[0],
            f"Unexpected subtag {remaining[0]!r} (extra input after subtag {i})")

    parsed = ParsedIdentifier(
        language, script, region, tuple(sorted(set(variants))))
    return parsed, remaining


def parse_language_identifier(text):
    """Parse a complete identifier string. Extensions are not allowed."""
    parsed, _ = parse_language_identifier_from_iter(split_subtags(text))
    return parsed


def _is_alnum(subtag):
    return subtag.isascii() and subtag.isalnum()


def parse_extension_tail(tokens):
    """Validate the tokens left after the variants and join them with "-".

    The tail is a run of extensions, each a singleton (one alphanumeric
    character such as "u" or "t") followed by at least one subtag of 2-8
    ASCII alphanumerics. After the private use singleton "x" subtags may
    be 1-8 characters and run to the end. Tokens are kept exactly as
    given; their meaning is not interpreted.
    """
    if not tokens:
        return None
    i = 0
    while i < len(tokens):
        singleton = tokens[i]
        if len(singleton) != 1 or not _is_alnum(singleton):
            raise ParserError(
                ErrorKind.INVALID_SUBTAG, "extension", singleton,
                f"Unexpected subtag {singleton!r} (expected an extension singleton)")
        private_use = singleton.lower() == "x"
        min_len = 1 if private_use else 2
        i += 1
        start = i
        while i < len(tokens):
            subtag = tokens[i]
            if len(subtag) == 1 and not private_use:
                break
            if not min_len <= len(subtag) <= 8 or not _is_alnum(subtag):
                raise ParserError(ErrorKind.INVALID_SUBTAG, "extension", subtag)
            i += 1
        if i == start:
            raise ParserError(
                ErrorKind.INVALID_SUBTAG, "extension", singleton,
                f"Extension {singleton!r} has no subtags")
    return "-".join(tokens)
