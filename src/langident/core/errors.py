"""Error taxonomy for compact strings, subtags and language identifiers.

Every error raised for malformed input is a ``LangIdentError`` (a
``ValueError``) carrying an ``ErrorKind``:

  INVALID_SIZE      text length outside the capacity of a compact string
  NON_ASCII         a byte with the high bit set
  INVALID_NULL      an embedded NUL byte
  INVALID_LANGUAGE  the language position is not a well-formed language subtag
  INVALID_SUBTAG    a script/region/variant/extension subtag is malformed,
                    or input is left over after the last subtag slot

StoreKeyError reuses INVALID_SIZE for identifiers too long to key in LMDB.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_SIZE = "invalid_size"
    NON_ASCII = "non_ascii"
    INVALID_NULL = "invalid_null"
    INVALID_LANGUAGE = "invalid_language"
    INVALID_SUBTAG = "invalid_subtag"


class LangIdentError(ValueError):
    """Base class for all input errors."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class CompactStrError(LangIdentError):
    """Raised when text cannot be packed into a compact string."""


class ParserError(LangIdentError):
    """Raised when a subtag or identifier is not well-formed.

    ``subtag_kind`` names the grammar slot being parsed ("language",
    "script", "region", "variant", "extension") and ``subtag`` holds the
    offending text.
    """

    def __init__(self, kind: ErrorKind, subtag_kind: str, subtag: str,
                 message: str | None = None):
        if message is None:
            message = f"Invalid {subtag_kind} subtag: {subtag!r}"
        super().__init__(kind, message)
        self.subtag_kind = subtag_kind
        self.subtag = subtag


class LanguageIdentifierError(LangIdentError):
    """Aggregate error raised by the LanguageIdentifier API.

    The underlying ParserError is chained as ``__cause__``.
    """

    @classmethod
    def from_parser_error(cls, source: str, err: ParserError):
        return cls(err.kind, f"Cannot parse language identifier {source!r}: {err}")


class StoreKeyError(LangIdentError):
    """Raised when an identifier's canonical text cannot be an LMDB key."""
