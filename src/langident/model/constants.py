"""Parse-once identifier constants.

    EN_US = langid("en-US")

The first call for a given string parses it; later calls rebuild the
identifier from the cached raw parts through the trusted constructor, so
every caller gets its own instance and nothing is re-validated.
"""

import logging
from functools import lru_cache

from .language_identifier import LanguageIdentifier

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _raw_parts(text):
    li = LanguageIdentifier.from_text(text)
    logger.debug("Cached language identifier %r as %s", text, li)
    return li.into_raw_parts()


def langid(text):
    """Return the LanguageIdentifier for ``text``, parsing it at most once.

    Raises:
        LanguageIdentifierError: The text is not well-formed (not cached).
    """
    return LanguageIdentifier.from_raw_parts_unchecked(*_raw_parts(text))


def langids(*texts):
    """Return a list of identifiers, one per text."""
    return [langid(text) for text in texts]


def cache_info():
    return _raw_parts.cache_info()


def cache_clear():
    _raw_parts.cache_clear()
