"""LanguageIdentifier: parsed, case-normalized language identifier.

Parsing normalizes a well-formed identifier: "_" separators become "-",
the language is lowercased, the script titlecased, the region uppercased
and variants lowercased, sorted and deduplicated. Codes are not checked
against any registry.

    >>> li = LanguageIdentifier.from_text("eN_latn_Us-Valencia")
    >>> str(li)
    'en-Latn-US-valencia'
    >>> li.get_language(), li.get_script(), li.get_region(), li.get_variants()
    ('en', 'Latn', 'US', ['valencia'])
"""

from enum import Enum

from langident.core.compact_str import CompactStr4, CompactStr8
from langident.core.errors import LanguageIdentifierError, ParserError
from langident.likely import resolver
from langident.parser.identifier import (
    parse_extension_tail,
    parse_language_identifier_from_iter,
    split_subtags,
)
from langident.parser.subtags import (
    UND,
    parse_language_subtag,
    parse_script_subtag,
    parse_region_subtag,
    parse_variant_subtag,
)

from .layout_table import CHARACTER_DIRECTION_RTL


class CharacterDirection(Enum):
    RTL = "rtl"
    LTR = "ltr"


def _parse_variants(variants):
    return tuple(sorted(set(parse_variant_subtag(v) for v in variants)))


def _subtag_matches(subtag1, subtag2, as_range1, as_range2):
    return ((as_range1 and subtag1 is None)
            or (as_range2 and subtag2 is None)
            or subtag1 == subtag2)


def _variants_match(variants1, variants2, as_range1, as_range2):
    return ((as_range1 and not variants1)
            or (as_range2 and not variants2)
            or variants1 == variants2)


class LanguageIdentifier:
    """A Unicode language identifier: language, script, region, variants.

    Build instances with from_text(), from_subtags() or
    from_raw_parts_unchecked(). The constructor takes already validated
    compact strings and does no checking of its own.
    """

    def __init__(self, language=None, script=None, region=None, variants=(),
                 extension_tail=None):
        self._language = language
        self._script = script
        self._region = region
        self._variants = tuple(variants)
        self._extension_tail = extension_tail

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text, allow_extension=False):
        """Parse an identifier such as "en-US" or "zh_hant_tw".

        With allow_extension=True, a trailing extension sequence
        ("-u-ca-buddhist", "-x-private") is kept verbatim in
        ``extension_tail`` and written back out by to_text().

        Raises:
            LanguageIdentifierError: The text is not well-formed.
        """
        try:
            parsed, remaining = parse_language_identifier_from_iter(
                split_subtags(text), allow_extension)
            tail = parse_extension_tail(remaining)
        except ParserError as e:
            raise LanguageIdentifierError.from_parser_error(text, e) from e
        return cls(parsed.language, parsed.script, parsed.region,
                   parsed.variants, tail)

    @classmethod
    def from_subtags(cls, language=None, script=None, region=None, variants=()):
        """Build an identifier from separate subtag strings.

        >>> str(LanguageIdentifier.from_subtags("fr", None, "CA"))
        'fr-CA'
        """
        try:
            lang = parse_language_subtag(language) if language is not None else None
            scr = parse_script_subtag(script) if script is not None else None
            reg = parse_region_subtag(region) if region is not None else None
            vars_ = _parse_variants(variants)
        except ParserError as e:
            source = "-".join(
                s for s in (language, script, region, *variants) if s is not None)
            raise LanguageIdentifierError.from_parser_error(source, e) from e
        return cls(lang, scr, reg, vars_)

    def into_raw_parts(self):
        """Return the packed subtags as (language, script, region, variants).

        Absent subtags are 0; variants is a tuple of ints. The result is
        accepted unchanged by from_raw_parts_unchecked(). The extension
        tail is not part of the raw encoding.
        """
        return (
            int(self._language) if self._language is not None else 0,
            int(self._script) if self._script is not None else 0,
            int(self._region) if self._region is not None else 0,
            tuple(int(v) for v in self._variants),
        )

    @classmethod
    def from_raw_parts_unchecked(cls, language, script, region, variants=(),
                                 extension_tail=None):
        """Rebuild an identifier from into_raw_parts() output without checks.

        0 or None means absent. The caller guarantees the integers were
        produced by into_raw_parts() (or an equivalent trusted source);
        nothing is validated, normalized or re-sorted here.
        """
        return cls(
            CompactStr8.new_unchecked(language) if language else None,
            CompactStr4.new_unchecked(script) if script else None,
            CompactStr4.new_unchecked(region) if region else None,
            [CompactStr8.new_unchecked(v) for v in variants or ()],
            extension_tail,
        )

    def copy(self):
        return type(self)(self._language, self._script, self._region,
                          self._variants, self._extension_tail)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_language(self):
        """Return the language subtag, or "und" when none is set."""
        if self._language is None:
            return UND
        return self._language.as_str()

    def get_script(self):
        return self._script.as_str() if self._script is not None else None

    def get_region(self):
        return self._region.as_str() if self._region is not None else None

    def get_variants(self):
        return [v.as_str() for v in self._variants]

    @property
    def extension_tail(self):
        return self._extension_tail

    # Setters validate before assigning so a failure leaves the
    # identifier unchanged.

    def set_language(self, language):
        """Set the language; None (or "und") clears it."""
        self._language = self._checked(parse_language_subtag, language)

    def set_script(self, script):
        self._script = self._checked(parse_script_subtag, script)

    def set_region(self, region):
        self._region = self._checked(parse_region_subtag, region)

    def set_variants(self, variants):
        self._variants = self._checked(_parse_variants, variants or ())

    @staticmethod
    def _checked(parse, value):
        if value is None:
            return None
        try:
            return parse(value)
        except ParserError as e:
            raise LanguageIdentifierError.from_parser_error(str(value), e) from e

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def matches(self, other, self_as_range=False, other_as_range=False):
        """Compare with ``other``, treating absent fields as wildcards.

        A side flagged "as range" matches anything in the fields it leaves
        unset, so "en" as a range matches "en-US":

        >>> en = LanguageIdentifier.from_text("en")
        >>> en_us = LanguageIdentifier.from_text("en-US")
        >>> en.matches(en_us, False, False), en.matches(en_us, True, False)
        (False, True)
        """
        return (_subtag_matches(self._language, other._language,
                                self_as_range, other_as_range)
                and _subtag_matches(self._script, other._script,
                                    self_as_range, other_as_range)
                and _subtag_matches(self._region, other._region,
                                    self_as_range, other_as_range)
                and _variants_match(self._variants, other._variants,
                                    self_as_range, other_as_range))

    def _key(self):
        return (self._language, self._script, self._region, self._variants,
                self._extension_tail)

    def __eq__(self, other):
        if not isinstance(other, LanguageIdentifier):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    # ------------------------------------------------------------------
    # Likely subtags
    # ------------------------------------------------------------------

    def add_likely_subtags(self):
        """Fill in the most likely script and region (CLDR likelySubtags).

        Returns True if the table produced a result, which replaces the
        language, script and region.

        >>> li = LanguageIdentifier.from_text("en-US")
        >>> li.add_likely_subtags(), str(li)
        (True, 'en-Latn-US')
        """
        result = resolver.add_likely_subtags(
            self._language, self._script, self._region)
        if result is None:
            return False
        self._language, self._script, self._region = result
        return True

    def remove_likely_subtags(self):
        """Drop the subtags that add_likely_subtags() would restore.

        >>> li = LanguageIdentifier.from_text("en-Latn-US")
        >>> li.remove_likely_subtags(), str(li)
        (True, 'en')
        """
        result = resolver.remove_likely_subtags(
            self._language, self._script, self._region)
        if result is None:
            return False
        self._language, self._script, self._region = result
        return True

    def get_character_direction(self):
        if self._language is not None and int(self._language) in CHARACTER_DIRECTION_RTL:
            return CharacterDirection.RTL
        return CharacterDirection.LTR

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_text(self):
        subtags = [self.get_language()]
        if self._script is not None:
            subtags.append(self._script.as_str())
        if self._region is not None:
            subtags.append(self._region.as_str())
        subtags.extend(v.as_str() for v in self._variants)
        if self._extension_tail:
            subtags.append(self._extension_tail)
        return "-".join(subtags)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"LanguageIdentifier({self.to_text()!r})"


def canonicalize(text):
    """Parse and re-serialize, normalizing case and separators.

    >>> canonicalize("pL_latn_pl")
    'pl-Latn-PL'
    """
    return LanguageIdentifier.from_text(text).to_text()
