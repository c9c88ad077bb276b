"""Tests for langident.model.language_identifier."""

import pytest

from langident.core.errors import (
    ErrorKind,
    LangIdentError,
    LanguageIdentifierError,
    ParserError,
)
from langident.model.language_identifier import (
    CharacterDirection,
    LanguageIdentifier,
    canonicalize,
)

VALID = [
    "en",
    "en-US",
    "EN_us",
    "zh-Hant-TW",
    "ca-ES-valencia",
    "de-DE-1996-valencia",
    "sr_cyrl_rs",
    "und",
    "und-Latn",
    "es-419",
    "sl-rozaj-biske-1994",
    "abcdefgh-Zzzz-999-abcdefgh",
]


class TestFromText:
    """Test parsing into identifiers."""

    def test_accessors(self):
        li = LanguageIdentifier.from_text("eN_latn_Us-Valencia")
        assert li.get_language() == "en"
        assert li.get_script() == "Latn"
        assert li.get_region() == "US"
        assert li.get_variants() == ["valencia"]

    def test_case_normalization(self):
        """Different casing and separators produce one identifier."""
        a = LanguageIdentifier.from_text("EN-us")
        b = LanguageIdentifier.from_text("en-US")
        c = LanguageIdentifier.from_text("En_Us")
        assert a == b == c
        assert a.to_text() == "en-US"

    def test_roundtrip_stable(self):
        for text in VALID:
            li = LanguageIdentifier.from_text(text)
            assert LanguageIdentifier.from_text(li.to_text()) == li

    def test_und_language(self):
        li = LanguageIdentifier.from_text("und-AT")
        assert li.get_language() == "und"
        assert str(li) == "und-AT"
        assert li == LanguageIdentifier.from_subtags(None, None, "AT")

    def test_missing_fields(self):
        li = LanguageIdentifier.from_text("de")
        assert li.get_script() is None
        assert li.get_region() is None
        assert li.get_variants() == []

    @pytest.mark.parametrize("text", ["a", "toolonglanguagetag", "en-1", "", "en-US-", "en US"])
    def test_invalid(self, text):
        with pytest.raises(LanguageIdentifierError):
            LanguageIdentifier.from_text(text)

    def test_error_chain(self):
        with pytest.raises(LanguageIdentifierError) as exc:
            LanguageIdentifier.from_text("a")
        assert exc.value.kind == ErrorKind.INVALID_LANGUAGE
        assert isinstance(exc.value.__cause__, ParserError)
        assert isinstance(exc.value, LangIdentError)
        assert isinstance(exc.value, ValueError)

    def test_non_ascii_fails_cleanly(self):
        with pytest.raises(LanguageIdentifierError):
            LanguageIdentifier.from_text("en-ÜS")


class TestExtensions:
    """Test the opaque extension tail."""

    def test_tail_preserved(self):
        li = LanguageIdentifier.from_text("en-US-u-ca-buddhist", allow_extension=True)
        assert li.get_region() == "US"
        assert li.extension_tail == "u-ca-buddhist"
        assert str(li) == "en-US-u-ca-buddhist"

    def test_tail_kept_verbatim(self):
        li = LanguageIdentifier.from_text("DE_x_Private", allow_extension=True)
        assert str(li) == "de-x-Private"

    def test_tail_rejected_by_default(self):
        with pytest.raises(LanguageIdentifierError):
            LanguageIdentifier.from_text("en-US-u-ca-buddhist")

    def test_tail_needs_singleton(self):
        with pytest.raises(LanguageIdentifierError):
            LanguageIdentifier.from_text("en-US-ca-buddhist", allow_extension=True)

    @pytest.mark.parametrize("text", ["en-US-u", "en-x", "en-u-t-ca"])
    def test_bare_singleton_rejected(self, text):
        with pytest.raises(LanguageIdentifierError):
            LanguageIdentifier.from_text(text, allow_extension=True)

    def test_no_tail(self):
        li = LanguageIdentifier.from_text("en-US", allow_extension=True)
        assert li.extension_tail is None
        assert li == LanguageIdentifier.from_text("en-US")

    def test_tail_part_of_equality(self):
        a = LanguageIdentifier.from_text("en-x-a", allow_extension=True)
        b = LanguageIdentifier.from_text("en-x-b", allow_extension=True)
        assert a != b


class TestFromSubtags:
    def test_basic(self):
        li = LanguageIdentifier.from_subtags("fr", None, "CA")
        assert str(li) == "fr-CA"

    def test_variants(self):
        li = LanguageIdentifier.from_subtags("ca", None, "ES", ["valencia"])
        assert li.to_text() == "ca-ES-valencia"

    def test_duplicate_variants_collapse(self):
        li = LanguageIdentifier.from_subtags("ca", None, "ES", ["valencia", "1994", "VALENCIA"])
        assert li.get_variants() == ["1994", "valencia"]
        assert str(li) == "ca-ES-1994-valencia"

    def test_same_as_parsing(self):
        li = LanguageIdentifier.from_subtags("SR", "cyrl", "rs", ["ekavsk"])
        assert li == LanguageIdentifier.from_text("sr-Cyrl-RS-ekavsk")

    def test_all_absent(self):
        assert str(LanguageIdentifier.from_subtags()) == "und"

    def test_invalid_subtag(self):
        with pytest.raises(LanguageIdentifierError) as exc:
            LanguageIdentifier.from_subtags("en", "Latin")
        assert exc.value.kind == ErrorKind.INVALID_SUBTAG


class TestSetters:
    """Test field replacement and failure atomicity."""

    def test_set_language(self):
        li = LanguageIdentifier.from_text("de-Latn-AT")
        li.set_language("fr")
        assert str(li) == "fr-Latn-AT"

    def test_clear_language(self):
        li = LanguageIdentifier.from_text("de-AT")
        li.set_language(None)
        assert str(li) == "und-AT"
        li.set_language("de")
        li.set_language("und")
        assert li.get_language() == "und"

    def test_set_script(self):
        li = LanguageIdentifier.from_text("sr-Latn")
        li.set_script("cyrl")
        assert str(li) == "sr-Cyrl"
        li.set_script(None)
        assert str(li) == "sr"

    def test_set_region(self):
        li = LanguageIdentifier.from_text("fr-FR")
        li.set_region("ca")
        assert str(li) == "fr-CA"

    def test_set_variants(self):
        li = LanguageIdentifier.from_text("ca-ES")
        li.set_variants(["valencia"])
        assert str(li) == "ca-ES-valencia"
        li.set_variants([])
        assert str(li) == "ca-ES"

    def test_failed_set_region_leaves_identifier(self):
        li = LanguageIdentifier.from_text("fr-FR")
        with pytest.raises(LanguageIdentifierError):
            li.set_region("1")
        assert str(li) == "fr-FR"

    def test_failed_set_language_leaves_identifier(self):
        li = LanguageIdentifier.from_text("fr-FR")
        with pytest.raises(LanguageIdentifierError):
            li.set_language("f")
        assert str(li) == "fr-FR"

    def test_failed_set_variants_leaves_identifier(self):
        """One bad variant rejects the whole list."""
        li = LanguageIdentifier.from_text("ca-ES-valencia")
        with pytest.raises(LanguageIdentifierError):
            li.set_variants(["1994", "x"])
        assert li.get_variants() == ["valencia"]


class TestMatches:
    """Test wildcard-aware matching."""

    def setup_method(self):
        self.en = LanguageIdentifier.from_text("en")
        self.en_us = LanguageIdentifier.from_text("en-US")

    def test_not_equal(self):
        assert self.en != self.en_us
        assert str(self.en) != str(self.en_us)

    def test_exact(self):
        assert not self.en.matches(self.en_us, False, False)

    def test_self_as_range(self):
        assert self.en.matches(self.en_us, True, False)

    def test_other_as_range(self):
        assert not self.en.matches(self.en_us, False, True)
        assert self.en_us.matches(self.en, False, True)

    def test_both_as_range(self):
        assert self.en.matches(self.en_us, True, True)

    def test_identical(self):
        assert self.en_us.matches(LanguageIdentifier.from_text("en-us"))

    def test_variants_wildcard(self):
        range_id = LanguageIdentifier.from_text("ca-ES")
        tag = LanguageIdentifier.from_text("ca-ES-valencia")
        assert range_id.matches(tag, True, False)
        assert not range_id.matches(tag, False, False)

    def test_variants_must_be_equal(self):
        a = LanguageIdentifier.from_text("ca-ES-valencia")
        b = LanguageIdentifier.from_text("ca-ES-1994")
        assert not a.matches(b, True, True)

    def test_und_range_matches_any_language(self):
        und = LanguageIdentifier.from_text("und-US")
        assert und.matches(self.en_us, True, False)
        assert not und.matches(self.en_us, False, False)

    def test_other_fields_still_compared(self):
        assert not self.en.matches(LanguageIdentifier.from_text("fr-US"), True, False)


class TestSerialization:
    def test_canonical_form(self):
        li = LanguageIdentifier.from_text("SR_cyrl_rs_EKAVSK")
        assert li.to_text() == "sr-Cyrl-RS-ekavsk"
        assert str(li) == li.to_text()

    def test_canonicalize(self):
        assert canonicalize("pL_latn_pl") == "pl-Latn-PL"

    def test_canonicalize_idempotent(self):
        for text in VALID:
            once = canonicalize(text)
            assert canonicalize(once) == once

    def test_canonicalize_invalid(self):
        with pytest.raises(LanguageIdentifierError):
            canonicalize("en-")

    def test_repr(self):
        assert repr(LanguageIdentifier.from_text("en-us")) == "LanguageIdentifier('en-US')"


class TestRawParts:
    """Test the packed integer encoding."""

    def test_values(self):
        li = LanguageIdentifier.from_text("en-US")
        assert li.into_raw_parts() == (28261, 0, 21333, ())

    def test_full_values(self):
        li = LanguageIdentifier.from_text("en-Latn-US-valencia-1996")
        assert li.into_raw_parts() == (
            28261, 1853120844, 21333, (909719857, 7019250820032782710))

    def test_absent_language_is_zero(self):
        assert LanguageIdentifier.from_text("und").into_raw_parts() == (0, 0, 0, ())

    def test_roundtrip(self):
        for text in VALID:
            li = LanguageIdentifier.from_text(text)
            rebuilt = LanguageIdentifier.from_raw_parts_unchecked(*li.into_raw_parts())
            assert rebuilt == li
            assert str(rebuilt) == str(li)

    def test_none_means_absent(self):
        li = LanguageIdentifier.from_raw_parts_unchecked(28261, None, None, None)
        assert str(li) == "en"


class TestDirection:
    @pytest.mark.parametrize("text", ["ar", "fa", "he-IL", "ur-PK", "ckb"])
    def test_rtl(self, text):
        li = LanguageIdentifier.from_text(text)
        assert li.get_character_direction() == CharacterDirection.RTL

    @pytest.mark.parametrize("text", ["es-AR", "en", "und", "zh-Hant"])
    def test_ltr(self, text):
        li = LanguageIdentifier.from_text(text)
        assert li.get_character_direction() == CharacterDirection.LTR


class TestValueBehaviour:
    def test_hashable(self):
        ids = {LanguageIdentifier.from_text(t) for t in ("en-US", "EN_us", "en")}
        assert len(ids) == 2

    def test_copy_is_independent(self):
        li = LanguageIdentifier.from_text("en-US")
        other = li.copy()
        other.set_region("GB")
        assert str(li) == "en-US"
        assert str(other) == "en-GB"

    def test_not_equal_to_str(self):
        assert LanguageIdentifier.from_text("en") != "en"
