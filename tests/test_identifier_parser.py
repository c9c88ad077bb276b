"""Tests for langident.parser.identifier."""

import pytest

from langident.core.errors import ErrorKind, ParserError
from langident.parser.identifier import (
    parse_extension_tail,
    parse_language_identifier,
    parse_language_identifier_from_iter,
    split_subtags,
)


def _texts(parsed):
    """Render a ParsedIdentifier as plain strings for comparison."""
    return (
        parsed.language.as_str() if parsed.language is not None else None,
        parsed.script.as_str() if parsed.script is not None else None,
        parsed.region.as_str() if parsed.region is not None else None,
        [v.as_str() for v in parsed.variants],
    )


class TestSplitSubtags:
    def test_both_separators(self):
        assert split_subtags("en_Latn-US") == ["en", "Latn", "US"]

    def test_empty_tokens_kept(self):
        assert split_subtags("en--US") == ["en", "", "US"]


class TestParseLanguageIdentifier:
    def test_language_only(self):
        assert _texts(parse_language_identifier("en")) == ("en", None, None, [])

    def test_language_region(self):
        assert _texts(parse_language_identifier("en-US")) == ("en", None, "US", [])

    def test_full(self):
        parsed = parse_language_identifier("eN_latn_Us-Valencia")
        assert _texts(parsed) == ("en", "Latn", "US", ["valencia"])

    def test_numeric_region(self):
        assert _texts(parse_language_identifier("es-419")) == ("es", None, "419", [])

    def test_variant_without_region(self):
        assert _texts(parse_language_identifier("sl-rozaj")) == ("sl", None, None, ["rozaj"])

    def test_script_without_region(self):
        assert _texts(parse_language_identifier("zh-Hant")) == ("zh", "Hant", None, [])

    def test_und(self):
        assert _texts(parse_language_identifier("und-AT")) == (None, None, "AT", [])

    def test_variants_sorted_and_deduplicated(self):
        parsed = parse_language_identifier("de-DE-valencia-1996-VALENCIA")
        assert _texts(parsed) == ("de", None, "DE", ["1996", "valencia"])

    @pytest.mark.parametrize("text", ["", "a", "-en", "toolonglanguagetag", "1en"])
    def test_bad_language(self, text):
        with pytest.raises(ParserError) as exc:
            parse_language_identifier(text)
        assert exc.value.kind == ErrorKind.INVALID_LANGUAGE

    @pytest.mark.parametrize("text", ["en-", "en--US", "en-US-US", "en-1", "en-US-x", "en-Latn-US-1"])
    def test_extra_input(self, text):
        with pytest.raises(ParserError) as exc:
            parse_language_identifier(text)
        assert exc.value.kind == ErrorKind.INVALID_SUBTAG

    def test_region_after_variant_rejected(self):
        """Slots only move forward."""
        with pytest.raises(ParserError):
            parse_language_identifier("en-valencia-US")


class TestParseFromIter:
    def test_remaining_returned_with_extensions(self):
        tokens = split_subtags("en-US-u-ca-buddhist")
        parsed, remaining = parse_language_identifier_from_iter(tokens, allow_extension=True)
        assert _texts(parsed) == ("en", None, "US", [])
        assert remaining == ["u", "ca", "buddhist"]

    def test_nothing_remaining(self):
        parsed, remaining = parse_language_identifier_from_iter(["fr", "CA"], True)
        assert _texts(parsed) == ("fr", None, "CA", [])
        assert remaining == []

    def test_remaining_rejected_without_extensions(self):
        with pytest.raises(ParserError, match="extra input"):
            parse_language_identifier_from_iter(["en", "u", "ca"])

    def test_empty_token_list(self):
        with pytest.raises(ParserError):
            parse_language_identifier_from_iter([])


class TestParseExtensionTail:
    def test_joined_verbatim(self):
        assert parse_extension_tail(["u", "CA", "Buddhist"]) == "u-CA-Buddhist"

    def test_private_use(self):
        assert parse_extension_tail(["x", "private"]) == "x-private"

    def test_empty(self):
        assert parse_extension_tail([]) is None

    def test_several_extensions(self):
        assert parse_extension_tail(["u", "ca", "t", "h0"]) == "u-ca-t-h0"

    def test_private_use_takes_short_subtags(self):
        """After "x" single characters are subtags, not singletons."""
        assert parse_extension_tail(["x", "a", "b"]) == "x-a-b"
        assert parse_extension_tail(["u", "ca", "x", "t"]) == "u-ca-x-t"

    def test_requires_singleton(self):
        with pytest.raises(ParserError, match="singleton"):
            parse_extension_tail(["ca", "buddhist"])

    @pytest.mark.parametrize("tokens", [
        ["u", ""], ["u", "toolongsub"], ["u", "c!"], ["!"],
        ["u"], ["x"], ["u", "t", "ca"], ["u", "ca", "t"], ["u", "c"],
    ])
    def test_malformed(self, tokens):
        with pytest.raises(ParserError) as exc:
            parse_extension_tail(tokens)
        assert exc.value.kind == ErrorKind.INVALID_SUBTAG
        assert exc.value.subtag_kind == "extension"
