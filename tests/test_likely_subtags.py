"""Tests for likely subtags expansion and contraction."""

import pytest

from langident.likely import resolver
from langident.likely.resolver import add_likely_subtags, remove_likely_subtags
from langident.likely.tables import CLDR_VERSION, LIKELY_SUBTAGS
from langident.model.language_identifier import LanguageIdentifier
from langident.parser.subtags import (
    parse_language_subtag,
    parse_region_subtag,
    parse_script_subtag,
)

# (input, expected expansion or None)
EXPANSIONS = [
    ("en-US", "en-Latn-US"),
    ("en-GB", "en-Latn-GB"),
    ("es-AR", "es-Latn-AR"),
    ("it", "it-Latn-IT"),
    ("zh-Hans-CN", None),
    ("de-AT", "de-Latn-AT"),
    ("pl", "pl-Latn-PL"),
    ("fr-FR", "fr-Latn-FR"),
    ("sr-Cyrl-SR", None),
    ("nb-NO", "nb-Latn-NO"),
    ("mk", "mk-Cyrl-MK"),
    ("uk", "uk-Cyrl-UA"),
    ("und-PL", "pl-Latn-PL"),
    ("und-Latn-AM", "ku-Latn-AM"),
    ("ug-Cyrl", "ug-Cyrl-KZ"),
    ("sr-ME", "sr-Latn-ME"),
    ("mn-Mong", "mn-Mong-CN"),
    ("lif-Limb", "lif-Limb-IN"),
    ("gan", "gan-Hans-CN"),
    ("zh-Hant", "zh-Hant-TW"),
    ("yue-Hans", "yue-Hans-CN"),
    ("unr", "unr-Beng-IN"),
    ("unr-Deva", "unr-Deva-NP"),
    ("und-Thai-CN", "lcp-Thai-CN"),
    ("en-Latn-DE", None),
    ("pl-FR", "pl-Latn-FR"),
    ("de-CH", "de-Latn-CH"),
    ("tuq", "tuq-Latn"),
    ("ng", "ng-Latn-NA"),
    ("klx", "klx-Latn"),
    ("kk-Arab", "kk-Arab-CN"),
    ("en-Cyrl", "en-Cyrl-US"),
    ("und-Cyrl-UK", "ru-Cyrl-UK"),
    ("und-Arab", "ar-Arab-EG"),
    ("und-Arab-FO", "ar-Arab-FO"),
    ("zh-TW", "zh-Hant-TW"),
    ("und", "en-Latn-US"),
    ("und-DK", "da-Latn-DK"),
    ("und-FI", "fi-Latn-FI"),
    ("to", "to-Latn-TO"),
    ("sm", "sm-Latn-WS"),
    ("gn", "gn-Latn-PY"),
    ("rn", "rn-Latn-BI"),
    ("ay", "ay-Latn-BO"),
    ("und-AQ", "und-Latn-AQ"),
]


def _triple(text):
    """Split "lang[-Script][-REGION]" into validated subtags."""
    chunks = text.split("-")
    language = parse_language_subtag(chunks[0])
    script = None
    region = None
    for chunk in chunks[1:]:
        if len(chunk) == 4:
            script = parse_script_subtag(chunk)
        else:
            region = parse_region_subtag(chunk)
    return language, script, region


def _text(triple):
    language, script, region = triple
    parts = [language.as_str() if language is not None else "und"]
    parts.extend(s.as_str() for s in (script, region) if s is not None)
    return "-".join(parts)


class TestTables:
    def test_version(self):
        assert CLDR_VERSION == "42"

    def test_sorted_unique_keys(self):
        keys = [key for key, _ in LIKELY_SUBTAGS]
        assert keys == sorted(keys)
        assert len(keys) == len(set(keys))

    def test_values_fully_specified(self):
        """Every value carries a language, script and region slot."""
        for _, value in LIKELY_SUBTAGS:
            parts = value.split("-")
            assert len(parts) == 3
            assert len(parts[1]) == 4

    def test_every_key_is_indexed(self):
        """Keys parse into distinct packed triples."""
        assert len(resolver._INDEX) == len(LIKELY_SUBTAGS)


class TestAddLikelySubtags:
    @pytest.mark.parametrize("source,expected", EXPANSIONS)
    def test_expansion(self, source, expected):
        result = add_likely_subtags(*_triple(source))
        if expected is None:
            assert result is None
        else:
            assert _text(result) == expected

    def test_given_subtags_kept(self):
        """A script on input is never replaced by the table's."""
        result = add_likely_subtags(*_triple("sr-Latn"))
        assert _text(result) == "sr-Latn-RS"

    def test_result_types(self):
        language, script, region = add_likely_subtags(*_triple("en"))
        assert language == parse_language_subtag("en")
        assert script == parse_script_subtag("Latn")
        assert region == parse_region_subtag("US")


class TestRemoveLikelySubtags:
    def test_zh_hant(self):
        result = remove_likely_subtags(*_triple("zh-Hant"))
        assert result == _triple("zh-TW")

    @pytest.mark.parametrize("source,expected", [
        ("en-Latn-US", "en"),
        ("en-US", "en"),
        ("sr-Latn-ME", "sr-ME"),
        ("zh-Hans-CN", "zh"),
        ("zh-Hant-TW", "zh-TW"),
        ("en-Latn-DE", "en-DE"),
        ("und-Latn-AM", "ku-AM"),
        ("ug-Cyrl-KZ", "ug-KZ"),
    ])
    def test_reduction(self, source, expected):
        assert _text(remove_likely_subtags(*_triple(source))) == expected

    def test_add_then_remove(self):
        """Expanding then contracting returns toward the original."""
        for source in ("en-US", "zh-TW", "sr-ME", "pl", "mk"):
            maximal = add_likely_subtags(*_triple(source))
            minimal = remove_likely_subtags(*maximal)
            assert add_likely_subtags(*minimal) == maximal


class TestIdentifierMethods:
    def test_add(self):
        li = LanguageIdentifier.from_text("en-US")
        assert li.add_likely_subtags() is True
        assert str(li) == "en-Latn-US"

    def test_remove(self):
        li = LanguageIdentifier.from_text("en-Latn-US")
        assert li.remove_likely_subtags() is True
        assert str(li) == "en"

    def test_roundtrip(self):
        li = LanguageIdentifier.from_text("fr-FR")
        li.add_likely_subtags()
        assert str(li) == "fr-Latn-FR"
        li.remove_likely_subtags()
        assert str(li) == "fr"

    def test_full_identifier_unchanged(self):
        li = LanguageIdentifier.from_text("zh-Hans-CN")
        assert li.add_likely_subtags() is False
        assert str(li) == "zh-Hans-CN"

    def test_variants_untouched(self):
        li = LanguageIdentifier.from_text("ca-valencia")
        li.add_likely_subtags()
        assert str(li) == "ca-Latn-ES-valencia"
