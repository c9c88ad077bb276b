"""Tests for langident.core.compact_str.

The SWAR case conversion and classification are checked against plain
per-character reference implementations over every printable ASCII
character and a seeded sample of longer strings.
"""
import random
import string

import pytest

from langident.core.compact_str import CompactStr4, CompactStr8
from langident.core.errors import CompactStrError, ErrorKind, LangIdentError

PRINTABLE = [chr(c) for c in range(0x20, 0x7F)]
ALNUM = set(string.ascii_letters + string.digits)


def _samples(max_len, count=3000, seed=35):
    """Every 1 and 2 character printable string, plus random longer ones."""
    yield from PRINTABLE
    for a in PRINTABLE:
        for b in PRINTABLE:
            yield a + b
    rng = random.Random(seed)
    for _ in range(count):
        length = rng.randint(3, max_len)
        yield "".join(rng.choice(PRINTABLE) for _ in range(length))


def _ref_upper(s):
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in s)


def _ref_lower(s):
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in s)


class TestParse:
    """Test construction and validation."""

    def test_packs_little_endian(self):
        """Byte 0 of the text is the low-order byte of the word."""
        assert int(CompactStr8.parse("en")) == 0x6E65
        assert int(CompactStr4.parse("US")) == 0x5355

    def test_as_str(self):
        assert CompactStr8.parse("valencia").as_str() == "valencia"
        assert str(CompactStr4.parse("Latn")) == "Latn"

    def test_length(self):
        for n in range(1, 9):
            assert len(CompactStr8.parse("a" * n)) == n
        for n in range(1, 5):
            assert len(CompactStr4.parse("1" * n)) == n

    def test_empty_is_invalid_size(self):
        with pytest.raises(CompactStrError) as exc:
            CompactStr8.parse("")
        assert exc.value.kind == ErrorKind.INVALID_SIZE

    def test_too_long_is_invalid_size(self):
        with pytest.raises(CompactStrError, match="1-8 bytes"):
            CompactStr8.parse("abcdefghi")
        with pytest.raises(CompactStrError, match="1-4 bytes") as exc:
            CompactStr4.parse("abcde")
        assert exc.value.kind == ErrorKind.INVALID_SIZE

    def test_non_ascii(self):
        """Multi-byte UTF-8 is rejected by its high bits."""
        with pytest.raises(CompactStrError) as exc:
            CompactStr8.parse("é")
        assert exc.value.kind == ErrorKind.NON_ASCII

    def test_size_checked_on_bytes(self):
        """Length is measured in UTF-8 bytes, not characters."""
        with pytest.raises(CompactStrError) as exc:
            CompactStr4.parse("ééé")
        assert exc.value.kind == ErrorKind.INVALID_SIZE

    def test_lone_surrogate_is_non_ascii(self):
        with pytest.raises(CompactStrError) as exc:
            CompactStr8.parse("\ud800")
        assert exc.value.kind == ErrorKind.NON_ASCII

    def test_interior_null(self):
        with pytest.raises(CompactStrError) as exc:
            CompactStr8.parse("a\x00b")
        assert exc.value.kind == ErrorKind.INVALID_NULL

    def test_null_only(self):
        with pytest.raises(CompactStrError) as exc:
            CompactStr4.parse("\x00")
        assert exc.value.kind == ErrorKind.INVALID_NULL

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            CompactStr8.parse("")
        with pytest.raises(LangIdentError):
            CompactStr8.parse("")

    def test_new_unchecked_roundtrip(self):
        """A raw word taken from a value rebuilds an equal value."""
        for text in ("a", "en", "und", "valencia", "1996"):
            s = CompactStr8.parse(text)
            assert CompactStr8.new_unchecked(int(s)) == s
            assert CompactStr8.new_unchecked(int(s)).as_str() == text


class TestCaseConversion:
    """Test SWAR case conversion against the per-character reference."""

    def test_uppercase_matches_reference_8(self):
        for text in _samples(8):
            assert CompactStr8.parse(text).to_ascii_uppercase().as_str() == _ref_upper(text)

    def test_lowercase_matches_reference_8(self):
        for text in _samples(8):
            assert CompactStr8.parse(text).to_ascii_lowercase().as_str() == _ref_lower(text)

    def test_uppercase_matches_reference_4(self):
        for text in _samples(4, count=1000):
            assert CompactStr4.parse(text).to_ascii_uppercase().as_str() == _ref_upper(text)

    def test_lowercase_matches_reference_4(self):
        for text in _samples(4, count=1000):
            assert CompactStr4.parse(text).to_ascii_lowercase().as_str() == _ref_lower(text)

    def test_titlecase_matches_reference(self):
        for text in _samples(4, count=1000):
            expected = _ref_upper(text[0]) + _ref_lower(text[1:])
            assert CompactStr4.parse(text).to_ascii_titlecase().as_str() == expected

    def test_titlecase_script(self):
        assert CompactStr4.parse("lATN").to_ascii_titlecase().as_str() == "Latn"

    def test_boundary_characters_unchanged(self):
        """Characters just outside the letter ranges are left alone."""
        for text in ("@[`{", "@[`{" * 2):
            s = CompactStr8.parse(text)
            assert s.to_ascii_uppercase() == s
            assert s.to_ascii_lowercase() == s

    def test_conversion_returns_new_value(self):
        s = CompactStr8.parse("En")
        upper = s.to_ascii_uppercase()
        assert upper.as_str() == "EN"
        assert s.as_str() == "En"
        assert type(upper) is CompactStr8


class TestClassification:
    """Test SWAR character classes against the per-character reference."""

    def test_alphanumeric_matches_reference(self):
        for text in _samples(8):
            expected = all(c in ALNUM for c in text)
            assert CompactStr8.parse(text).is_ascii_alphanumeric() == expected, text

    def test_alphabetic_matches_reference(self):
        for text in _samples(8):
            expected = all(c in string.ascii_letters for c in text)
            assert CompactStr8.parse(text).is_ascii_alphabetic() == expected, text

    def test_numeric_matches_reference(self):
        for text in _samples(4, count=1000):
            expected = all(c in string.digits for c in text)
            assert CompactStr4.parse(text).is_ascii_numeric() == expected, text

    def test_examples(self):
        assert CompactStr8.parse("Valencia").is_ascii_alphabetic()
        assert not CompactStr8.parse("1996").is_ascii_alphabetic()
        assert CompactStr8.parse("1996").is_ascii_alphanumeric()
        assert CompactStr4.parse("419").is_ascii_numeric()
        assert not CompactStr4.parse("41a").is_ascii_numeric()


class TestOrderingAndEquality:
    """Test comparison on the packed word."""

    def test_byte_lexicographic_order(self):
        words = ["b", "a", "ab", "aa", "z", "abc", "Z", "1996", "valencia"]
        packed = sorted(CompactStr8.parse(w) for w in words)
        assert [p.as_str() for p in packed] == sorted(words)

    def test_prefix_sorts_first(self):
        assert CompactStr8.parse("a") < CompactStr8.parse("aa")
        assert CompactStr4.parse("US") > CompactStr4.parse("UA")

    def test_equality_and_hash(self):
        a = CompactStr8.parse("en")
        b = CompactStr8.parse("en")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_capacities_are_distinct(self):
        assert CompactStr8.parse("en") != CompactStr4.parse("en")

    def test_not_equal_to_str(self):
        assert CompactStr8.parse("en") != "en"

    def test_cross_capacity_order_unsupported(self):
        with pytest.raises(TypeError):
            CompactStr8.parse("en") < CompactStr4.parse("en")

    def test_immutable(self):
        s = CompactStr8.parse("en")
        with pytest.raises(AttributeError):
            s.word = 0

    def test_repr(self):
        assert repr(CompactStr4.parse("Latn")) == "CompactStr4('Latn')"
