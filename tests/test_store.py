"""Tests for langident.cache.store."""

import pytest

from langident.cache.store import IdentifierStore, pack_raw_parts, unpack_raw_parts
from langident.core.errors import (
    ErrorKind,
    LangIdentError,
    LanguageIdentifierError,
    StoreKeyError,
)
from langident.model.language_identifier import LanguageIdentifier

pytestmark = pytest.mark.lmdb


class TestPacking:
    def test_roundtrip(self):
        raw = LanguageIdentifier.from_text("en-Latn-US-valencia-1996").into_raw_parts()
        assert unpack_raw_parts(pack_raw_parts(raw)) == raw

    def test_absent_fields(self):
        raw = LanguageIdentifier.from_text("und").into_raw_parts()
        assert unpack_raw_parts(pack_raw_parts(raw)) == (0, 0, 0, ())


class TestIdentifierStore:
    def test_missing(self, store):
        assert store.get("en-US") is None
        assert len(store) == 0

    def test_put_and_get(self, store):
        key = store.put(LanguageIdentifier.from_text("pl-PL"))
        assert key == "pl-PL"
        assert store.get("pl-PL") == LanguageIdentifier.from_text("pl-PL")

    def test_resolve_stores_alias(self, store):
        li = store.resolve("EN_us")
        assert str(li) == "en-US"
        assert store.keys() == ["en-US"]
        assert store.get("EN_us") == li
        assert store.get("en-US") == li

    def test_resolve_hit_does_not_duplicate(self, store):
        store.resolve("en-US")
        store.resolve("en_US")
        store.resolve("en-US")
        assert len(store) == 1

    def test_resolve_invalid(self, store):
        with pytest.raises(LanguageIdentifierError):
            store.resolve("en-")
        assert len(store) == 0
        assert store.get("en-") is None

    def test_variants_survive(self, store):
        store.resolve("ca_es_VALENCIA")
        found = store.get("ca-ES-valencia")
        assert found.get_variants() == ["valencia"]
        assert str(found) == "ca-ES-valencia"

    def test_extension_tail_not_stored(self, store):
        li = LanguageIdentifier.from_text("en-US-u-ca-buddhist", allow_extension=True)
        assert store.put(li) == "en-US"
        assert store.get("en-US").extension_tail is None

    def test_keys_sorted(self, store):
        for tag in ("zh-TW", "de", "en-US"):
            store.resolve(tag)
        assert store.keys() == ["de", "en-US", "zh-TW"]
        assert len(store) == 3

    def test_reopen(self, tmp_path):
        path = tmp_path / "reopen.lmdb"
        with IdentifierStore(path) as first:
            first.resolve("sr_Cyrl_RS")
        with IdentifierStore(path) as second:
            assert str(second.get("sr_Cyrl_RS")) == "sr-Cyrl-RS"


class TestKeyLimits:
    """Test text that cannot be an LMDB key."""

    def test_get_empty_is_miss(self, store):
        assert store.get("") is None

    def test_get_oversize_is_miss(self, store):
        assert store.get("x" * (store.max_key_size + 1)) is None

    def test_resolve_oversize_identifier(self, store):
        variants = [f"v{i:04d}x" for i in range(100)]
        with pytest.raises(StoreKeyError) as exc:
            store.resolve("-".join(["en"] + variants))
        assert exc.value.kind == ErrorKind.INVALID_SIZE
        assert isinstance(exc.value, LangIdentError)
        assert len(store) == 0

    def test_oversize_alias_not_recorded(self, store):
        """A long spelling of a short identifier stores only the identifier."""
        text = "-".join(["en"] + ["valencia"] * 80)
        assert str(store.resolve(text)) == "en-valencia"
        assert store.keys() == ["en-valencia"]
        assert store.get("en-valencia").get_variants() == ["valencia"]

    def test_resolve_empty(self, store):
        with pytest.raises(LanguageIdentifierError):
            store.resolve("")
        assert len(store) == 0
