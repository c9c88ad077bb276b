"""Identifier store: LMDB persistence of parsed language identifiers.

Identifiers are kept in their raw packed form so a read never re-parses:

  ids      canonical text  → msgpack [language, script, region, [variants]]
  aliases  text as given   → canonical text

Absent subtags are stored as 0. Values are exactly what
LanguageIdentifier.into_raw_parts() produces and are read back through
from_raw_parts_unchecked().
"""

import logging

import lmdb
import msgpack

from langident.core.errors import ErrorKind, StoreKeyError
from langident.model.language_identifier import LanguageIdentifier

logger = logging.getLogger(__name__)

DEFAULT_MAP_SIZE = 16 * 1024 * 1024


def pack_raw_parts(raw_parts):
    """Encode into_raw_parts() output as msgpack bytes."""
    language, script, region, variants = raw_parts
    return msgpack.packb([language, script, region, list(variants)])


def unpack_raw_parts(data):
    """Decode pack_raw_parts() bytes back to a raw parts tuple."""
    language, script, region, variants = msgpack.unpackb(data)
    return language, script, region, tuple(variants)


class IdentifierStore:
    """Caches parsed identifiers in an LMDB environment."""

    def __init__(self, lmdb_path, map_size=DEFAULT_MAP_SIZE):
        self.env = lmdb.open(str(lmdb_path), map_size=map_size, max_dbs=2)
        self.ids_db = self.env.open_db(b"ids")
        self.aliases_db = self.env.open_db(b"aliases")
        self.max_key_size = self.env.max_key_size()

    def _fits(self, encoded):
        return 0 < len(encoded) <= self.max_key_size

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put(self, langid, alias=None):
        """Store an identifier under its canonical text.

        Extension tails are not stored; only the raw subtags are. An alias
        that is empty or too long to be an LMDB key is not recorded.

        Returns:
            The canonical text used as key.

        Raises:
            StoreKeyError: The canonical text exceeds the LMDB key size.
        """
        raw_parts = langid.into_raw_parts()
        key = LanguageIdentifier.from_raw_parts_unchecked(*raw_parts).to_text()
        encoded = key.encode("utf-8")
        if not self._fits(encoded):
            raise StoreKeyError(
                ErrorKind.INVALID_SIZE,
                f"Identifier is {len(encoded)} bytes; store keys are limited "
                f"to {self.max_key_size}")
        with self.env.begin(write=True) as txn:
            txn.put(encoded, pack_raw_parts(raw_parts), db=self.ids_db)
            if alias is not None and alias != key:
                encoded_alias = alias.encode("utf-8")
                if self._fits(encoded_alias):
                    txn.put(encoded_alias, encoded, db=self.aliases_db)
                else:
                    logger.debug("Alias of %s too long to store", key)
        return key

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, text):
        """Return the stored identifier for ``text``, or None.

        ``text`` may be a canonical key or an alias recorded by resolve().
        Text that could never be a key (empty, or over the LMDB key size)
        is a miss.
        """
        encoded = text.encode("utf-8", "surrogatepass")
        if not self._fits(encoded):
            return None
        with self.env.begin() as txn:
            val = txn.get(encoded, db=self.ids_db)
            if val is None:
                canonical = txn.get(encoded, db=self.aliases_db)
                if canonical is None:
                    return None
                val = txn.get(canonical, db=self.ids_db)
                if val is None:
                    return None
        return LanguageIdentifier.from_raw_parts_unchecked(*unpack_raw_parts(val))

    def resolve(self, text):
        """Return the identifier for ``text``, parsing and storing on a miss.

        Raises:
            LanguageIdentifierError: ``text`` is not in the store and does
                not parse.
            StoreKeyError: ``text`` parses but is too long to store.
        """
        found = self.get(text)
        if found is not None:
            return found

        langid = LanguageIdentifier.from_text(text)
        key = self.put(langid, alias=text)
        logger.debug("Stored %r as %s", text, key)
        return langid

    def keys(self):
        """Return all canonical keys, in LMDB (byte) order."""
        with self.env.begin(db=self.ids_db) as txn:
            return [k.decode("utf-8") for k in txn.cursor().iternext(values=False)]

    def __len__(self):
        with self.env.begin(db=self.ids_db) as txn:
            return txn.stat(self.ids_db)["entries"]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self):
        """Close LMDB environment."""
        self.env.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
