"""Likely subtags: expand and contract (language, script, region) triples.

Subtags are CompactStr values (or None for absent). The CLDR table in
likely.tables is indexed once at import by packed words, so a lookup is a
dict hit and no identifier ever references the table's strings.

A triple with all three subtags set has nothing to expand. Otherwise
expansion tries keys from most to least specific:

    language-region, language-script, und-script-region,
    language, und-script, und-region, und

and fills every absent subtag from the first match; subtags given on
input are never replaced.
"""

import logging

from langident.core.compact_str import CompactStr4, CompactStr8

from .tables import CLDR_VERSION, LIKELY_SUBTAGS

logger = logging.getLogger(__name__)

# CLDR writes "und" for no language and "ZZ" for unknown region
_UND = "und"
_UNKNOWN_REGION = "ZZ"


def _split_entry(text):
    """Split a table entry like "und-Latn-AM" into packed words (0 = absent)."""
    parts = text.split("-")
    language = 0 if parts[0] == _UND else int(CompactStr8.parse(parts[0]))
    script = 0
    region = 0
    for part in parts[1:]:
        if len(part) == 4:
            script = int(CompactStr4.parse(part))
        elif part != _UNKNOWN_REGION:
            region = int(CompactStr4.parse(part))
    return language, script, region


def _build_index(entries):
    return {_split_entry(key): _split_entry(value) for key, value in entries}


_INDEX = _build_index(LIKELY_SUBTAGS)
logger.debug("Indexed %d likely subtags entries (CLDR %s)",
             len(_INDEX), CLDR_VERSION)


def _word(subtag):
    return int(subtag) if subtag is not None else 0


def _lookup_keys(lang, script, region):
    """Yield table keys in priority order for the given packed subtags."""
    if lang and region:
        yield (lang, 0, region)
    if lang and script:
        yield (lang, script, 0)
    if script and region:
        yield (0, script, region)
    if lang:
        yield (lang, 0, 0)
    if script:
        yield (0, script, 0)
    if region:
        yield (0, 0, region)
    yield (0, 0, 0)


def add_likely_subtags(language, script, region):
    """Return the most likely full (language, script, region), or None.

    None is returned when all three subtags are already present or no
    table key matches.
    """
    if language is not None and script is not None and region is not None:
        return None

    lang_w, script_w, region_w = _word(language), _word(script), _word(region)
    for key in _lookup_keys(lang_w, script_w, region_w):
        found = _INDEX.get(key)
        if found is None:
            continue
        found_lang, found_script, found_region = found
        return (
            language if language is not None
            else (CompactStr8.new_unchecked(found_lang) if found_lang else None),
            script if script is not None
            else (CompactStr4.new_unchecked(found_script) if found_script else None),
            region if region is not None
            else (CompactStr4.new_unchecked(found_region) if found_region else None),
        )
    return None


def remove_likely_subtags(language, script, region):
    """Return the shortest triple that expands to the same full triple.

    Candidates are tried in the order language, language-region,
    language-script. Returns None if the input cannot be expanded or no
    candidate round-trips.
    """
    if language is not None and script is not None and region is not None:
        maximal = (language, script, region)
    else:
        maximal = add_likely_subtags(language, script, region)
        if maximal is None:
            return None

    max_lang, max_script, max_region = maximal
    for trial in ((max_lang, None, None),
                  (max_lang, None, max_region),
                  (max_lang, max_script, None)):
        if add_likely_subtags(*trial) == maximal:
            return trial
    logger.debug("No reduction for %r", maximal)
    return None
