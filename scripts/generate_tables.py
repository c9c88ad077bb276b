#!/usr/bin/env python3
"""Regenerate the static CLDR data modules from cldr-json.

Writes:
    src/langident/likely/tables.py         from cldr-core/supplemental/likelySubtags.json
    src/langident/model/layout_table.py    from cldr-misc-full/main/*/layout.json

Usage:
    python3 scripts/generate_tables.py --likely path/to/likelySubtags.json \
        --layout-dir path/to/cldr-misc-full/main
"""

import argparse
import glob
import json
import os
import sys

from langident.core.compact_str import CompactStr8

SRC_DIR = os.path.join(os.path.dirname(__file__), "..", "src", "langident")
TABLES_PATH = os.path.join(SRC_DIR, "likely", "tables.py")
LAYOUT_PATH = os.path.join(SRC_DIR, "model", "layout_table.py")


def likely_entries(data):
    """Return (cldr_version, sorted [(key, value), ...]) from likelySubtags.json."""
    supplemental = data["supplemental"]
    version = supplemental["version"]["_cldrVersion"]
    entries = sorted(
        (key.replace("_", "-"), value.replace("_", "-"))
        for key, value in supplemental["likelySubtags"].items())
    return version, entries


def rtl_languages(layouts):
    """Return sorted language codes whose character order is right-to-left.

    ``layouts`` maps a locale name to its parsed layout.json. Only bare
    language locales ("ar", not "ar-EG") are considered.
    """
    languages = []
    for locale, data in layouts.items():
        if "-" in locale or locale == "root":
            continue
        order = data["main"][locale]["layout"]["orientation"]["characterOrder"]
        if order == "right-to-left":
            languages.append(locale)
    return sorted(languages)


def render_tables(version, entries):
    lines = [
        '"""CLDR likely subtags data.',
        "",
        "Generated by scripts/generate_tables.py from CLDR likelySubtags.json.",
        "Do not edit by hand.",
        "",
        "Each entry maps an under-specified identifier to its most likely full",
        'form. "und" stands for no language and region "ZZ" for unknown region.',
        "Entries are sorted by key.",
        '"""',
        "",
        f'CLDR_VERSION = "{version}"',
        "",
        "LIKELY_SUBTAGS = (",
    ]
    lines.extend(f'    ("{key}", "{value}"),' for key, value in entries)
    lines.append(")")
    return "\n".join(lines) + "\n"


def render_layout(version, languages):
    lines = [
        '"""Languages written right-to-left, as packed CompactStr8 words.',
        "",
        f"Generated by scripts/generate_tables.py from CLDR {version} layout data.",
        "Do not edit by hand.",
        '"""',
        "",
        "CHARACTER_DIRECTION_RTL = frozenset([",
    ]
    lines.extend(
        f"    {int(CompactStr8.parse(lang))},  # {lang}" for lang in languages)
    lines.append("])")
    return "\n".join(lines) + "\n"


def load_layouts(layout_dir):
    layouts = {}
    for path in glob.glob(os.path.join(layout_dir, "*", "layout.json")):
        locale = os.path.basename(os.path.dirname(path))
        with open(path, encoding="utf-8") as f:
            layouts[locale] = json.load(f)
    return layouts


def main():
    parser = argparse.ArgumentParser(description="Regenerate CLDR data modules")
    parser.add_argument("--likely", required=True,
                        help="Path to likelySubtags.json")
    parser.add_argument("--layout-dir",
                        help="Path to cldr-misc-full/main (skip layout if omitted)")
    args = parser.parse_args()

    with open(args.likely, encoding="utf-8") as f:
        version, entries = likely_entries(json.load(f))
    with open(TABLES_PATH, "w", encoding="utf-8") as f:
        f.write(render_tables(version, entries))
    print(f"Wrote {len(entries)} likely subtags entries (CLDR {version})")

    if args.layout_dir:
        languages = rtl_languages(load_layouts(args.layout_dir))
        if not languages:
            print("ERROR: no layout data found", file=sys.stderr)
            sys.exit(1)
        with open(LAYOUT_PATH, "w", encoding="utf-8") as f:
            f.write(render_layout(version, languages))
        print(f"Wrote {len(languages)} right-to-left languages")


if __name__ == "__main__":
    main()
