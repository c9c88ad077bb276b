"""Languages written right-to-left, as packed CompactStr8 words.

Generated by scripts/generate_tables.py from CLDR 42 layout data.
Do not edit by hand.
"""

CHARACTER_DIRECTION_RTL = frozenset([
    29281,  # ar
    6450019,  # ckb
    24934,  # fa
    25960,  # he
    29547,  # ks
    6517356,  # lrc
    7240301,  # mzn
    29552,  # ps
    25715,  # sd
    26485,  # ug
    29301,  # ur
    27001,  # yi
])
