# -*- coding: utf-8 -*-
"""
passcraft Constants - Character classes, passphrase symbols and limits.
"""

import string
from typing import Dict, Literal, Tuple

# Character classes, each an ordered string of distinct characters
CharsetName = Literal["lower", "upper", "numbers", "simple_symbols", "all_symbols"]

LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
NUMBERS = string.digits

# Excludes quotes, backslash, backtick, wildcards and shell/regex specials
SIMPLE_SYMBOLS = "!@#$%^&()-_=+[]{}:;,.?"

# Full printable ASCII punctuation
ALL_SYMBOLS = "!@#$%^&*()-_=+[]{}|;:'\",.<>?/`~\\"

CHARSETS: Dict[str, str] = {
    "lower": LOWER,
    "upper": UPPER,
    "numbers": NUMBERS,
    "simple_symbols": SIMPLE_SYMBOLS,
    "all_symbols": ALL_SYMBOLS,
}

# Passphrase decoration
PASSPHRASE_SYMBOLS = "!@#$%^&*"
PASSPHRASE_NUMBER_RANGE = 100

# EFF large wordlist: 7776 words = 6^5, log2(7776) ~ 12.925
BITS_PER_WORD = 12.9

# Request limits
PASSWORD_LENGTH_RANGE: Tuple[int, int] = (8, 128)
PASSPHRASE_WORDS_RANGE: Tuple[int, int] = (1, 12)

# Passphrase format vocabularies
SEPARATOR_SENTINELS = {"space": " ", "none": ""}
CAPITALIZE_POSITIONS = ("first", "last", "all")
INSERT_POSITIONS = ("start", "end", "random")
WORD_SELECTORS = ("first", "last", "all", "random")

CapitalizePosition = Literal["first", "last", "all"]
InsertPosition = Literal["start", "end", "random"]
WordSelector = Literal["first", "last", "all", "random"]

# Strength thresholds (entropy bits)
WEAK_BELOW = 40
STRONG_FROM = 60
