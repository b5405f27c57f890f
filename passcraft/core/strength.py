"""
passcraft Strength - Entropy estimation and qualitative labels.
"""

import math
import re
from dataclasses import dataclass
from typing import Dict, Union

import numpy as np

from passcraft.core.constants import BITS_PER_WORD, STRONG_FROM, WEAK_BELOW

# Alphabet size approximations per character class present in a secret.
# The "other" estimate is a fixed approximation, not the exact symbol count.
_CLASS_SIZES = (
    (re.compile(r'[a-z]'), 26),
    (re.compile(r'[A-Z]'), 26),
    (re.compile(r'[0-9]'), 10),
    (re.compile(r'[^A-Za-z0-9]'), 32),
)


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: int
    label: str
    level: str

    def as_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "label": self.label,
            "level": self.level,
            "entropyBits": self.entropy_bits,
        }


def categorize_strength(entropy_bits: int) -> StrengthReport:
    """Map entropy bits to Weak (<40), Okay (<60) or Strong."""
    if entropy_bits < WEAK_BELOW:
        label = "Weak"
    elif entropy_bits < STRONG_FROM:
        label = "Okay"
    else:
        label = "Strong"
    return StrengthReport(entropy_bits=entropy_bits, label=label, level=label.lower())


def alphabet_size(secret: str) -> int:
    """Approximate alphabet size from the character classes present."""
    return sum(size for pattern, size in _CLASS_SIZES if pattern.search(secret))


def estimate_password_strength(secret: str) -> StrengthReport:
    """
    Estimate strength from character composition.

    Entropy = floor(length * log2(alphabet size)); an empty secret has 0 bits.
    """
    size = alphabet_size(secret)
    entropy = int(math.floor(len(secret) * np.log2(size))) if size > 0 else 0
    return categorize_strength(entropy)


def estimate_passphrase_strength(word_count: int) -> StrengthReport:
    """
    Estimate strength from word count alone.

    Uses ~12.9 bits per word (7776-word list); capitalization, number and
    symbol decorations are not counted.
    """
    entropy = int(math.floor(max(word_count, 0) * BITS_PER_WORD))
    return categorize_strength(entropy)
