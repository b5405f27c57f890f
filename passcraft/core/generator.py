# -*- coding: utf-8 -*-
"""
passcraft Generator - Password generation with per-class minimum presence.
"""

from dataclasses import dataclass
from typing import List, Optional

from passcraft.core.constants import CHARSETS, CharsetName
from passcraft.core.entropy import SecureRandom, default_source
from passcraft.core.errors import EmptySelection, LengthTooShort
from passcraft.core.log import get_logger

logger = get_logger('generator')


@dataclass(frozen=True)
class PasswordSpec:
    """
    Requested password shape.

    Clamping of `length` to the request range happens where requests are
    decoded (params, CLI); the generator only checks it against the number
    of selected classes.
    """
    length: int = 16
    use_lower: bool = False
    use_upper: bool = False
    use_numbers: bool = False
    use_simple_symbols: bool = False
    use_all_symbols: bool = False

    def classes(self) -> List[CharsetName]:
        """Selected classes in selection order; all_symbols wins over simple_symbols."""
        selected: List[CharsetName] = []
        if self.use_lower:
            selected.append("lower")
        if self.use_upper:
            selected.append("upper")
        if self.use_numbers:
            selected.append("numbers")
        if self.use_all_symbols:
            selected.append("all_symbols")
        elif self.use_simple_symbols:
            selected.append("simple_symbols")
        return selected


def password_pool(spec: PasswordSpec) -> str:
    """Concatenation of all selected character classes."""
    return ''.join(CHARSETS[name] for name in spec.classes())


def generate_password(spec: PasswordSpec, rng: Optional[SecureRandom] = None) -> str:
    """
    Generate a password containing at least one character of every selected class.

    One character is drawn from each class, the remaining positions are
    drawn from the full pool, and the result is shuffled so the guaranteed
    characters do not sit at fixed positions.

    Args:
        spec: Requested length and character classes
        rng: Random source (defaults to the process-wide SecureRandom)

    Returns:
        Generated password string

    Raises:
        EmptySelection: If no character class is selected
        LengthTooShort: If length is smaller than the number of classes
    """
    rng = rng or default_source()
    classes = spec.classes()
    pool = password_pool(spec)

    if not pool:
        raise EmptySelection()

    if spec.length < len(classes):
        raise LengthTooShort(len(classes))

    logger.debug("Generating password: length=%d classes=%s", spec.length, ','.join(classes))

    password: List[str] = []
    for name in classes:
        password.append(rng.choice(CHARSETS[name]))

    for _ in range(len(classes), spec.length):
        password.append(rng.choice(pool))

    return ''.join(rng.shuffle(password))
