"""
passcraft Core - Secure randomness, password/passphrase generation and strength estimation.
"""

from passcraft.core.entropy import SecureRandom, get_random_int, shuffle

from passcraft.core.errors import (
    PasscraftError,
    InvalidArgument,
    EmptySelection,
    LengthTooShort,
    SourceNotReady,
    AlreadyLoaded,
)

from passcraft.core.generator import PasswordSpec, generate_password, password_pool

from passcraft.core.wordlist import WordSource

from passcraft.core.passphrase import (
    PassphraseDraw,
    PassphraseFormat,
    PassphraseGenerator,
    render_passphrase,
)

from passcraft.core.strength import (
    StrengthReport,
    estimate_password_strength,
    estimate_passphrase_strength,
)

__all__ = [
    "SecureRandom",
    "get_random_int",
    "shuffle",
    "PasscraftError",
    "InvalidArgument",
    "EmptySelection",
    "LengthTooShort",
    "SourceNotReady",
    "AlreadyLoaded",
    "PasswordSpec",
    "generate_password",
    "password_pool",
    "WordSource",
    "PassphraseDraw",
    "PassphraseFormat",
    "PassphraseGenerator",
    "render_passphrase",
    "StrengthReport",
    "estimate_password_strength",
    "estimate_passphrase_strength",
]
