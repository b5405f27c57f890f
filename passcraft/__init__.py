"""
passcraft - Secure password and passphrase generator.

This package produces random passwords and Diceware-style passphrases from the
system CSPRNG and estimates their brute-force resistance in bits of entropy.
"""

__version__ = "1.0.0"

from passcraft.core.entropy import SecureRandom, get_random_int, shuffle

from passcraft.core.errors import (
    PasscraftError,
    InvalidArgument,
    EmptySelection,
    LengthTooShort,
    SourceNotReady,
    AlreadyLoaded,
)

from passcraft.core.constants import CHARSETS, CharsetName, PASSPHRASE_SYMBOLS

from passcraft.core.generator import PasswordSpec, generate_password

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

from passcraft.core.params import GenerationOptions, parse_params, build_params

from passcraft.core.session import GeneratorSession, GenerationResult

__all__ = [
    # Version
    "__version__",
    # Randomness
    "SecureRandom",
    "get_random_int",
    "shuffle",
    # Errors
    "PasscraftError",
    "InvalidArgument",
    "EmptySelection",
    "LengthTooShort",
    "SourceNotReady",
    "AlreadyLoaded",
    # Constants
    "CHARSETS",
    "CharsetName",
    "PASSPHRASE_SYMBOLS",
    # Password
    "PasswordSpec",
    "generate_password",
    # Passphrase
    "WordSource",
    "PassphraseDraw",
    "PassphraseFormat",
    "PassphraseGenerator",
    "render_passphrase",
    # Strength
    "StrengthReport",
    "estimate_password_strength",
    "estimate_passphrase_strength",
    # Options
    "GenerationOptions",
    "parse_params",
    "build_params",
    # Session
    "GeneratorSession",
    "GenerationResult",
]
