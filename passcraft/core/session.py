"""
passcraft Session - One generation context owning its passphrase draw.

A session remembers the last secret it produced. A failed generation leaves
that secret and its strength report untouched.
"""

from dataclasses import dataclass
from typing import Optional

from passcraft.core.entropy import SecureRandom, default_source
from passcraft.core.errors import SourceNotReady
from passcraft.core.generator import generate_password
from passcraft.core.log import get_logger
from passcraft.core.params import GenerationOptions
from passcraft.core.passphrase import PassphraseFormat, PassphraseGenerator
from passcraft.core.strength import (
    StrengthReport,
    estimate_passphrase_strength,
    estimate_password_strength,
)
from passcraft.core.wordlist import WordSource

logger = get_logger('session')


@dataclass(frozen=True)
class GenerationResult:
    secret: str
    strength: StrengthReport

    @property
    def feedback(self) -> str:
        return f"Strength: {self.strength.label} ({self.strength.entropy_bits} bits)"


class GeneratorSession:
    """Generation context for a single caller."""

    def __init__(self, word_source: Optional[WordSource] = None,
                 rng: Optional[SecureRandom] = None):
        self.rng = rng or default_source()
        self.word_source = word_source
        self._passphrase: Optional[PassphraseGenerator] = None
        self.last: Optional[GenerationResult] = None

    @property
    def passphrase(self) -> PassphraseGenerator:
        """Passphrase generator bound to this session's word source."""
        if self.word_source is None:
            raise SourceNotReady("No word list configured for passphrase generation")
        if self._passphrase is None:
            self._passphrase = PassphraseGenerator(self.word_source, self.rng)
        return self._passphrase

    def generate(self, options: GenerationOptions) -> GenerationResult:
        """
        Produce a new secret for the options' mode.

        Raises:
            PasscraftError: On invalid selections or a missing word list; the
                previous result stays in place.
        """
        if options.mode == "passphrase":
            secret = self.passphrase.generate(options.words, options.format)
            strength = estimate_passphrase_strength(options.words)
        else:
            secret = generate_password(options.password, self.rng)
            strength = estimate_password_strength(secret)

        self.last = GenerationResult(secret=secret, strength=strength)
        logger.debug("Generated %s (%d bits)", options.mode, strength.entropy_bits)
        return self.last

    def update_passphrase(self, words: int, fmt: PassphraseFormat) -> Optional[GenerationResult]:
        """
        Re-render the current passphrase after a word count or format change.

        Words already drawn are kept. Returns None when nothing has been
        drawn yet.
        """
        if self._passphrase is None or self._passphrase.current is None:
            return None

        self._passphrase.adjust_word_count(words)
        secret = self._passphrase.render(fmt)
        self.last = GenerationResult(secret=secret, strength=estimate_passphrase_strength(words))
        return self.last

    @staticmethod
    def check(secret: str) -> StrengthReport:
        """Strength of an arbitrary (e.g. hand-edited) secret."""
        return estimate_password_strength(secret.strip())
