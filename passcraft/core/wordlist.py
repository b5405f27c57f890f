"""
passcraft Wordlist - Externally supplied Diceware-style word list.

The list is loaded once from a line-delimited text file (one word per line,
optionally prefixed by Diceware dice digits such as "11111<TAB>abacus") and is
immutable afterwards; a second load raises AlreadyLoaded. Every word is
assumed equally likely to be drawn.
"""

import math
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

from passcraft.core.entropy import SecureRandom, default_source
from passcraft.core.errors import AlreadyLoaded, SourceNotReady
from passcraft.core.log import get_logger

logger = get_logger('wordlist')


def parse_wordlist(text: str) -> Tuple[str, ...]:
    """
    Parse word list text into an ordered tuple of words.

    Lines are trimmed and blank lines skipped. A line made of a dice number
    followed by a single word keeps only the word.
    """
    words = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) == 2 and parts[0].isdigit():
            line = parts[1]
        words.append(line)
    return tuple(words)


class WordSource:
    """Immutable ordered word list with uniform random draws."""

    def __init__(self, words: Optional[Iterable[str]] = None,
                 rng: Optional[SecureRandom] = None):
        self._rng = rng or default_source()
        self._words: Tuple[str, ...] = ()
        if words is not None:
            self._set_words(tuple(w.strip() for w in words if w.strip()), "<memory>")

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  rng: Optional[SecureRandom] = None) -> "WordSource":
        """Create a WordSource and load it from path."""
        source = cls(rng=rng)
        source.load(path)
        return source

    def _check_unloaded(self) -> None:
        if self._words:
            raise AlreadyLoaded(f"Word list already loaded ({len(self._words)} words)")

    def _set_words(self, words: Tuple[str, ...], origin: str) -> None:
        if not words:
            raise SourceNotReady(f"Word list is empty: {origin}")
        self._words = words
        logger.info("Loaded %d words from %s", len(words), origin)

    def load(self, path: Union[str, Path]) -> None:
        """
        Load the word list from a text file.

        Raises:
            SourceNotReady: If the file cannot be read or holds no words
            AlreadyLoaded: If a word list is already loaded
        """
        self._check_unloaded()
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise SourceNotReady(f"Failed to load word list {path}: {e}") from e
        self._set_words(parse_wordlist(text), str(path))

    def load_text(self, text: str) -> None:
        """Load the word list from already-read text."""
        self._check_unloaded()
        self._set_words(parse_wordlist(text), "<text>")

    @property
    def is_loaded(self) -> bool:
        return len(self._words) > 0

    @property
    def words(self) -> Sequence[str]:
        return self._words

    @property
    def bits_per_word(self) -> float:
        """log2 of the list size; 0.0 before loading."""
        return math.log2(len(self._words)) if self._words else 0.0

    def __len__(self) -> int:
        return len(self._words)

    def random_word(self) -> str:
        """
        Draw one word uniformly.

        Raises:
            SourceNotReady: If the list has not been loaded
        """
        if not self._words:
            raise SourceNotReady("Word list not loaded")
        return self._rng.choice(self._words)
