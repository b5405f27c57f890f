# -*- coding: utf-8 -*-
"""
passcraft Passphrase - Word draws and decoration rendering.

Generation is split in two phases:

- draw: pick the words, one decoration number and one decoration symbol,
  and store them as a PassphraseDraw owned by the PassphraseGenerator.
- render: turn a stored draw plus a PassphraseFormat into the final string.

Formatting changes (separator, capitalization, insertion settings) only
re-render; they never consume new words.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from passcraft.core.constants import (
    CAPITALIZE_POSITIONS,
    INSERT_POSITIONS,
    PASSPHRASE_NUMBER_RANGE,
    PASSPHRASE_SYMBOLS,
    PASSPHRASE_WORDS_RANGE,
    SEPARATOR_SENTINELS,
    WORD_SELECTORS,
    CapitalizePosition,
    InsertPosition,
    WordSelector,
)
from passcraft.core.entropy import SecureRandom, default_source
from passcraft.core.errors import InvalidArgument, SourceNotReady
from passcraft.core.log import get_logger
from passcraft.core.wordlist import WordSource

logger = get_logger('passphrase')


@dataclass
class PassphraseDraw:
    """Stored random choices behind one passphrase."""
    words: List[str] = field(default_factory=list)
    number: int = 0
    symbol: str = PASSPHRASE_SYMBOLS[0]


@dataclass(frozen=True)
class PassphraseFormat:
    """Formatting options applied at render time."""
    separator: str = "."
    capitalize: bool = False
    capitalize_position: CapitalizePosition = "all"
    add_number: bool = False
    number_position: InsertPosition = "random"
    number_word: WordSelector = "random"
    add_symbol: bool = False
    symbol_position: InsertPosition = "random"
    symbol_word: WordSelector = "random"

    def __post_init__(self):
        _check_choice("capitalize_position", self.capitalize_position, CAPITALIZE_POSITIONS)
        _check_choice("number_position", self.number_position, INSERT_POSITIONS)
        _check_choice("number_word", self.number_word, WORD_SELECTORS)
        _check_choice("symbol_position", self.symbol_position, INSERT_POSITIONS)
        _check_choice("symbol_word", self.symbol_word, WORD_SELECTORS)

    @property
    def resolved_separator(self) -> str:
        """Separator with the 'space' and 'none' sentinels resolved."""
        return SEPARATOR_SENTINELS.get(self.separator, self.separator)


def _check_choice(name: str, value: str, allowed) -> None:
    if value not in allowed:
        raise InvalidArgument(f"{name} must be one of {', '.join(allowed)}, got {value!r}")


def _check_word_count(count: int) -> None:
    low, high = PASSPHRASE_WORDS_RANGE
    if isinstance(count, bool) or not isinstance(count, int) or not low <= count <= high:
        raise InvalidArgument(f"Word count must be in [{low}, {high}], got {count!r}")


def _select_indices(count: int, selector: WordSelector, rng: SecureRandom) -> List[int]:
    if selector == "first":
        return [0]
    if selector == "last":
        return [count - 1]
    if selector == "all":
        return list(range(count))
    # random word, re-picked on every render
    return [rng.uniform_int(count)]


def _insert_extra(words: List[str], extra: str, position: InsertPosition,
                  selector: WordSelector, rng: SecureRandom) -> List[str]:
    result = list(words)
    for i in _select_indices(len(result), selector, rng):
        if position == "start":
            result[i] = extra + result[i]
        else:
            result[i] = result[i] + extra
    return result


def render_passphrase(draw: PassphraseDraw, fmt: PassphraseFormat,
                      rng: Optional[SecureRandom] = None) -> str:
    """
    Render a stored draw with the given format.

    Args:
        draw: Words, number and symbol to render
        fmt: Formatting options
        rng: Random source, consulted only for the 'random' word selector

    Returns:
        Final passphrase string

    Raises:
        SourceNotReady: If the draw holds no words
    """
    if not draw.words:
        raise SourceNotReady("No passphrase drawn yet")

    rng = rng or default_source()
    last = len(draw.words) - 1

    words = []
    for i, word in enumerate(draw.words):
        if fmt.capitalize and (
            fmt.capitalize_position == "all"
            or (fmt.capitalize_position == "first" and i == 0)
            or (fmt.capitalize_position == "last" and i == last)
        ):
            word = word[:1].upper() + word[1:]
        words.append(word)

    suffix = ''

    if fmt.add_number:
        number = str(draw.number)
        if fmt.number_position == "random":
            suffix += number
        else:
            words = _insert_extra(words, number, fmt.number_position, fmt.number_word, rng)

    if fmt.add_symbol:
        if fmt.symbol_position == "random":
            suffix += draw.symbol
        else:
            words = _insert_extra(words, draw.symbol, fmt.symbol_position, fmt.symbol_word, rng)

    return fmt.resolved_separator.join(words) + suffix


class PassphraseGenerator:
    """
    Owns the current PassphraseDraw for one generation session.

    Not meant to be shared between concurrent callers; create one generator
    per session.
    """

    def __init__(self, word_source: WordSource, rng: Optional[SecureRandom] = None):
        self.word_source = word_source
        self.rng = rng or default_source()
        self.current: Optional[PassphraseDraw] = None

    def _draw_words(self, count: int) -> List[str]:
        return [self.word_source.random_word() for _ in range(count)]

    def draw(self, word_count: int) -> PassphraseDraw:
        """
        Draw fresh words, number and symbol, replacing the current draw.

        The current draw is only replaced once every random choice succeeded.

        Raises:
            InvalidArgument: If word_count is outside [1, 12]
            SourceNotReady: If the word list is not loaded
        """
        _check_word_count(word_count)
        words = self._draw_words(word_count)
        number = self.rng.uniform_int(PASSPHRASE_NUMBER_RANGE)
        symbol = self.rng.choice(PASSPHRASE_SYMBOLS)

        self.current = PassphraseDraw(words=words, number=number, symbol=symbol)
        logger.debug("Drew passphrase with %d words", word_count)
        return self.current

    def adjust_word_count(self, target: int) -> PassphraseDraw:
        """
        Grow or truncate the current draw to `target` words.

        Existing words keep their positions; growth appends fresh words and
        truncation keeps the first `target` words. Number and symbol are
        kept. Without a current draw this performs a fresh draw.
        """
        _check_word_count(target)
        if self.current is None:
            return self.draw(target)

        words = list(self.current.words)
        if len(words) < target:
            words.extend(self._draw_words(target - len(words)))
        elif len(words) > target:
            words = words[:target]

        self.current = PassphraseDraw(
            words=words, number=self.current.number, symbol=self.current.symbol
        )
        return self.current

    def render(self, fmt: PassphraseFormat, draw: Optional[PassphraseDraw] = None) -> str:
        """Render `draw`, or the current draw when omitted."""
        draw = draw if draw is not None else self.current
        if draw is None:
            raise SourceNotReady("No passphrase drawn yet")
        return render_passphrase(draw, fmt, self.rng)

    def generate(self, word_count: int, fmt: PassphraseFormat) -> str:
        """Draw a new passphrase and render it."""
        return self.render(fmt, self.draw(word_count))
