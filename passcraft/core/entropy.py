"""
passcraft Entropy - Cryptographically secure uniform integers and shuffling.

Every random choice in passcraft goes through a SecureRandom instance. Raw
material comes from the system CSPRNG (secrets.token_bytes) in pooled blocks
of 32-bit words, and each draw uses rejection sampling so that no value in
the requested range is favoured.

Pools are per process: a forked child drops every pool it inherited and
fetches fresh words on its next draw.
"""

import os
import secrets
import threading
import weakref
from typing import List, Optional, Sequence, TypeVar

import numpy as np

from passcraft.core.errors import InvalidArgument
from passcraft.core.log import get_logger
from passcraft.core.security import secure_zero

logger = get_logger('entropy')

T = TypeVar('T')

WORD_SPACE = 1 << 32
DEFAULT_BLOCK_WORDS = 64

_live_sources: "weakref.WeakSet[SecureRandom]" = weakref.WeakSet()


class SecureRandom:
    """
    Uniform integer source backed by the system CSPRNG.

    Words are fetched DEFAULT_BLOCK_WORDS at a time and consumed in order.
    A spent block is wiped before the next one is fetched. Draws are
    serialized by a per-instance lock, so one source can be shared between
    threads.
    """

    def __init__(self, block_words: int = DEFAULT_BLOCK_WORDS):
        if block_words <= 0:
            raise InvalidArgument(f"block_words must be positive, got {block_words}")
        self._block_words = block_words
        self._pool: Optional[np.ndarray] = None
        self._pos = 0
        self._lock = threading.Lock()
        _live_sources.add(self)

    def _refill(self) -> None:
        # caller holds self._lock
        secure_zero(self._pool)
        raw = bytearray(secrets.token_bytes(4 * self._block_words))
        self._pool = np.frombuffer(raw, dtype='<u4').copy()
        secure_zero(raw)
        self._pos = 0
        logger.debug("Refilled random pool with %d words", self._block_words)

    def _discard_pool(self) -> None:
        secure_zero(self._pool)
        self._pool = None
        self._pos = 0

    def next_word(self) -> int:
        """Return the next raw 32-bit word from the pool."""
        with self._lock:
            if self._pool is None or self._pos >= len(self._pool):
                self._refill()
            value = int(self._pool[self._pos])
            self._pool[self._pos] = 0
            self._pos += 1
            return value

    def uniform_int(self, max_exclusive: int) -> int:
        """
        Draw an integer uniformly from [0, max_exclusive).

        Args:
            max_exclusive: Upper bound (exclusive), 1 <= max_exclusive <= 2**32

        Returns:
            Random integer in range

        Raises:
            InvalidArgument: If max_exclusive is not a positive int within bounds
        """
        if isinstance(max_exclusive, bool) or not isinstance(max_exclusive, int):
            raise InvalidArgument(f"max_exclusive must be an int, got {max_exclusive!r}")
        if max_exclusive <= 0 or max_exclusive > WORD_SPACE:
            raise InvalidArgument(
                f"max_exclusive must be in [1, 2**32], got {max_exclusive}"
            )

        # Rejection sampling: only accept words below the largest multiple
        threshold = (WORD_SPACE // max_exclusive) * max_exclusive
        while True:
            value = self.next_word()
            if value < threshold:
                return value % max_exclusive

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence uniformly."""
        return seq[self.uniform_int(len(seq))]

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """
        Fisher-Yates shuffle returning a new list; the input is not mutated.
        """
        items = list(seq)
        for i in range(len(items) - 1, 0, -1):
            j = self.uniform_int(i + 1)
            items[i], items[j] = items[j], items[i]
        return items

    def close(self) -> None:
        """Wipe any unread words left in the pool."""
        with self._lock:
            self._discard_pool()


def _reset_after_fork() -> None:
    # inherited pools hold the same unread words as the parent
    for source in list(_live_sources):
        # a lock held by another parent thread at fork time is never released here
        source._lock = threading.Lock()
        source._discard_pool()


if hasattr(os, "register_at_fork"):
    os.register_at_fork(after_in_child=_reset_after_fork)


# =============================================================================
# Module-level default source
# =============================================================================

_default_source = SecureRandom()


def default_source() -> SecureRandom:
    """Return the process-wide SecureRandom instance."""
    return _default_source


def get_random_int(max_exclusive: int) -> int:
    """Draw from [0, max_exclusive) using the default source."""
    return _default_source.uniform_int(max_exclusive)


def shuffle(seq: Sequence[T]) -> List[T]:
    """Shuffle a copy of seq using the default source."""
    return _default_source.shuffle(seq)
