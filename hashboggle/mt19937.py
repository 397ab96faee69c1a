"""32-bit Mersenne Twister generator with the standard integer seeding."""

from __future__ import annotations

from collections.abc import Iterator

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF

DEFAULT_SEED = 5489


class MT19937:
    """Mersenne Twister producing 32-bit unsigned integers.

    Seeding follows the single-integer initialisation, so a given seed yields
    the same sequence as any conforming mt19937 engine.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = [seed & _MASK32]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for i in range(_N):
            y = (state[i] & _UPPER_MASK) | (state[(i + 1) % _N] & _LOWER_MASK)
            value = state[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        """Return the next 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def __iter__(self) -> Iterator[int]:
        """Yield outputs indefinitely."""
        while True:
            yield self()