"""Case-insensitive string hash over base-36 chunks of letters and digits."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from functools import reduce

from hashboggle.mt19937 import MT19937

_GROUPS = 5
_CHUNK = 6
_MASK64 = (1 << 64) - 1

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(ch: str) -> int:
    """Map 'a'-'z' (any case) to 0-25 and '0'-'9' to 26-35; anything else to 0."""
    c = ch.lower() if ch.isascii() else ch
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    if "0" <= c <= "9":
        return 26 + ord(c) - ord("0")
    return 0


def _chunk_value(chunk: str) -> int:
    return reduce(lambda acc, ch: acc * 36 + letter_digit_to_number(ch), chunk, 0)


class StringHash:
    """Hash strings of up to 30 characters into a 64-bit value."""

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        weights = [0] * _GROUPS
        end = len(key)
        for group in range(_GROUPS - 1, -1, -1):
            if end <= 0:
                break
            start = max(0, end - _CHUNK)
            weights[group] = _chunk_value(key[start:end])
            end -= _CHUNK
        return sum(r * w for r, w in zip(self.r_values, weights)) & _MASK64

    def generate_r_values(self, seed: int | None = None) -> None:
        """Replace the multipliers with values from a seeded generator.

        Without a seed, the current time is used.
        """
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        gen = MT19937(seed)
        self.r_values = [gen() for _ in range(_GROUPS)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the debug-mode hash of the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())