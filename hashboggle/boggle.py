"""Boggle-style word search along rows, columns and diagonals."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from hashboggle.mt19937 import MT19937

# Scrabble tile frequencies for 'A' through 'Z'
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
_LETTERS = "".join(
    chr(ord("A") + i) * count for i, count in enumerate(_FREQUENCIES)
)
_DIRECTIONS = ((1, 0), (0, 1), (1, 1))

Board = list[list[str]]


def gen_board(n: int, seed: int) -> Board:
    """Generate an n x n board of letters drawn with Scrabble frequencies."""
    rng = MT19937(seed)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board with each letter right-aligned in two columns."""
    return "".join("".join(f"{ch:>2}" for ch in row) + "\n" for row in board)


def print_board(board: Sequence[Sequence[str]]) -> None:
    """Print the board to standard output."""
    sys.stdout.write(format_board(board))


def parse_dict(fname: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and their strict prefixes."""
    try:
        with open(fname, encoding="utf-8") as fh:
            words = fh.read().split()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    dictionary = set(words)
    prefix = {word[:i] for word in words for i in range(1, len(word))}
    prefix.add("")
    return dictionary, prefix


def _longest_word(
    dictionary: set[str] | frozenset[str],
    prefix: set[str] | frozenset[str],
    board: Sequence[Sequence[str]],
    r: int,
    c: int,
    dr: int,
    dc: int,
) -> str | None:
    n = len(board)
    word = ""
    best = None
    while r < n and c < n:
        word += board[r][c]
        if word in dictionary:
            best = word
        if word not in prefix:
            break
        r += dr
        c += dc
    return best


def boggle(
    dictionary: Iterable[str],
    prefix: Iterable[str],
    board: Sequence[Sequence[str]],
) -> set[str]:
    """Find the longest word starting at each cell going down, right or diagonally."""
    words = dictionary if isinstance(dictionary, (set, frozenset)) else set(dictionary)
    prefixes = prefix if isinstance(prefix, (set, frozenset)) else set(prefix)
    n = len(board)
    found = (
        _longest_word(words, prefixes, board, r, c, dr, dc)
        for r in range(n)
        for c in range(n)
        for dr, dc in _DIRECTIONS
    )
    return {word for word in found if word is not None}


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a board and list the dictionary words found on it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = int(args[0])
    seed = int(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefix = parse_dict(args[2])
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())