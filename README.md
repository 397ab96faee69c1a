# hashboggle

A small collection of data-structure utilities:

- `hashboggle.mt19937.MT19937` is a 32-bit Mersenne Twister generator. For a
  given integer seed it produces the same sequence as a standard `mt19937`
  engine. Call the instance for the next value, or iterate over it for an
  endless stream.
- `hashboggle.strhash.StringHash` is a case-insensitive base-36 string hash.
  Letters map to 0-25, digits to 26-35 and any other character to 0. The key is
  split from the end into chunks of 6 characters, at most 5 chunks (so only the
  last 30 characters count), and each chunk is weighted by an "r" value. The
  result is reduced to 64 bits. `StringHash(debug=True)` uses fixed r values.
  `StringHash(debug=False)` draws them from a generator seeded with the current
  time. `generate_r_values(seed)` reseeds the r values explicitly.
  `letter_digit_to_number(ch)` exposes the character mapping.
- `hashboggle.hashtable.HashTable` is an open-addressing hash table. It grows
  through a fixed list of prime capacities once the load factor, counting
  tombstones, reaches `alpha` (0.4 by default). Deletion is lazy. Probing is
  pluggable: use `LinearProber` (the default) or `DoubleHashProber`, whose
  stride comes from a second hash (`StringHash` by default).
- `hashboggle.boggle` builds an n x n board from Scrabble letter frequencies.
  It then searches from every cell downward, rightward and down-right
  diagonally, and keeps the longest dictionary word found along each line.

## Installation

```
pip install .
pip install .[test]   # to run the test suite with pytest
```

## Library use

```python
from hashboggle.strhash import StringHash
from hashboggle.hashtable import HashTable, DoubleHashProber
from hashboggle.boggle import gen_board, format_board, parse_dict, boggle

h = StringHash(debug=True)
h("abc")                      # 9953503400

table = HashTable(0.7, DoubleHashProber(StringHash()))
table.insert("hi1", 1)
table["hi1"] += 1
table.find("hi1")             # ("hi1", 2)
"hi1" in table                # True
table.remove("hi1")
len(table)                    # 0
table.total_probes()          # number of slot probes made so far

board = gen_board(5, 42)
print(format_board(board))
words, prefixes = parse_dict("words.txt")
found = boggle(words, prefixes, board)
```

The table behaves as follows:

- `find()` returns `None` for a missing key.
- `at()` and indexing raise `KeyError` for a missing key.
- `remove()` ignores keys that are not present.
- `insert()` raises `RuntimeError` when no free slot is found, or when the
  table would have to grow past its largest capacity.
- `report_all(out)` writes each occupied bucket, tombstones included, to
  `out`, which defaults to standard output.

`parse_dict` returns the set of words together with the set of their strict
prefixes, plus the empty string. It raises `ValueError` when the dictionary
file cannot be opened.

## Commands

```
str-hash <string>                          # print h(<string>) using the debug r values
ht-demo                                    # short hash-table demonstration
boggle-driver <size> <seed> <dictionary>   # generate a board and list the words found
```

`str-hash` and `boggle-driver` print a usage line and exit with status 1 when
arguments are missing. The dictionary file is made of whitespace-separated
words. Boards use uppercase letters and matching is case-sensitive, so the
dictionary's words should be uppercase too.

## Limitations

- `HashTable` is not a full mapping. It has no iteration over keys or items
  and no `del table[key]`; use `remove()` instead.
- The Boggle search follows straight lines only, in three directions. It is
  not the usual search that can turn at every step and go in all eight
  directions.