# boggleht

A small package with four parts:

- **Board search** (`boggleht.boggle`): builds a seeded square board of
  upper-case letters. The letter frequencies follow Scrabble tile counts. It
  then finds dictionary words that read in a straight line from any cell to the
  right, downward, or along the down-right diagonal.
- **String hash** (`boggleht.strhash`): a deterministic, case-insensitive hash
  for strings of up to 30 characters. The string is split from the end into
  6-character chunks. Each chunk is left-padded with `a` and read as a base-36
  number, where `a`–`z` count as 0–25 and `0`–`9` as 26–35. Any other character
  counts as 0. The chunk values are weighted by five multipliers, which are
  either fixed or random, and the result is reduced to 64 bits.
- **Hash table** (`boggleht.hashtable`, `boggleht.probing`): an open-addressing
  map with linear or double-hash probing. Removed entries stay in place as
  deleted markers. The table grows through a fixed list of prime capacities.
- **Random generator** (`boggleht.mt19937`): a 32-bit Mersenne Twister
  (`MT19937`). The board generator and the random hash multipliers draw from it.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

Generate a board and search it against a dictionary file. The file lists words
separated by whitespace:

```
boggle-driver 4 42 words.txt
```

The command prints the board with each letter in a two-character column. Then it
prints `Found N words:` and the words in sorted order, separated by commas. With
fewer than three arguments it prints a usage line and exits with status 1. If the
dictionary file cannot be opened, it reports the error on standard error and exits
with status 1.

Board letters are upper case and the lookup is case-sensitive, so the dictionary
words must be in upper case to match.

Hash a string with the fixed multipliers:

```
str-hash abc123
```

This prints `h(abc123)=473827885525100`.

Run a short demonstration of the hash table with double hashing:

```
ht-demo
```

Each module can also be run with `python -m`, for example
`python -m boggleht.boggle 4 42 words.txt`.

## Library use

```python
from boggleht.boggle import gen_board, format_board, parse_dict, boggle
from boggleht.strhash import StringHash
from boggleht.probing import DoubleHashProber
from boggleht.hashtable import HashTable

board = gen_board(5, 7)
print(format_board(board), end="")
words, prefixes = parse_dict("words.txt")
print(sorted(boggle(words, prefixes, board)))

h = StringHash(debug=True)
assert h("abc") == 9953503400
assert h("ABC") == h("abc")

table = HashTable(0.7, DoubleHashProber(StringHash()))
table.insert("hi1", 1)
table["hi1"] += 1
print(table.at("hi1"), len(table), "hi1" in table)
table.remove("hi1")
```

Notes on behaviour:

- `parse_dict` returns the set of words, and a set of prefixes that holds every
  proper non-empty prefix of every word plus the empty string. It raises
  `ValueError` if the file cannot be opened.
- `boggle` keeps only the longest dictionary word met from each starting cell in
  each direction. The walk stops as soon as the letters read so far stop being a
  prefix.
- `StringHash(debug=False)` draws its multipliers from a generator seeded from
  the clock. Keys longer than 30 characters raise `ValueError`. The five chunk
  values are logged at `DEBUG` level.
- `HashTable.at` and indexing raise `KeyError` for a missing key. `find` returns
  the `(key, value)` pair, or `None` if the key is not there. `insert` raises
  `RuntimeError` when no free slot can be found or no larger capacity is left.
  `total_probes()` counts probe attempts, and `clear_total_probes()` resets the
  count. `report_all()` writes every occupied bucket, deleted markers included,
  to standard output or to a given stream.
- `LinearProber` and `DoubleHashProber` can be iterated after `init` and yield
  slot indices until they have made as many attempts as the table has slots.
  Calling `next()` after that raises `ProbingExhausted`.

## What it does not do

- The board search follows straight lines only: right, down and down-right. It
  does not search the paths of adjacent cells that a full Boggle solver would
  follow, and there is no interactive game, timer or scoring.
- `HashTable` supports insert, lookup, membership, removal and `len`. It cannot
  be iterated and has no `del table[key]`. Use `remove` instead.