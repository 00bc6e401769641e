# stringkit

A small collection of string helpers for finding, counting, splitting and
cleaning up text. Everything lives in the `stringkit.strings` module. Python
strings are immutable, so every function returns a new value. A search that
finds nothing returns `-1`, in the style of `str.find`.

"Whitespace" throughout means the ASCII set of space, tab, newline, vertical
tab, form feed and carriage return. The set is available as
`stringkit.strings.WHITESPACE`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from stringkit.strings import (
    single_space, find_any, reverse, split_char, split_lines,
    find_nth, find_count_str, extract_substring_str, compare,
)

text = single_space("This \t is a \n test!  ")   # "This is a test!"
find_any(text, "!a")                              # 8
reverse(text)                                     # "!tset a si sihT"

split_char("This  is  a  test.", " ")             # ["This", "is", "a", "test."]
split_lines("one\n\rtwo\fthree")                  # ["one", "two", "three"]

find_nth("This is a test of the system!", "e", 2)          # 20  (idx is 1-based)
find_count_str("This is a test of the system!", "is")      # 2
extract_substring_str("The quick brown fox", "quick", 11)  # "quick brown"

compare("This is a test", "THIS IS A TEST", case_sensitive=False)  # 0
```

## What is included

Cleaning up text:

- `trim(s)` and `trim_count(s)`: `trim` strips leading and trailing
  whitespace; `trim_count` reports how many characters that removes.
- `standardize_whitespace(s, c)`: replace every whitespace character with `c`.
- `single_space(s)`: trim and collapse every run of whitespace to one space.
- `remove_unwanted_chars(s, unwanted)` and
  `replace_unwanted_chars(s, unwanted, c)`. When `unwanted` is `None` or empty,
  `s` comes back unchanged.
- `to_upper(s)`, `to_lower(s)` and `reverse(s)`.

Searching. Each search comes in three forms: for a single character, for a
substring (`_str`) and for any of a set of characters (`_any`).

- `find`, `find_str`, `find_any`: the first index.
- `find_reverse`, `find_str_reverse`, `find_any_reverse`: the last index.
- `find_count`, `find_count_str`, `find_count_any`: the number of matches.
- `find_nth`, `find_nth_str`, `find_nth_any`: the index of the `idx`-th match,
  counting from 1. An `idx` below 1 gives `-1`.
- `last_occurrence(s, sub)`: the tail of `s` from the last match of `sub`, or
  `None` when there is no match.

Substring matches in `find_str_reverse`, `find_count_str`, `find_nth_str` and
`last_occurrence` are counted from the left without overlap, so with a
self-overlapping `sub` the "last" match can differ from `str.rfind`.

Extracting and combining:

- `extract_substring(s, start, length)`: returns `None` when `start` is at or
  past the end of the string, and the rest of the string when `length` runs
  past the end.
- `extract_substring_str(s, sub, length)` and
  `extract_substring_char(s, c, length)`: the same, starting at the first
  match; `None` when there is no match.
- `concat(s1, s2)`.
- `compare(s1, s2, case_sensitive=True)`: returns `-1`, `0` or `1`. `None`
  sorts before every string, and two `None`s compare equal.

Splitting. Empty pieces are never kept.

- `split_char(s, c)`, `split_str(s, sub)` and `split_any(s, chars=None)`.
  `split_any` splits on whitespace when `chars` is `None`.
- `split_lines(s)`: splits on `\n`, `\r` and `\f`.

## Errors

`ValueError` is raised when:

- an argument that names a single character (`c`) is not exactly one
  character long;
- an empty `sub` is given to `split_str`, `last_occurrence`,
  `find_str_reverse`, `find_count_str` or `find_nth_str`;
- `extract_substring` is given a negative `start` or `length`.