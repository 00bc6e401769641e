"""Common string helpers: trimming, searching, extracting and splitting.

Whitespace means the classic ASCII set (space, tab, newline, vertical
tab, form feed and carriage return). Searches return -1 when nothing is
found. Functions that extract a piece of text return None when there is
nothing to extract.
"""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator

__all__ = [
    "WHITESPACE",
    "reverse",
    "trim",
    "trim_count",
    "standardize_whitespace",
    "remove_unwanted_chars",
    "replace_unwanted_chars",
    "to_upper",
    "to_lower",
    "find",
    "find_reverse",
    "find_count",
    "find_nth",
    "find_str",
    "last_occurrence",
    "find_str_reverse",
    "find_count_str",
    "find_nth_str",
    "find_any",
    "find_any_reverse",
    "find_count_any",
    "find_nth_any",
    "concat",
    "compare",
    "extract_substring",
    "extract_substring_str",
    "extract_substring_char",
    "split_char",
    "split_str",
    "split_any",
    "split_lines",
    "single_space",
]

WHITESPACE = " \n\r\f\v\t"
_LINE_BREAKS = "\n\r\f"
_WHITESPACE_RUN = re.compile(r"[ \t\n\v\f\r]+")


def _check_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_sub(sub: str) -> str:
    if not sub:
        raise ValueError("substring must not be empty")
    return sub


def _char_positions(s: str, chars: str) -> Iterator[int]:
    """Yield every index of s holding one of chars."""
    wanted = set(chars)
    return (i for i, ch in enumerate(s) if ch in wanted)


def _str_positions(s: str, sub: str) -> Iterator[int]:
    """Yield the start of each non-overlapping occurrence of sub, left to right."""
    _check_sub(sub)
    pos = s.find(sub)
    while pos != -1:
        yield pos
        pos = s.find(sub, pos + len(sub))


def _nth(positions: Iterator[int], idx: int) -> int:
    """Return the idx-th (1-based) position, or -1."""
    if idx < 1:
        return -1
    for count, pos in enumerate(positions, start=1):
        if count == idx:
            return pos
    return -1


def _last(positions: Iterator[int]) -> int:
    """Return the final position produced, or -1 if there is none."""
    tail = deque(positions, maxlen=1)
    return tail[0] if tail else -1


def reverse(s: str) -> str:
    """Return s reversed."""
    return s[::-1]


def trim(s: str) -> str:
    """Return s without leading and trailing whitespace."""
    return s.strip(WHITESPACE)


def trim_count(s: str) -> int:
    """Return how many characters trim() removes from s."""
    return len(s) - len(trim(s))


def standardize_whitespace(s: str, c: str) -> str:
    """Replace every whitespace character in s with c."""
    _check_char(c)
    return s.translate({ord(ws): c for ws in WHITESPACE})


def remove_unwanted_chars(s: str, unwanted: str | None) -> str:
    """Drop every character of s that appears in unwanted."""
    if not unwanted:
        return s
    return s.translate({ord(ch): None for ch in unwanted})


def replace_unwanted_chars(s: str, unwanted: str | None, c: str) -> str:
    """Replace every character of s that appears in unwanted with c."""
    _check_char(c)
    if not unwanted:
        return s
    return s.translate({ord(ch): c for ch in unwanted})


def to_upper(s: str) -> str:
    """Return s in upper case."""
    return s.upper()


def to_lower(s: str) -> str:
    """Return s in lower case."""
    return s.lower()


def find(s: str, c: str) -> int:
    """Index of the first c in s, or -1."""
    return s.find(_check_char(c))


def find_reverse(s: str, c: str) -> int:
    """Index of the last c in s, or -1."""
    return s.rfind(_check_char(c))


def find_count(s: str, c: str) -> int:
    """Number of times c appears in s."""
    return s.count(_check_char(c))


def find_nth(s: str, c: str, idx: int) -> int:
    """Index of the idx-th (1-based) c in s, or -1."""
    return _nth(_char_positions(s, _check_char(c)), idx)


def find_str(s: str, sub: str) -> int:
    """Index of the first occurrence of sub in s, or -1."""
    return s.find(sub)


def last_occurrence(s: str, sub: str) -> str | None:
    """Return the tail of s starting at the last occurrence of sub.

    Occurrences are counted without overlap from the left, so the result
    may differ from a plain right-to-left search when sub overlaps itself.
    """
    pos = _last(_str_positions(s, sub))
    return None if pos == -1 else s[pos:]


def find_str_reverse(s: str, sub: str) -> int:
    """Index of the last non-overlapping occurrence of sub in s, or -1."""
    return _last(_str_positions(s, sub))


def find_count_str(s: str, sub: str) -> int:
    """Number of non-overlapping occurrences of sub in s."""
    return sum(1 for _ in _str_positions(s, sub))


def find_nth_str(s: str, sub: str, idx: int) -> int:
    """Index of the idx-th (1-based) non-overlapping occurrence of sub, or -1."""
    return _nth(_str_positions(s, sub), idx)


def find_any(s: str, chars: str) -> int:
    """Index of the first character of s found in chars, or -1."""
    return next(_char_positions(s, chars), -1)


def find_any_reverse(s: str, chars: str) -> int:
    """Index of the last character of s found in chars, or -1."""
    return _last(_char_positions(s, chars))


def find_count_any(s: str, chars: str) -> int:
    """Number of characters of s found in chars."""
    return sum(1 for _ in _char_positions(s, chars))


def find_nth_any(s: str, chars: str, idx: int) -> int:
    """Index of the idx-th (1-based) character of s found in chars, or -1."""
    return _nth(_char_positions(s, chars), idx)


def concat(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def compare(s1: str | None, s2: str | None, case_sensitive: bool = True) -> int:
    """Compare two strings, returning -1, 0 or 1.

    None sorts before every string; two Nones are equal.
    """
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    if not case_sensitive:
        s1, s2 = s1.lower(), s2.lower()
    return (s1 > s2) - (s1 < s2)


def extract_substring(s: str, start: int, length: int) -> str | None:
    """Return up to length characters of s from start, or None if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return None
    return s[start:start + length]


def extract_substring_str(s: str, sub: str, length: int) -> str | None:
    """Return up to length characters of s from the first occurrence of sub."""
    start = find_str(s, sub)
    return None if start == -1 else extract_substring(s, start, length)


def extract_substring_char(s: str, c: str, length: int) -> str | None:
    """Return up to length characters of s from the first c."""
    start = find(s, c)
    return None if start == -1 else extract_substring(s, start, length)


def split_char(s: str, c: str) -> list[str]:
    """Split s on c, dropping empty pieces."""
    return [piece for piece in s.split(_check_char(c)) if piece]


def split_str(s: str, sub: str) -> list[str]:
    """Split s on sub, dropping empty pieces."""
    return [piece for piece in s.split(_check_sub(sub)) if piece]


def split_any(s: str, chars: str | None = None) -> list[str]:
    """Split s on any character in chars (whitespace by default), dropping empty pieces."""
    if chars is None:
        chars = WHITESPACE
    if not chars:
        return [s] if s else []
    pattern = "[" + "".join(re.escape(ch) for ch in chars) + "]"
    return [piece for piece in re.split(pattern, s) if piece]


def split_lines(s: str) -> list[str]:
    """Split s on newline, carriage return and form feed, dropping empty lines."""
    return split_any(s, _LINE_BREAKS)


def single_space(s: str) -> str:
    """Trim s and collapse every run of whitespace into one space."""
    return _WHITESPACE_RUN.sub(" ", trim(s))