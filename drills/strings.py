"""Exercises on strings and lists of words."""

from __future__ import annotations

from typing import Sequence


def count_good_substrings(s: str) -> int:
    """Count the substrings of length three whose characters all differ."""
    return sum(
        1 for a, b, c in zip(s, s[1:], s[2:]) if a != b and a != c and b != c
    )


def find_words_containing(words: Sequence[str], x: str) -> list[int]:
    """Return the indices of the words that contain the character ``x``."""
    return [index for index, word in enumerate(words) if x in word]


def clear_digits(s: str) -> str:
    """Remove every digit together with the nearest non-digit to its left."""
    kept: list[str] = []
    for char in s:
        if "0" <= char <= "9":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def find_restaurant(list1: Sequence[str], list2: Sequence[str]) -> list[str]:
    """Return the common entries with the smallest index sum, in ``list1`` order."""
    best: int | None = None
    result: list[str] = []
    for i, first in enumerate(list1):
        for j, second in enumerate(list2):
            if first != second:
                continue
            if best is None or i + j < best:
                best = i + j
                result = [first]
            elif i + j == best:
                result.append(first)
    return result