"""
vocab/state.py

What this file does:
- Counts word occurrences across the lines of one input (case-sensitive).
- Keeps the distinct words in first-seen order and sorts them
  alphabetically, ignoring case, once counting is done.

How it fits:
- pipeline/run.py feeds it the lines of the input file.
- report/html.py and report/export.py read `words` (the row order) and
  `counts` (the value per row).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import AbstractSet, Callable, Dict, Iterable, Iterator, List, Tuple

from ..text.tokenize import SEPARATORS, is_word, iter_tokens


@dataclass
class WordCounts:
    counts: Dict[str, int] = field(default_factory=dict)
    words: List[str] = field(default_factory=list)

    def add(self, word: str) -> None:
        if word in self.counts:
            self.counts[word] += 1
        else:
            self.counts[word] = 1
            self.words.append(word)

    @property
    def distinct(self) -> int:
        return len(self.words)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def rows(self) -> Iterator[Tuple[str, int]]:
        for word in self.words:
            if word not in self.counts:
                raise KeyError(f"word {word!r} has no count (words and counts out of sync)")
            yield word, self.counts[word]


def aggregate(
    lines: Iterable[str],
    separators: AbstractSet[str] = SEPARATORS,
) -> WordCounts:
    """
    Tokenize each line on its own and count the word tokens.

    Lines are never joined, so a word broken across two lines counts as two
    words. Separator runs are dropped.
    """
    if lines is None:
        raise ValueError("lines must not be None")

    wc = WordCounts()
    for line in lines:
        for tok in iter_tokens(line, separators):
            if is_word(tok, separators):
                wc.add(tok)
    return wc


def compare_ignore_case(a: str, b: str) -> int:
    la, lb = a.lower(), b.lower()
    if la < lb:
        return -1
    if la > lb:
        return 1
    return 0


def sort_alphabetically(
    words: List[str],
    compare: Callable[[str, str], int] = compare_ignore_case,
) -> List[str]:
    # list.sort is stable: words equal under `compare` keep first-seen order
    words.sort(key=cmp_to_key(compare))
    return words


def count_words(
    lines: Iterable[str],
    separators: AbstractSet[str] = SEPARATORS,
) -> WordCounts:
    wc = aggregate(lines, separators)
    sort_alphabetically(wc.words)
    return wc
