"""
text/tokenize.py

What this file does:
- Defines the fixed separator set (comma, space, period, hyphen, ?, !).
- Splits a line into maximal runs of either separator characters or
  word characters ("tokens").

How it fits:
- vocab/state.py drives the tokenizer over every line and keeps only the
  word tokens.
- Separator runs are returned too so that the tokens of a line always
  concatenate back to the line itself.
"""

from __future__ import annotations

from typing import AbstractSet, Iterator

SEPARATORS: frozenset[str] = frozenset({",", " ", ".", "-", "?", "!"})


def is_separator(ch: str, separators: AbstractSet[str] = SEPARATORS) -> bool:
  return ch in separators


def is_word(token: str, separators: AbstractSet[str] = SEPARATORS) -> bool:
  # tokens are homogeneous, the first character decides
  return bool(token) and not is_separator(token[0], separators)


def next_word_or_separator(
    text: str,
    position: int,
    separators: AbstractSet[str] = SEPARATORS,
) -> str:
  """
  Return the maximal run starting at text[position] whose characters are all
  separators or all non-separators (same class as text[position]).

  Requires 0 <= position < len(text).
  """
  if text is None:
    raise ValueError("text must not be None")
  if separators is None:
    raise ValueError("separators must not be None")
  if position < 0:
    raise ValueError(f"position must be >= 0, got {position}")
  if position >= len(text):
    raise ValueError(f"position must be < len(text) ({len(text)}), got {position}")

  sep = is_separator(text[position], separators)
  end = position + 1
  while end < len(text) and is_separator(text[end], separators) == sep:
    end += 1
  return text[position:end]


def iter_tokens(text: str, separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
  i = 0
  while i < len(text):
    tok = next_word_or_separator(text, i, separators)
    yield tok
    i += len(tok)
