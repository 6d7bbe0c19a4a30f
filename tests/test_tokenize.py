import pytest

from word_count_report.text.tokenize import (
    SEPARATORS,
    is_separator,
    is_word,
    iter_tokens,
    next_word_or_separator,
)


def test_separator_set():
    assert SEPARATORS == frozenset({",", " ", ".", "-", "?", "!"})
    for ch in ",.-?! ":
        assert is_separator(ch, SEPARATORS)
    for ch in "aZ0'\t;:":
        assert not is_separator(ch, SEPARATORS)


def test_word_run_stops_at_first_separator():
    assert next_word_or_separator("hello, world", 0, SEPARATORS) == "hello"


def test_separator_run_is_maximal():
    assert next_word_or_separator("hello, world", 5, SEPARATORS) == ", "
    assert next_word_or_separator("a -?!. b", 1, SEPARATORS) == " -?!. "


def test_run_from_middle_of_word():
    assert next_word_or_separator("hello, world", 2, SEPARATORS) == "llo"


def test_last_index_gives_single_char():
    assert next_word_or_separator("abc", 2, SEPARATORS) == "c"
    assert next_word_or_separator("abc.", 3, SEPARATORS) == "."


def test_custom_separators_are_honoured():
    assert next_word_or_separator("a;b c", 0, frozenset({";"})) == "a"
    assert next_word_or_separator("a;b c", 2, frozenset({";"})) == "b c"


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_position_out_of_range(position):
    with pytest.raises(ValueError):
        next_word_or_separator("abc", position, SEPARATORS)


def test_empty_text_has_no_valid_position():
    with pytest.raises(ValueError):
        next_word_or_separator("", 0, SEPARATORS)


def test_none_arguments_rejected():
    with pytest.raises(ValueError):
        next_word_or_separator(None, 0, SEPARATORS)
    with pytest.raises(ValueError):
        next_word_or_separator("abc", 0, None)


@pytest.mark.parametrize("text", [
    "the cat and the dog.",
    "  leading and trailing  ",
    "...",
    "x",
    "Wait - what?! No, never...",
    "tab\tis not a separator",
])
def test_tokens_cover_text_and_are_homogeneous(text):
    tokens = list(iter_tokens(text, SEPARATORS))
    assert "".join(tokens) == text
    for tok in tokens:
        assert tok
        classes = {is_separator(ch, SEPARATORS) for ch in tok}
        assert len(classes) == 1
    # maximal: neighbours always switch class
    for a, b in zip(tokens, tokens[1:]):
        assert is_word(a, SEPARATORS) != is_word(b, SEPARATORS)


def test_iter_tokens_empty():
    assert list(iter_tokens("", SEPARATORS)) == []


def test_is_word():
    assert is_word("dog", SEPARATORS)
    assert not is_word(". ", SEPARATORS)
    assert not is_word("", SEPARATORS)
