import pytest

from pushswap.parsing import (
    InputError,
    atol,
    count_words,
    is_valid_number,
    parse_args,
    split_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [(" \t-42abc", -42), ("+7", 7), ("2147483647", 2147483647), ("-2147483648", -2147483648)],
)
def test_atol_reads_leading_number(text, expected):
    assert atol(text) == expected


def test_atol_without_digits_is_zero():
    assert atol("abc") == 0
    assert atol("") == 0


@pytest.mark.parametrize("text", ["2147483647", "-2147483648", "+5", "0", "-0"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483649", "", "-", "+", "12a", " 1", "1 ", "--1", "1\t"]
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


@pytest.mark.parametrize("text", ["", "   ", "1 2 3", "  1  2 3 ", "abc", " a  bb   ccc"])
def test_count_words_matches_split(text):
    assert count_words(text, " ") == len(split_words(text, " "))


def test_split_words_drops_empty_pieces():
    assert split_words("  1  2 3 ", " ") == ["1", "2", "3"]


def test_split_words_only_on_given_separator():
    assert split_words("1\t2 3", " ") == ["1\t2", "3"]


def test_bad_separator_raises():
    with pytest.raises(ValueError):
        count_words("a b", "  ")
    with pytest.raises(ValueError):
        split_words("a b", "")


def test_parse_args_mixes_quoted_and_separate():
    assert parse_args(["3 2", "1"]) == [3, 2, 1]


def test_parse_args_blank_argument_gives_nothing():
    assert parse_args(["   "]) == []


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["+0", "-0"], ["1 a"], ["2147483648"], ["1\t2"], ["4 -"], ["5", "3 5"]],
)
def test_parse_args_rejects(args):
    with pytest.raises(InputError):
        parse_args(args)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_args(["x"])
    assert issubclass(InputError, ValueError)