import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    check_signs,
    parse_arguments,
    parse_int,
    split_arguments,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-42", -42), ("+42", 42), ("  17", 17), ("\t9", 9)],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["4a", "+-5", "5-3", "1.5", "--1"])
def test_parse_int_rejects_bad_characters(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_int("x")


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("abc")


def test_split_arguments_joins_and_splits():
    assert split_arguments(["1 2", "3"]) == ["1", "2", "3"]
    assert split_arguments(["  4   5 ", "6"]) == ["4", "5", "6"]


def test_split_arguments_empty():
    assert split_arguments([""]) == []


@pytest.mark.parametrize("token", ["-5", "+5", "12"])
def test_check_signs_accepts(token):
    assert check_signs(token) == token


@pytest.mark.parametrize("token", ["-", "+", "--5", "-+5", "5-", "+a"])
def test_check_signs_rejects(token):
    with pytest.raises(InputError):
        check_signs(token)


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 -1", "2"]) == [3, -1, 2]


def test_parse_arguments_accepts_int_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [INT_MAX, INT_MIN]


@pytest.mark.parametrize("arg", ["2147483648", "-2147483649", "99999999999"])
def test_parse_arguments_rejects_out_of_range(arg):
    with pytest.raises(InputError):
        parse_arguments([arg])


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1 2 3", "2"])


def test_parse_arguments_rejects_lone_sign():
    with pytest.raises(InputError):
        parse_arguments(["1", "-"])


def test_parse_arguments_rejects_letters():
    with pytest.raises(InputError):
        parse_arguments(["1", "two"])


def test_parse_arguments_round_trip():
    values = [5, -3, 0, 12, INT_MAX]
    assert parse_arguments([" ".join(str(value) for value in values)]) == values