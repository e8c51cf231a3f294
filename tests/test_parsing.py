import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    INT_MAX,
    InputError,
    check_duplicates,
    is_sorted,
    parse_arguments,
    parse_number,
)


def test_parse_simple_number():
    assert parse_number("42") == 42


def test_parse_int_max():
    assert parse_number("2147483647") == INT_MAX


def test_parse_above_int_max_fails():
    with pytest.raises(InputError):
        parse_number("2147483648")


def test_parse_very_long_number_fails():
    with pytest.raises(InputError):
        parse_number("9" * 40)


@pytest.mark.parametrize("text", ["-5", "+5", "12a", "a", " 1", "1.5", "١٢"])
def test_parse_rejects_non_digits(text):
    with pytest.raises(InputError):
        parse_number(text)


def test_parse_empty_reads_as_zero():
    assert parse_number("") == 0


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_number("x")


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1", "1"])


def test_check_duplicates_raises():
    with pytest.raises(InputError):
        check_duplicates([1, 2, 1])


def test_check_duplicates_accepts_distinct():
    values = [3, 1, 2]
    check_duplicates(values)
    assert values == [3, 1, 2]


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert not is_sorted([2, 1])
    assert is_sorted([])
    assert is_sorted([7])


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["5", "7", "5"])


def test_parse_arguments_rejects_bad_number():
    with pytest.raises(InputError):
        parse_arguments(["1", "-2", "3"])


@given(st.integers(0, INT_MAX))
def test_parse_round_trip(value):
    assert parse_number(str(value)) == value


@given(st.integers(0, INT_MAX), st.integers(1, 5))
def test_parse_accepts_leading_zeros(value, zeros):
    assert parse_number("0" * zeros + str(value)) == value


@given(st.lists(st.integers(0, 10_000), unique=True, max_size=30))
def test_parse_arguments_round_trip(values):
    assert parse_arguments([str(v) for v in values]) == values


@given(st.lists(st.integers(-100, 100), max_size=30))
def test_sorted_lists_are_sorted(values):
    assert is_sorted(sorted(values))


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=30))
def test_duplicated_value_always_detected(values):
    with pytest.raises(InputError):
        check_duplicates(values + [values[0]])